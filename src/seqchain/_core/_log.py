"""Package logger.

The library never configures handlers itself: a `NullHandler` keeps it silent
until the application sets up logging, e.g. `logging.basicConfig(level=logging.DEBUG)`.
"""

import logging

logger = logging.getLogger("seqchain")
logger.addHandler(logging.NullHandler())
