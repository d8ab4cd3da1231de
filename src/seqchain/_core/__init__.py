from ._config import Config, get_config, set_config
from ._format import can_preview
from ._log import logger
from ._main import Pipeable, check_count

__all__ = [
    "Config",
    "Pipeable",
    "can_preview",
    "check_count",
    "get_config",
    "logger",
    "set_config",
]
