from ._result import Err, Ok, Result, ResultUnwrapError

__all__ = [
    "Err",
    "Ok",
    "Result",
    "ResultUnwrapError",
]
