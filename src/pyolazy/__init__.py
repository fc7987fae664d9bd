from ._core import Config, NotEnumerableError, get_config, set_config, setup_logger
from ._enum import Enumerable, Enumerator
from ._range import Range
from ._results import NONE, NoneOption, Option, OptionUnwrapError, Some
from ._types import Indexed

__all__ = [
    "NONE",
    "Config",
    "Enumerable",
    "Enumerator",
    "Indexed",
    "NoneOption",
    "NotEnumerableError",
    "Option",
    "OptionUnwrapError",
    "Range",
    "Some",
    "get_config",
    "set_config",
    "setup_logger",
]
