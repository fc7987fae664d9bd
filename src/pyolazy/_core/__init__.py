from ._config import Config, get_config, set_config
from ._errors import NotEnumerableError
from ._logger import logger, setup_logger
from ._main import Pipeable

__all__ = [
    "Config",
    "NotEnumerableError",
    "Pipeable",
    "get_config",
    "logger",
    "set_config",
    "setup_logger",
]
