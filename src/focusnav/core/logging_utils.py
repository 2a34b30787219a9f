# src/focusnav/core/logging_utils.py
import logging
import sys
from pathlib import Path
from typing import List, Optional, Union
from focusnav.core.config import settings

PACKAGE_LOGGER = "focusnav"
LOG_FORMAT = '%(asctime)s - %(levelname)s - %(name)s - %(message)s'

# Handlers installed by the last setup_logging() call
_installed_handlers: List[logging.Handler] = []

def setup_logging(level: Optional[str] = None, file_path: Optional[Union[str, Path]] = None) -> logging.Logger:
    """
    Configure the focusnav package logger.

    Falls back to settings.LOG_LEVEL / settings.LOG_FILE when no explicit
    values are given. Calling it again replaces the handlers it installed
    previously instead of stacking new ones.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel((level or settings.LOG_LEVEL).upper())
    for handler in _installed_handlers:
        logger.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT)
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    _installed_handlers.append(console_handler)

    target = file_path or settings.LOG_FILE
    if target:
        path_obj = Path(target)
        path_obj.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path_obj, encoding='utf-8')
        file_handler.setFormatter(formatter)
        _installed_handlers.append(file_handler)

    for handler in _installed_handlers:
        logger.addHandler(handler)

    logger.debug(f"focusnav logging configured at level {logging.getLevelName(logger.level)}")
    return logger
