import logging
from typing import Optional, Union

def get_logger(name: Optional[str] = None, level: Union[int, str, None] = None) -> logging.Logger:
    logger = logging.getLogger(name if name else __name__)
    if not logger.handlers:
        handler = logging.StreamHandler()  # stderr, stdout is reserved for the report
        fmt = logging.Formatter("[%(asctime)s] %(levelname)s - %(name)s: %(message)s",
                                datefmt="%H:%M:%S")
        handler.setFormatter(fmt)
        logger.addHandler(handler)
        logger.propagate = False
    if level is not None:
        logger.setLevel(level.upper() if isinstance(level, str) else level)
    return logger
