# basicmath/utils/logger.py
# ---------------------------------------------------------------
# Минимальный логгер пакета.
# ---------------------------------------------------------------

import logging

LOGGER_NAME = "BasicMath"


def init_logger(level=logging.INFO):
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    return logging.getLogger(LOGGER_NAME)


logger = init_logger()


def set_level(level) -> None:
    """Сменить уровень логгера («DEBUG», «INFO», … или число из logging)."""
    if isinstance(level, str):
        name = level.upper()
        resolved = logging.getLevelName(name)
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level!r}")
        level = resolved
    logger.setLevel(level)
