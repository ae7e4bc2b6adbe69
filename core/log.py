"""
HOOKMAN - Logging
Logger do HOOKMAN renderizado pelo rich.
"""

import logging

from rich.logging import RichHandler


LOGGER_NAME = "hookman"


def configure_logging(verbose: bool = False) -> logging.Logger:
    """
    Configura e retorna o logger do HOOKMAN.

    Pode ser chamada mais de uma vez: handlers anteriores são substituídos.

    Args:
        verbose: Se True, habilita nível DEBUG
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()

    handler = RichHandler(
        show_time=False,
        show_path=False,
        markup=False,
        rich_tracebacks=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    logger.propagate = False

    return logger


__all__ = ["LOGGER_NAME", "configure_logging"]
