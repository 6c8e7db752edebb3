import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from ..config import Config


def setup_logging(level: Optional[str] = None, console: Optional[Console] = None) -> logging.Logger:
    """Route log records through rich. Meant for applications, the library itself never calls it."""
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    logging.basicConfig(
        level=(level or Config.get_log_level()).upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )
    return logging.getLogger("llm_sdk")


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
