# src/tag_inventory_cli/console.py
"""
Shared rich console and logging setup.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

from tag_inventory_cli.config import LOG_LEVEL

# botocore noise
logging.getLogger("botocore.credentials").setLevel(logging.WARNING)
logging.getLogger("botocore.loaders").setLevel(logging.WARNING)
logging.getLogger("botocore.session").setLevel(logging.WARNING)

custom_theme = Theme({
    "info": "cyan",
    "warning": "yellow",
    "error": "bold red",
    "success": "bold green",
    "service": "bold blue",
})

console = Console(theme=custom_theme)
err_console = Console(theme=custom_theme, stderr=True)


def setup_logging(level: str | int = LOG_LEVEL) -> logging.Logger:
    """Attaches a RichHandler (on stderr) to the package logger and returns it."""
    logger = logging.getLogger("tag_inventory_cli")
    logger.setLevel(level)

    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(console=err_console, rich_tracebacks=True, show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
        logger.addHandler(handler)

    return logger
