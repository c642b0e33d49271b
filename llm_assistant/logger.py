import logging
import os
from logging.handlers import RotatingFileHandler

from rich.console import Console
from rich.logging import RichHandler

from .config import Config


def setup_logging(config: Config):
    """Set up logging for the application."""
    # Root logger configuration
    root_logger = logging.getLogger()
    level = logging.INFO if config.verbose else logging.WARNING
    root_logger.setLevel(level)

    # Replace handlers from an earlier call instead of stacking them
    for handler in list(root_logger.handlers):
        if isinstance(handler, (RichHandler, RotatingFileHandler)):
            root_logger.removeHandler(handler)
            handler.close()

    # Console handler (with Rich), on stderr so it never mixes with command output
    console = Console(stderr=True)
    rich_handler = RichHandler(
        console=console,
        show_time=True,
        show_path=False,
        rich_tracebacks=True
    )
    rich_handler.setLevel(level)
    root_logger.addHandler(rich_handler)

    # File handler (Rotating), only when a log file was asked for
    if config.log_file:
        log_dir = os.path.dirname(os.path.abspath(config.log_file))
        os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            config.log_file, maxBytes=10*1024*1024, backupCount=5  # 10 MB per file, 5 backups
        )
        file_handler.setLevel(logging.INFO)
        file_formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        file_handler.setFormatter(file_formatter)
        root_logger.addHandler(file_handler)
        if not config.verbose:
            root_logger.setLevel(logging.INFO)

    # The ollama client logs every request through httpx
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    logger = logging.getLogger(__name__)
    logger.info(f"Logger initialized. Log file: {config.log_file or 'none'}")
