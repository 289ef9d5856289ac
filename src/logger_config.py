import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from src.paths import LOGS, ensure_dirs

LOGGER_NAME = "weatherwidget"


def setup_logging(log_dir: str | None = None, level: int = logging.INFO) -> logging.Logger:
    """Configure logging with rotation and formatting."""
    # Määritä lokihakemisto ja varmista että se on olemassa
    if log_dir is None:
        log_dir = str(LOGS)
        ensure_dirs()

    Path(log_dir).mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    console = logging.StreamHandler()
    console.setLevel(level)

    file_handler = RotatingFileHandler(
        Path(log_dir) / "weatherwidget.log",
        maxBytes=5_000_000,  # 5 MB
        backupCount=3,
    )

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    console.setFormatter(formatter)
    file_handler.setFormatter(formatter)

    # Lisää handlerit (jos ei jo lisätty)
    if not logger.handlers:
        logger.addHandler(console)
        logger.addHandler(file_handler)
    else:
        file_handler.close()

    return logger
