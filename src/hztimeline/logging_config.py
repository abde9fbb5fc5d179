"""
Logging Configuration
Sets up the package logger for the app and the CLI.
"""
import logging
import sys


def setup_logging(level: int | str = logging.INFO, log_file: str | None = None) -> None:
    """
    Configures the logger for the 'hztimeline' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG, "INFO")
        log_file: Optional path to save logs to a file.
    """
    logger = logging.getLogger("hztimeline")
    logger.setLevel(level)

    # Streamlit re-executes the script on every interaction; avoid stacking handlers
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging initialized.")
