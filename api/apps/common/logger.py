"""Provides loggers for use across the application."""

# Standard library imports
import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class LoggerFactory:
    """A simple factory for configuring standard loggers."""

    @staticmethod
    def get(name: str, level: int | str = logging.INFO) -> logging.Logger:
        """Creates or retrieves a logger with the given name and level.

        Attaches a stream handler that prints logs in a standard
        format to the console the first time a name is requested,
        so repeated calls do not duplicate output.

        Args:
            name: The logger name.

            level: The level, as an integer or level name
                (e.g., "DEBUG"). Defaults to 20 ("INFO").

        Returns:
            The logger.
        """
        logger = logging.getLogger(name)
        logger.setLevel(level)

        if not logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            logger.addHandler(handler)
            logger.propagate = False

        return logger
