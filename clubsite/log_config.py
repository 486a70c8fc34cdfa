"""Logging configuration, chosen once at startup from the environment."""

DEVELOPMENT = "development"


def build_logging_config(environment: str, level: str = "INFO") -> dict:
    """Return a ``LOGGING`` dict for Django.

    Development gets colored console output; every other environment gets
    plain timestamped lines suitable for a log collector.
    """
    formatter = "colored" if environment == DEVELOPMENT else "plain"
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "colored": {
                "()": "colorlog.ColoredFormatter",
                "format": (
                    "%(log_color)s%(asctime)s - %(name)s - %(levelname)s - %(message)s"
                ),
                "datefmt": "%Y-%m-%d %H:%M:%S",
                "log_colors": {
                    "DEBUG": "white",
                    "INFO": "cyan",
                    "WARNING": "yellow",
                    "ERROR": "red",
                    "CRITICAL": "bold_red,bg_white",
                },
            },
            "plain": {
                "format": (
                    "%(asctime)s %(levelname)s %(name)s "
                    f"env={environment} %(message)s"
                ),
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": formatter,
            },
        },
        "root": {
            "handlers": ["console"],
            "level": level,
        },
        "loggers": {
            "django": {
                "handlers": ["console"],
                "level": "WARNING",
                "propagate": False,
            },
            "registrations": {
                "level": level,
            },
        },
    }
