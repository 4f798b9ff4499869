import logging
import os
import sys

# Debug logging controlled by environment variable STUDYGUIDE_DEBUG
_DEBUG_ENV = "STUDYGUIDE_DEBUG"
_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


def debug_enabled() -> bool:
    return os.environ.get(_DEBUG_ENV, "").lower() in {"1", "true", "yes"}


def configure_logging() -> None:
    """Attach a stderr handler to the package logger once per process."""
    package_logger = logging.getLogger("studyguide")
    package_logger.setLevel(logging.DEBUG if debug_enabled() else logging.WARNING)
    if package_logger.handlers:
        return
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT))
    package_logger.addHandler(handler)
