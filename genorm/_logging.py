"""
genORM Logging Configuration.

The library logs through the "genorm" logger, which carries a NullHandler
by default. The CLI calls configure_logging(); embedding applications can
configure the logger as they see fit.

Example:
    import logging
    from genorm import configure_logging
    
    configure_logging(level=logging.DEBUG)
"""
import logging
from typing import Optional

logger = logging.getLogger("genorm")
logger.addHandler(logging.NullHandler())


def configure_logging(
    level: int = logging.INFO,
    format: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """
    Configure logging for the genORM generator.
    
    Args:
        level: Logging level (default: INFO)
        format: Log format string (default: "[%(levelname)s] genorm: %(message)s")
        handler: Custom handler (default: StreamHandler to stderr)
    """
    genorm_logger = logging.getLogger("genorm")
    genorm_logger.setLevel(level)
    
    # Remove existing handlers to avoid duplicates
    for h in genorm_logger.handlers[:]:
        if not isinstance(h, logging.NullHandler):
            genorm_logger.removeHandler(h)
    
    if handler is None:
        handler = logging.StreamHandler()
        if format is None:
            format = "[%(levelname)s] genorm: %(message)s"
        handler.setFormatter(logging.Formatter(format))
    
    genorm_logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a genORM submodule.
    
    Args:
        name: Module name (will be prefixed with "genorm.")
    
    Returns:
        Logger instance
    """
    if name.startswith("genorm."):
        return logging.getLogger(name)
    return logging.getLogger(f"genorm.{name}")
