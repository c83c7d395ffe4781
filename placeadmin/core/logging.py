"""Logging utilities for placeadmin modules."""

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger that inherits from the root logger.
    
    Loggers obtained here work with basicConfig() without an explicit
    setup_logging() call. The logger will:
    - Propagate to root logger
    - Only set a default level if root logger has no handlers
    
    Args:
        name: Logger name (e.g. 'placeadmin.api')
        
    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.propagate = True
    
    root_logger = logging.getLogger()
    if not root_logger.handlers:
        logger.setLevel(logging.WARNING)
    
    return logger
