import logging
import sys

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'

def setup_logging(level: str = "INFO"):
    """Configure logging for the climate stats run (stderr, stdout stays for the report)"""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt='%Y-%m-%d %H:%M:%S',
        stream=sys.stderr,
    )

def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a module"""
    return logging.getLogger(name)
