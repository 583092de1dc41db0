import logging
import os
import config

# Setup Log Dir
os.makedirs(config.LOG_DIR, exist_ok=True)

log_file = os.path.join(config.LOG_DIR, "session.log")

# Configure Singleton Logger
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
    handlers=[
        logging.FileHandler(log_file, mode='a', encoding='utf-8'),
        logging.StreamHandler() # Also print to console
    ]
)

logger = logging.getLogger("DigitalRain")

def log(msg, level="info"):
    if level == "info":
        logger.info(msg)
    elif level == "error":
        logger.error(msg)
    elif level == "warning":
        logger.warning(msg)
    elif level == "debug":
        logger.debug(msg)

def detach_console():
    """Remove console handlers while a full-screen front-end owns the terminal."""
    root = logging.getLogger()
    detached = [h for h in root.handlers
                if isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)]
    for handler in detached:
        root.removeHandler(handler)
    return detached

def attach(handlers):
    root = logging.getLogger()
    for handler in handlers:
        root.addHandler(handler)
