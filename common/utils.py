import socket
import logging
from datetime import datetime
import pytz

from config import config

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"

logger = logging.getLogger("causal_chat")


def setup_logging(log_file=None, level=None):
    """
    Attach a file handler and a console handler to the chat logger.
    Safe to call more than once; handlers are only installed the first time.
    """
    if logger.handlers:
        return logger
    formatter = logging.Formatter(LOG_FORMAT)
    handlers = [
        logging.FileHandler(log_file or config.LOG_FILE),
        logging.StreamHandler()
    ]
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.setLevel((level or config.LOG_LEVEL).upper())
    return logger


def get_current_time(timezone: str = "UTC") -> str:
    """
    Returns current timestamp in given timezone.
    """
    tz = pytz.timezone(timezone)
    return datetime.now(tz).strftime("%Y-%m-%d %H:%M:%S")


def get_self_ip() -> str:
    """
    Resolve the IPv4 address of this host through a host-name lookup.
    Falls back to the loopback address when the lookup fails.
    """
    hostname = socket.gethostname()
    try:
        infos = socket.getaddrinfo(hostname, None, socket.AF_INET)
    except socket.gaierror as e:
        log_event(f"[SERVER] Could not resolve {hostname}: {e}", logging.WARNING)
        return "127.0.0.1"
    for family, _, _, _, sockaddr in infos:
        if family == socket.AF_INET:
            return sockaddr[0]
    return "127.0.0.1"


def log_event(event: str, level: int = logging.INFO):
    """
    Helper to log system events in a consistent way.
    """
    logger.log(level, event)
