import functools
import logging
import os
import sys


def log_level(name, default=logging.WARNING) -> int:
    """Numeric level for a level name like "debug"; default for anything else."""
    level = logging.getLevelName(str(name).upper())
    return level if isinstance(level, int) else default


logging.basicConfig(
    level=log_level(os.environ.get("OSFETCH_LOG_LEVEL", "WARNING")),
    format="%(levelname)s: %(message)s",
)


def set_verbose():
    logging.getLogger().setLevel(logging.DEBUG)


def handle_errors(func):
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except SystemExit:
            raise
        except Exception as e:
            logging.error(f"{func.__name__} ▶ {e}")
            print(f"[!] {func.__name__} failed: {e}")
            sys.exit(1)

    return wrapper
