import logging, sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOGGER_NAME = "sol_dash"
FMT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def data_dir(home: Path) -> Path:
    home.mkdir(parents=True, exist_ok=True)
    return home


def get_logger(log_path: Path, level: str = "INFO", verbose: bool = False):
    logger = logging.getLogger(LOGGER_NAME)
    if logger.handlers:
        return logger
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    fmt = logging.Formatter(FMT)
    try:
        data_dir(log_path.parent)
        handler = RotatingFileHandler(log_path, maxBytes=1_000_000, backupCount=3)
        handler.setFormatter(fmt)
        logger.addHandler(handler)
    except OSError as e:
        # read-only home: keep running, the command output does not depend on the log
        print(f"[sol-dash] log file disabled: {e}", file=sys.stderr)
    if verbose:
        # stdout carries command output, so log echo goes to stderr
        sh = logging.StreamHandler(sys.stderr)
        sh.setFormatter(fmt)
        logger.addHandler(sh)
        logger.setLevel(logging.DEBUG)
    logger.propagate = False
    return logger
