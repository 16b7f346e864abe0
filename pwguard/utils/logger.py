import logging
import sys

from logging.handlers import RotatingFileHandler
from pathlib import Path

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
MAX_LOG_BYTES = 10 * 1024 * 1024


def _rotating_handler(path: Path, level: int, backups: int) -> RotatingFileHandler:
    handler = RotatingFileHandler(
        filename=path,
        maxBytes=MAX_LOG_BYTES,
        backupCount=backups,
        encoding="utf-8",
    )
    handler.setLevel(level)
    return handler


def _setup_logging(
    app_name: str = "pwguard",
    log_level: str = "INFO",
    log_dir: Path = None,
    console_output: bool = False,
):
    """
    Attach Pwguard's handlers to the root logger.

    Writes `<app_name>.log` with everything at `log_level` and up, plus
    `<app_name>_errors.log` with ERROR and up. Safe to call again: handlers
    from an earlier call are replaced, foreign handlers are left alone.

    Returns:
        (application log path, error log path)
    """
    if log_dir is None:
        log_dir = Path(__file__).resolve().parent.parent.parent / "logs"

    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    level = getattr(logging, log_level.upper(), logging.INFO)
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in list(root_logger.handlers):
        if getattr(handler, "_pwguard_handler", False):
            root_logger.removeHandler(handler)
            handler.close()

    app_log_file = log_dir / f"{app_name}.log"
    error_log_file = log_dir / f"{app_name}_errors.log"

    handlers = [
        _rotating_handler(app_log_file, level, backups=5),
        _rotating_handler(error_log_file, logging.ERROR, backups=10),
    ]
    if console_output:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level)
        handlers.append(console_handler)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
        handler._pwguard_handler = True
        root_logger.addHandler(handler)

    # one INFO line per request otherwise
    logging.getLogger("werkzeug").setLevel(logging.WARNING)

    logger = logging.getLogger(__name__)
    logger.info(
        f"{app_name} logging ready: level={log_level}, stdout={console_output}, "
        f"log={app_log_file}, errors={error_log_file}"
    )

    return app_log_file, error_log_file
