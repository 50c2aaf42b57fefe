"""
Centralized logging configuration for the Category API.

Call setup_logging() once at application startup. Modules log through
logging.getLogger(__name__) and inherit this configuration.
"""
import logging
import logging.handlers
import json
import sys
from datetime import datetime, timezone
from pathlib import Path
from contextvars import ContextVar

# ── Context variable for request correlation ──
request_id_var: ContextVar[str] = ContextVar("request_id", default="-")

# Attributes copied from LogRecord extras into JSON lines
EXTRA_FIELDS = (
    "method", "path", "status_code", "duration_ms",
    "client_ip", "request_size", "response_size",
)

NOISY_LOGGERS = (
    "uvicorn.access", "httpcore", "httpx",
    "asyncio", "watchfiles", "aiosqlite",
    "sqlalchemy.engine", "sqlalchemy.pool",
)

PLAIN_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def get_request_id() -> str:
    """Get the current request ID from context."""
    return request_id_var.get("-")


class JSONFormatter(logging.Formatter):
    """Outputs each log record as a single JSON line."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "request_id": get_request_id(),
        }
        if record.exc_info and record.exc_info[0] is not None:
            entry["exception"] = self.formatException(record.exc_info)
        for key in EXTRA_FIELDS:
            if hasattr(record, key):
                entry[key] = getattr(record, key)
        return json.dumps(entry, ensure_ascii=False)


class ColoredFormatter(logging.Formatter):
    """
    Colored console output.
    Format: [HH:MM:SS] LEVEL    logger - message  [req:id]
    """

    COLORS = {
        "DEBUG":    "\033[36m",
        "INFO":     "\033[32m",
        "WARNING":  "\033[33m",
        "ERROR":    "\033[31m",
        "CRITICAL": "\033[1;31m",
    }
    RESET = "\033[0m"
    DIM = "\033[2m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, self.RESET)
        time_str = datetime.fromtimestamp(record.created).strftime("%H:%M:%S")

        # category_api.services.category_service -> category_service
        name = record.name.rsplit(".", 1)[-1] if record.name.count(".") > 1 else record.name

        req_id = get_request_id()
        req_tag = f" {self.DIM}[req:{req_id[:8]}]{self.RESET}" if req_id != "-" else ""

        line = (
            f"{self.DIM}[{time_str}]{self.RESET} "
            f"{color}{record.levelname:<8}{self.RESET} "
            f"{name} - {record.getMessage()}{req_tag}"
        )
        if record.exc_info and record.exc_info[0] is not None:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


def _file_handler(path: Path, level: int, backup_count: int, log_json: bool) -> logging.Handler:
    handler = logging.handlers.RotatingFileHandler(
        filename=str(path),
        maxBytes=10 * 1024 * 1024,  # 10 MB
        backupCount=backup_count,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(JSONFormatter() if log_json else logging.Formatter(PLAIN_FORMAT))
    return handler


def setup_logging(
    log_level: str = "INFO",
    log_dir: Path = Path("./logs"),
    log_json: bool = True,
) -> None:
    """
    Configure the root logger with console + file handlers.

    Args:
        log_level: Minimum log level (DEBUG, INFO, WARNING, ERROR).
        log_dir: Directory for log files.
        log_json: Whether to write JSON to log files.
    """
    level = getattr(logging, log_level.upper(), logging.INFO)

    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    root = logging.getLogger()
    root.setLevel(level)

    # Replace handlers left by basicConfig or an earlier call
    for handler in list(root.handlers):
        root.removeHandler(handler)
        if isinstance(handler, logging.handlers.RotatingFileHandler):
            handler.close()

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(level)
    console.setFormatter(ColoredFormatter())
    root.addHandler(console)

    root.addHandler(_file_handler(log_dir / "category_api.log", level, 5, log_json))
    root.addHandler(_file_handler(log_dir / "category_api.error.log", logging.ERROR, 3, log_json))

    for noisy in NOISY_LOGGERS:
        logging.getLogger(noisy).setLevel(logging.WARNING)

    # Keep uvicorn.error at INFO so startup messages show
    logging.getLogger("uvicorn.error").setLevel(logging.INFO)

    logging.getLogger("category_api").info(
        f"Logging configured: level={log_level}, dir={log_dir}, json={log_json}"
    )
