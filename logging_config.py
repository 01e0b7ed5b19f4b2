from __future__ import annotations

import logging
import os
import sys
import threading
from collections import deque
from typing import List

_DEFAULT_LEVEL = os.getenv("DRONEPATH_LOG_LEVEL", "INFO").upper()
_RESOLVED_LEVEL = logging.getLevelName(_DEFAULT_LEVEL)
if isinstance(_RESOLVED_LEVEL, str):
    _RESOLVED_LEVEL = logging.INFO

_BUFFER_SIZE = int(os.getenv("DRONEPATH_LOG_BUFFER", "500"))
_LOG_FORMAT = "%(asctime)s | %(levelname)s | %(run_id)s | DronePath.%(module)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_buffer_lock = threading.Lock()
_log_buffer: deque[str] = deque(maxlen=_BUFFER_SIZE)
_run_id_lock = threading.Lock()
_CURRENT_RUN_ID = "-"


class RunIdFilter(logging.Filter):
    """Inject the run_id into each log record."""
    def filter(self, record):
        record.run_id = _CURRENT_RUN_ID
        return True


class _BufferingHandler(logging.Handler):
    """Capture log records into an in-memory ring buffer."""

    def __init__(self) -> None:
        super().__init__(level=logging.DEBUG)
        self._formatter = logging.Formatter(_LOG_FORMAT, _DATE_FORMAT)

    def emit(self, record: logging.LogRecord) -> None:
        message = self._formatter.format(record)
        with _buffer_lock:
            _log_buffer.append(message)


_logging_configured = False


def _configure_logging() -> None:
    global _logging_configured
    if _logging_configured:
        return

    formatter = logging.Formatter(_LOG_FORMAT, _DATE_FORMAT)
    stream_handler = logging.StreamHandler(sys.__stderr__)
    stream_handler.setFormatter(formatter)
    stream_handler.setLevel(_RESOLVED_LEVEL)

    buffer_handler = _BufferingHandler()

    # Ensure every record has run_id
    run_filter = RunIdFilter()
    stream_handler.addFilter(run_filter)
    buffer_handler.addFilter(run_filter)

    root_logger = logging.getLogger()
    root_logger.setLevel(_RESOLVED_LEVEL)

    # Avoid attaching duplicate handlers if other configuration already exists.
    if not any(type(handler) is logging.StreamHandler for handler in root_logger.handlers):
        root_logger.addHandler(stream_handler)

    if not any(isinstance(handler, _BufferingHandler) for handler in root_logger.handlers):
        root_logger.addHandler(buffer_handler)

    _logging_configured = True


def set_run_id(run_id: str) -> None:
    """Tag subsequent records with ``run_id`` (one per UI session / CLI run)."""
    global _CURRENT_RUN_ID
    with _run_id_lock:
        _CURRENT_RUN_ID = run_id or "-"


def get_logger(name: str) -> logging.Logger:
    """Return a logger configured with the unified DronePath format."""
    _configure_logging()
    logger = logging.getLogger(name)
    return logger


def get_recent_output(limit: int = 200) -> List[str]:
    """Return the most recent log lines up to ``limit`` entries."""
    if limit <= 0:
        return []
    with _buffer_lock:
        return list(_log_buffer)[-limit:]


def export_recent_output(limit: int = 200) -> str:
    """Render recent output lines as a single newline-delimited string."""
    return "\n".join(get_recent_output(limit))


def configure_logging(structured: bool = True, outputs_dir: str | None = None) -> str:
    """可选入口：追加文件输出到 outputs/dronepath.log，返回日志文件路径。

    - structured=True: 与控制台一致的管道分隔格式
    - structured=False: "%(message)s"

    不改变已有的缓冲/控制台配置，仅追加/更新文件 handler。
    """
    _configure_logging()  # 确保基础流和缓冲已经装好

    fmt = _LOG_FORMAT if structured else "%(message)s"
    formatter = logging.Formatter(fmt=fmt, datefmt=_DATE_FORMAT)

    outputs_dir = outputs_dir or os.path.join(os.getcwd(), "outputs")
    os.makedirs(outputs_dir, exist_ok=True)
    log_path = os.path.join(outputs_dir, "dronepath.log")

    file_handler_exists = False
    root_logger = logging.getLogger()
    for h in list(root_logger.handlers):
        if isinstance(h, logging.FileHandler) and getattr(h, "baseFilename", None) == os.path.abspath(log_path):
            # 将已有文件 handler 调整为最新 formatter
            h.setFormatter(formatter)
            file_handler_exists = True
    if not file_handler_exists:
        fh = logging.FileHandler(log_path, encoding="utf-8")
        fh.setLevel(_RESOLVED_LEVEL)
        # 保证 run_id 注入
        fh.addFilter(RunIdFilter())
        fh.setFormatter(formatter)
        root_logger.addHandler(fh)
    return log_path


__all__ = [
    "get_logger",
    "set_run_id",
    "get_recent_output",
    "export_recent_output",
    "configure_logging",
]
