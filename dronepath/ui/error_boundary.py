from __future__ import annotations
from pathlib import Path
from typing import Callable
import traceback
import datetime as _dt
import logging
import streamlit as st

from .i18n import tr

logger = logging.getLogger(__name__)

REPORT_NAME = "ui_last_exception.txt"


def _write_exception(report_path: Path, page: str, exc: BaseException) -> None:
    report_path.parent.mkdir(parents=True, exist_ok=True)
    ts = _dt.datetime.now().isoformat(timespec="seconds")
    content = [
        "=== UI EXCEPTION ===",
        f"time: {ts}",
        f"page: {page}",
        f"type: {type(exc).__name__}",
        f"message: {exc}",
        "",
        "".join(traceback.format_exception(type(exc), exc, exc.__traceback__)),
        ""
    ]
    report_path.write_text("\n".join(content), encoding="utf-8", errors="ignore")


def safe_render(page: str, fn: Callable[[], None], reports_dir: str | Path = "reports") -> bool:
    """渲染页面；异常写入报告文件并显示错误面板。返回是否渲染成功。"""
    try:
        fn()
        return True
    except Exception as e:
        report_path = Path(reports_dir) / REPORT_NAME
        logger.exception(f"page '{page}' failed")
        _write_exception(report_path, page, e)
        st.error(tr("page_error").format(path=report_path))
        with st.expander(tr("page_error_detail")):
            st.code(f"{type(e).__name__}: {e}")
        return False
