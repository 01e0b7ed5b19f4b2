"""
主题偏好 - 唯一持久化的用户设置（light / dark）

ThemeStore 负责读写 YAML 偏好文件；inject_theme_css 按主题注入样式。
"""

from __future__ import annotations

import logging
from pathlib import Path

import streamlit as st
import yaml

logger = logging.getLogger(__name__)

THEMES = ("dark", "light")
DEFAULT_THEME = "dark"
THEME_ICONS = {"light": "☀️", "dark": "🌙"}

_THEME_CSS = {
    "dark": """
:root { --dp-bg: #0b1120; --dp-card: #111827; --dp-text: #e2e8f0; --dp-accent: #00f2ff; }
""",
    "light": """
:root { --dp-bg: #f8fafc; --dp-card: #ffffff; --dp-text: #0f172a; --dp-accent: #0891b2; }
""",
}

_BASE_CSS = """
.stApp { background: var(--dp-bg); color: var(--dp-text); }
.top-algo-card {
  background: var(--dp-card);
  border: 1px solid rgba(148, 163, 184, 0.25);
  border-radius: 10px;
  padding: 0.75rem 1rem;
  margin-bottom: 0.5rem;
}
.top-algo-card h3 { margin: 0 0 0.25rem 0; font-size: 1.05rem; }
.top-algo-card .confidence { color: var(--dp-accent); font-weight: 700; }
.ai-badge {
  display: inline-block;
  padding: 0.1rem 0.5rem;
  border-radius: 999px;
  background: var(--dp-accent);
  color: #0f172a;
  font-size: 0.8rem;
  font-weight: 700;
}
"""


class ThemeStore:
    """YAML 文件中的主题偏好：{theme: dark|light}。"""

    def __init__(self, path: str | Path, default: str = DEFAULT_THEME):
        if default not in THEMES:
            raise ValueError(f"Unknown theme '{default}', expected one of {list(THEMES)}")
        self.path = Path(path).expanduser()
        self.default = default

    def load(self) -> str:
        if not self.path.exists():
            return self.default
        try:
            payload = yaml.safe_load(self.path.read_text(encoding="utf-8")) or {}
        except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
            logger.warning(f"读取主题偏好失败 {self.path}: {e}")
            return self.default
        theme = payload.get("theme") if isinstance(payload, dict) else None
        if theme not in THEMES:
            return self.default
        return theme

    def save(self, theme: str) -> None:
        if theme not in THEMES:
            raise ValueError(f"Unknown theme '{theme}', expected one of {list(THEMES)}")
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(yaml.safe_dump({"theme": theme}), encoding="utf-8")

    @staticmethod
    def toggle(current: str) -> str:
        return "light" if current == "dark" else "dark"


def theme_css(theme: str) -> str:
    return _THEME_CSS.get(theme, _THEME_CSS[DEFAULT_THEME]) + _BASE_CSS


def inject_theme_css(theme: str) -> None:
    st.markdown(f"<style>{theme_css(theme)}</style>", unsafe_allow_html=True)


def render_theme_toggle(store: ThemeStore, label: str = "Theme") -> str:
    """侧边栏主题按钮：点击切换并立即写回偏好文件。"""
    if "theme" not in st.session_state:
        st.session_state["theme"] = store.load()

    current = st.session_state["theme"]
    if st.sidebar.button(f"{label} {THEME_ICONS[current]}", key="__theme_toggle__"):
        current = store.toggle(current)
        st.session_state["theme"] = current
        try:
            store.save(current)
        except OSError as e:
            logger.warning(f"保存主题偏好失败 {store.path}: {e}")
        # 按钮文字仍是旧主题的图标
        st.rerun()

    inject_theme_css(current)
    return current
