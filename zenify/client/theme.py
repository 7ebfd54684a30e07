"""
Zenify Theme Manager
라이트/다크 테마 저장
"""

from typing import Literal

from .storage import LocalStorage

THEME_KEY = "theme"
THEMES = ("light", "dark")
DEFAULT_THEME = "light"

Theme = Literal["light", "dark"]


class ThemeManager:
    """테마 설정 (알 수 없는 값이나 미설정이면 light)"""

    def __init__(self, storage: LocalStorage):
        self.storage = storage
        self.theme: Theme = self.load_theme()

    def load_theme(self) -> Theme:
        saved = self.storage.get_item(THEME_KEY)
        if saved in THEMES:
            return saved
        return DEFAULT_THEME

    def toggle_theme(self) -> Theme:
        self.theme = "dark" if self.theme == "light" else "light"
        self.storage.set_item(THEME_KEY, self.theme)
        return self.theme
