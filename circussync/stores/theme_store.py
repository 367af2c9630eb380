# circussync/stores/theme_store.py
import logging
from typing import Literal

from pydantic import BaseModel

from circussync.core.preferences import PreferenceFile
from circussync.stores.base import Store

logger = logging.getLogger(__name__)

Theme = Literal["light", "dark"]

THEME_KEY = "circussync-theme"
DEFAULT_THEME: Theme = "light"


class ThemeState(BaseModel):
    theme: Theme = DEFAULT_THEME


class ThemeStore(Store[ThemeState]):
    """
    Light/dark preference, persisted under `circussync-theme`.

    Preference file problems are logged and otherwise ignored: the
    in-memory theme still changes.
    """

    def __init__(self, preferences: PreferenceFile | None = None):
        super().__init__(ThemeState())
        self.preferences = preferences or PreferenceFile()

    @property
    def theme(self) -> Theme:
        return self.state.theme

    def init(self) -> None:
        try:
            stored = self.preferences.get(THEME_KEY)
        except (OSError, ValueError) as exc:
            logger.warning("Could not read theme preference: %s", exc)
            stored = None
        self.patch(theme=stored if stored in ("light", "dark") else DEFAULT_THEME)

    def set_theme(self, theme: Theme) -> None:
        if theme not in ("light", "dark"):
            raise ValueError(f"Unknown theme: {theme!r}")
        self.patch(theme=theme)
        try:
            self.preferences.set(THEME_KEY, theme)
        except (OSError, ValueError) as exc:
            logger.warning("Could not save theme preference: %s", exc)

    def toggle(self) -> None:
        self.set_theme("dark" if self.theme == "light" else "light")
