"""Persisted light/dark theme preference."""

from typing import Literal

from commodities.core.config import THEME_KEY
from commodities.core.storage import PersistenceAdapter

Theme = Literal["light", "dark"]

THEME_VALUES: frozenset[str] = frozenset({"light", "dark"})
DEFAULT_THEME: Theme = "light"


class ThemeStore:
    def __init__(self, storage: PersistenceAdapter) -> None:
        self._storage = storage

    def get(self) -> Theme:
        """Stored theme; "light" when absent or unrecognised."""
        value = self._storage.read_json(THEME_KEY)
        if isinstance(value, str) and value in THEME_VALUES:
            return value
        return DEFAULT_THEME

    def set(self, theme: str) -> Theme:
        if theme not in THEME_VALUES:
            raise ValueError(f"theme must be one of {sorted(THEME_VALUES)}, got {theme!r}")
        self._storage.write_json(THEME_KEY, theme)
        return theme

    def toggle(self) -> Theme:
        return self.set("light" if self.get() == "dark" else "dark")
