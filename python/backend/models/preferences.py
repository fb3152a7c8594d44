"""Theme preference persistence."""

from __future__ import annotations

import json
from enum import StrEnum
from pathlib import Path


class Theme(StrEnum):
    LIGHT = "light"
    DARK = "dark"


class ThemePreference:
    """A single ``theme`` string kept in a small JSON file."""

    def __init__(self, filepath: Path, default: Theme = Theme.LIGHT) -> None:
        self.filepath = filepath
        self.theme = default
        self._load()

    def _load(self) -> None:
        if not self.filepath.exists():
            return
        data = json.loads(self.filepath.read_text())
        try:
            self.theme = Theme(data.get("theme", self.theme))
        except ValueError:
            # Unknown theme names keep the default.
            pass

    def save(self) -> None:
        self.filepath.parent.mkdir(parents=True, exist_ok=True)
        self.filepath.write_text(json.dumps({"theme": str(self.theme)}, indent=2) + "\n")

    def set(self, theme: Theme) -> None:
        self.theme = Theme(theme)
        self.save()

    def toggle(self) -> Theme:
        """Flip between light and dark, persist, and return the new theme."""
        self.set(Theme.LIGHT if self.theme is Theme.DARK else Theme.DARK)
        return self.theme
