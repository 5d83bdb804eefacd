"""
User Preferences
================
In-memory holder for the GUI geometry and the address-book file path.
Loading and saving the preferences is left to the storage layer.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Optional, Tuple

from clinicbook.config import DEFAULT_ADDRESS_BOOK_PATH, DEFAULT_WINDOW_HEIGHT, DEFAULT_WINDOW_WIDTH


@dataclass(frozen=True)
class GuiSettings:
    window_width: float = DEFAULT_WINDOW_WIDTH
    window_height: float = DEFAULT_WINDOW_HEIGHT
    # (x, y) of the top-left corner, None lets the window manager decide
    window_position: Optional[Tuple[int, int]] = None


@dataclass
class UserPrefs:
    gui_settings: GuiSettings = field(default_factory=GuiSettings)
    address_book_file_path: str = DEFAULT_ADDRESS_BOOK_PATH

    def reset_data(self, new_prefs: UserPrefs) -> None:
        self.gui_settings = new_prefs.gui_settings
        self.address_book_file_path = new_prefs.address_book_file_path

    def copy(self) -> UserPrefs:
        return replace(self)
