"""
Configuration & Path Management
===============================
This module serves as the central registry for file paths and global constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents hardcoded paths (e.g., "C:/Users/...") scattered
   throughout the code.
2. Deployment: It handles the logic required by PyInstaller (sys._MEIPASS) to
   find the data folder when the app is frozen into an .exe.

Exports:
    DATA_PATH (str): Absolute path to the data directory.
    DEFAULT_ADDRESS_BOOK_PATH (str): Default location of the saved address book.
    DEFAULT_WINDOW_WIDTH / DEFAULT_WINDOW_HEIGHT (float): Initial window size.
"""
import sys
import os
from pathlib import Path


def get_resource_path(relative_path: str) -> str:
    """
    Get absolute path to resource, works for dev and for PyInstaller.
    """
    if hasattr(sys, '_MEIPASS'):
        # PyInstaller temp folder
        base_path: str = getattr(sys, '_MEIPASS')
        return os.path.join(base_path, relative_path)

    # config.py is in src/clinicbook/
    current_file_path: Path = Path(__file__)
    project_root: Path = current_file_path.parent.parent.parent
    return os.path.join(str(project_root), relative_path)


# Global Constants
DATA_PATH: str = get_resource_path("data")
DEFAULT_ADDRESS_BOOK_PATH: str = os.path.join(DATA_PATH, "addressbook.json")

DEFAULT_WINDOW_WIDTH: float = 740.0
DEFAULT_WINDOW_HEIGHT: float = 600.0
