"""
Global configuration for Whiteboard Tutor

Holds application constants, whiteboard tuning values and the small JSON
settings file used for the Gemini API key.
"""

import os
import json
import sys
from pathlib import Path
from typing import Final, Optional


class Config:
    """Central configuration class for all application settings"""

    # Application metadata
    APP_NAME: Final[str] = "Whiteboard Tutor"
    APP_VERSION: Final[str] = "1.0.0"
    APP_AUTHOR: Final[str] = "Whiteboard Tutor"

    # Paths
    APP_ROOT: Final[Path] = Path(__file__).parent
    USER_DIR_NAME: Final[str] = "WhiteboardTutor"
    SETTINGS_FILE_NAME: Final[str] = "settings.json"
    LOG_FILE_NAME: Final[str] = "whiteboard_tutor.log"

    # Subject / class selection
    SUBJECTS: Final[list] = ["Maths", "Physics", "Chemistry"]
    CLASS_LEVELS: Final[list] = [8, 9, 10]
    ACTIVE_SUBJECTS: Final[list] = ["Maths"]  # Others are shown as "Coming Soon"

    # Generative AI
    GEMINI_MODEL: Final[str] = "gemini-2.0-flash-exp"
    API_KEY_ENV_VAR: Final[str] = "GEMINI_API_KEY"
    API_KEY_SETTING: Final[str] = "gemini_api_key"

    # Whiteboard ink
    DEFAULT_STROKE_COLOR: Final[str] = "#000000"
    DEFAULT_STROKE_WIDTH: Final[float] = 3
    BOARD_BACKGROUND: Final[str] = "#ffffff"

    # Eraser hit-test margin (surface units)
    ERASE_THRESHOLD: Final[float] = 15

    # Scroll auto-extension
    SCROLL_EXTEND_MARGIN: Final[float] = 80
    SCROLL_EXTEND_PAGES: Final[int] = 2

    # Canvas capture
    CAPTURE_FORMAT: Final[str] = "PNG"
    CAPTURE_QUALITY: Final[int] = 90
    CAPTURE_PADDING: Final[int] = 40
    MIN_CAPTURE_LENGTH: Final[int] = 100  # base64 chars, shorter = failed capture

    # Window settings
    DEFAULT_WINDOW_WIDTH: Final[int] = 480
    DEFAULT_WINDOW_HEIGHT: Final[int] = 860

    @classmethod
    def get_user_data_dir(cls) -> Path:
        """
        Get user data directory.

        Uses system AppData/Local (Windows), Application Support (macOS) or
        .local/share (Linux). A 'portable.txt' flag file next to the package
        switches to a local 'data' folder instead.
        """
        portable_flag = cls.APP_ROOT.parent / 'portable.txt'
        if portable_flag.exists():
            user_dir = cls.APP_ROOT.parent / 'data'
        elif sys.platform == 'win32':
            base_path = Path(os.environ.get('LOCALAPPDATA', os.path.expanduser('~')))
            user_dir = base_path / cls.USER_DIR_NAME
        elif sys.platform == 'darwin':
            user_dir = Path.home() / 'Library' / 'Application Support' / cls.USER_DIR_NAME
        else:
            user_dir = Path.home() / '.local' / 'share' / cls.USER_DIR_NAME

        user_dir.mkdir(parents=True, exist_ok=True)
        return user_dir

    @classmethod
    def get_log_dir(cls) -> Path:
        """Get the folder holding the log file"""
        return cls.get_user_data_dir() / 'logs'

    @classmethod
    def get_settings_file(cls) -> Path:
        """Get settings JSON file path"""
        return cls.get_user_data_dir() / cls.SETTINGS_FILE_NAME

    @classmethod
    def load_settings(cls) -> dict:
        """
        Load the settings file

        Returns:
            dict: Stored settings, or an empty dict when the file is missing
            or unreadable
        """
        settings_file = cls.get_settings_file()
        if settings_file.exists():
            try:
                with open(settings_file, 'r', encoding='utf-8') as f:
                    settings = json.load(f)
                if isinstance(settings, dict):
                    return settings
            except (OSError, ValueError):
                pass
        return {}

    @classmethod
    def save_setting(cls, key: str, value) -> bool:
        """
        Save a single setting, keeping the other keys intact

        Returns:
            bool: True if saved successfully, False otherwise
        """
        try:
            settings_file = cls.get_settings_file()
            settings_file.parent.mkdir(parents=True, exist_ok=True)

            settings = cls.load_settings()
            settings[key] = value

            with open(settings_file, 'w', encoding='utf-8') as f:
                json.dump(settings, f, indent=2)
            return True
        except OSError:
            return False

    @classmethod
    def get_api_key(cls) -> str:
        """
        Resolve the Gemini API key.

        The environment variable wins over the settings file. Returns an
        empty string when neither is set.
        """
        env_key = os.environ.get(cls.API_KEY_ENV_VAR, '').strip()
        if env_key:
            return env_key
        stored = cls.load_settings().get(cls.API_KEY_SETTING, '')
        return stored.strip() if isinstance(stored, str) else ''

    @classmethod
    def save_api_key(cls, api_key: str) -> bool:
        """Persist the Gemini API key in the settings file"""
        return cls.save_setting(cls.API_KEY_SETTING, api_key.strip())

    @classmethod
    def is_subject_active(cls, subject: Optional[str]) -> bool:
        """Check whether questions can be generated for a subject"""
        return subject in cls.ACTIVE_SUBJECTS


__all__ = ['Config']
