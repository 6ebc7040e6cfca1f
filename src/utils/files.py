import os
import sys
import logging

from common.constants import APP_CONFIG_FILENAME, APP_FOLDER_NAME

logger = logging.getLogger(__name__)


def get_song_dir_and_source(filepath, base_dir=None):
    """
    Split a song file path into the (dir, source_file) pair stored in a Song.

    Args:
        filepath: Path to the song .txt file
        base_dir: Optional song library root; dir is made relative to it

    Returns:
        Tuple of (dir, source_file)
    """
    dir, source_file = os.path.split(filepath)
    if base_dir:
        dir = os.path.relpath(os.path.abspath(dir), os.path.abspath(base_dir))
        if dir == os.curdir:
            dir = ""
    return dir, source_file


def is_portable_mode():
    """
    Detect if running in portable mode (PyInstaller directory build).

    Returns:
        bool: True if an _internal folder sits next to the frozen executable
    """
    if not getattr(sys, "frozen", False):
        # Not frozen = running as script = use system directories
        return False

    app_dir = os.path.dirname(sys.executable)
    return os.path.isdir(os.path.join(app_dir, "_internal"))


def get_app_dir():
    """Get the directory of the executable or script."""
    if getattr(sys, "frozen", False):
        return os.path.dirname(sys.executable)
    return os.path.dirname(os.path.abspath(sys.argv[0]))


def get_localappdata_dir():
    """
    Get platform-appropriate application data directory for USDX Reader.

    Returns:
        str: Path to application data directory

    Platform paths:
        Windows: %LOCALAPPDATA%/USDXReader/
        Linux:   ~/.local/share/USDXReader/ (respects XDG_DATA_HOME)
        macOS:   ~/Library/Application Support/USDXReader/
        Portable: <app_directory>/
    """
    if is_portable_mode():
        app_dir = get_app_dir()
        logger.info(f"Portable mode detected, using app directory: {app_dir}")
        return app_dir

    if sys.platform == "win32":
        local_app_data = os.getenv("LOCALAPPDATA")
        if local_app_data:
            app_data_dir = os.path.join(local_app_data, APP_FOLDER_NAME)
            os.makedirs(app_data_dir, exist_ok=True)
            return app_data_dir
        logger.warning("LOCALAPPDATA not found, using app directory")
        return get_app_dir()

    elif sys.platform == "darwin":
        app_support = os.path.expanduser(f"~/Library/Application Support/{APP_FOLDER_NAME}")
        os.makedirs(app_support, exist_ok=True)
        return app_support

    else:
        xdg_data = os.getenv("XDG_DATA_HOME")
        if xdg_data:
            app_data_dir = os.path.join(xdg_data, APP_FOLDER_NAME)
        else:
            app_data_dir = os.path.expanduser(f"~/.local/share/{APP_FOLDER_NAME}")
        os.makedirs(app_data_dir, exist_ok=True)
        return app_data_dir


def get_default_config_path():
    return os.path.join(get_localappdata_dir(), APP_CONFIG_FILENAME)
