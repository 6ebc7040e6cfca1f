"""
Application-wide constants for USDX Reader.

Centralizes app name, file format markers and other constants to ensure consistency.
"""

# Application display name (user-facing)
APP_NAME = "USDX Reader"

# Application full description
APP_DESCRIPTION = "UltraStar Deluxe song file reader"

# Technical identifiers (for paths, files - DO NOT change without migration)
APP_FOLDER_NAME = "USDXReader"  # Used in %LOCALAPPDATA%\USDXReader\
APP_LOG_FILENAME = "usdxreader.log"
APP_CONFIG_FILENAME = "config.ini"

# Song file format
TAG_MARKER = "#"
TAG_SEPARATOR = ":"
UTF8_BOM = b"\xef\xbb\xbf"
DEFAULT_ENCODING_NAME = "Auto"
DEFAULT_RESOLUTION = 4

# Line buffer size; a line plus its "\n" must fit in it
MAX_LINE_LENGTH = 64 * 1024
