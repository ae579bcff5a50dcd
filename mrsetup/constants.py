"""Shared constants for mrsetup paths and display."""

MRSETUP_HOME_EXT = ".mrsetup"  # user-level state/config directory suffix

CONFIG_FILE_NAME = "config.json"

LOG_FILE_NAME = "mrsetup.log"

# Default timestamp format for display
DEFAULT_TIMESTAMP_FORMAT = "%H:%M:%S"
