"""Unicode emojis used as icons."""

ICON_CHECK = "\U00002705"  # Check Mark
ICON_CROSS = "\U0000274c"  # Cross Mark
ICON_FOLDER = "\U0001f4c1"  # File Folder
ICON_FILE = "\U0001f4c4"  # Page Facing Up
ICON_WARNING = "\U000026a0"  # Warning Sign
