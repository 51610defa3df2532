"""Constants."""

# Extensions (lowercase, no dot) of files that are executable by nature
EXECUTABLE_EXTENSIONS = frozenset(
    [
        # Windows
        "exe",
        "bat",
        "cmd",
        "com",
        "ps1",
        "vbs",
        "msi",
        "scr",
        # Unix-like
        "sh",
        "bash",
        "zsh",
        "ksh",
        "run",
        "bin",
        "cgi",
        "py",
        "pl",
        "rb",
        "php",
        # Cross-platform
        "jar",
        "appimage",
        "apk",
        "wasm",
        "pyz",
    ]
)

LOGGER_NAME = "mk"
ENV_LOG_LEVEL = "MK_LOG_LEVEL"
LOG_LEVEL_DEFAULT = "warning"

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_CONFIGURATION = 2

COPY_CHUNK_SIZE = 64 * 1024
