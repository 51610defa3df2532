import os
import pathlib as pl
from typing import Optional, Union


def final_segment(path: Union[str, os.PathLike]) -> str:
    """Return the last component of a path (trailing separators ignored)."""
    return pl.PurePath(path).name


def is_hidden_name(name: str) -> bool:
    """Check if a path segment starts with a dot, like `.git` or `.config.d`."""
    return name.startswith(".")


def extension(path: Union[str, os.PathLike]) -> Optional[str]:
    """
    Get the extension of the final path segment, without the dot.
    The extension is whatever follows the last dot, unless that dot is the first character.
    Returns None when there is no extension, or it is empty ("foo.").
    """
    name = final_segment(path)
    stem, dot, ext = name.rpartition(".")
    if not dot or not stem:
        return None
    return ext or None



def entry_exists(path: Union[str, os.PathLike]) -> bool:
    """
    Check if something exists at a path (symlinks are followed).
    A missing entry or parent is False; any other OSError (e.g. a name too long) is raised.
    """
    try:
        pl.Path(path).stat()
    except (FileNotFoundError, NotADirectoryError):
        return False
    return True
