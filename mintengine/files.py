"""File helpers and the serialisation interface."""

import os
from abc import ABC, abstractmethod

_MODES = {"r": "rb", "rb": "rb", "w": "wb", "wb": "wb"}


def file_exists(path):
    """Return True if something exists at ``path``."""
    return os.path.exists(path)


def create_new_file(path):
    """Create ``path`` as an empty file, truncating any existing content."""
    with open(path, "w"):
        pass


def open_binary(path, mode="r"):
    """Open ``path`` in binary mode for reading ("r") or writing ("w").

    Opening for writing creates the file if it does not exist.
    """
    try:
        real_mode = _MODES[mode]
    except KeyError:
        raise ValueError(f"unsupported file mode: {mode!r}") from None
    return open(path, real_mode)


class Serializable(ABC):
    """An object that can be written to and read back from a file."""

    @abstractmethod
    def serialize(self, path):
        """Write this object to ``path``."""

    @abstractmethod
    def deserialize(self, path):
        """Replace this object's content with what is stored at ``path``."""