"""An in-memory file system of named files stored in fixed-size sectors."""

from __future__ import annotations

from dataclasses import dataclass, field

FS_SECTOR_SIZE = 1024
FS_MAX_FILE_COUNT = 1000
FS_FILE_NAME_VALID_CHARS = (
    "qwertyuiopasdfghjklzxcvbnm1234567890QWERTYUIOPASDFGHJKLZXCVBNM.-_"
)

# Each sector reserves room for the link to its successor.
_LINK_SIZE = 4
SECTOR_DATA_SIZE = FS_SECTOR_SIZE - _LINK_SIZE

OS_VERSION = "Demon"
OS_GENERIC = "1.5.0"


class FileSystemError(Exception):
    """Base class for file system failures."""


class FileNotFound(FileSystemError):
    """The named file does not exist."""


class FileAlreadyExists(FileSystemError):
    """A file with that name already exists."""


class TooManyFiles(FileSystemError):
    """The file index is full."""


@dataclass
class _File:
    name: str
    sectors: list[bytearray] = field(
        default_factory=lambda: [bytearray(SECTOR_DATA_SIZE)]
    )


def file_name_valid(name: str) -> bool:
    """Whether every character of ``name`` is allowed in a file name."""
    return all(character in FS_FILE_NAME_VALID_CHARS for character in name)


class FileSystem:
    """Files kept in an index; removed entries leave their slot unused.

    A file holds a single sector: data written past its capacity is dropped,
    and a write shorter than the previous content leaves the old tail in place.
    """

    def __init__(self) -> None:
        self._index: list[_File | None] = []

    def _find(self, name: str) -> _File:
        for entry in self._index:
            if entry is not None and entry.name == name:
                return entry
        raise FileNotFound(name)

    def exists(self, name: str) -> bool:
        """Whether a file called ``name`` exists."""
        return any(entry is not None and entry.name == name for entry in self._index)

    def names(self) -> list[str]:
        """Names of existing files in creation order."""
        return [entry.name for entry in self._index if entry is not None]

    def make(self, name: str) -> None:
        """Create an empty file called ``name``."""
        if len(self._index) > FS_MAX_FILE_COUNT:
            raise TooManyFiles(name)
        if self.exists(name):
            raise FileAlreadyExists(name)
        self._index.append(_File(name))

    def remove(self, name: str) -> None:
        """Delete the file called ``name``."""
        for slot, entry in enumerate(self._index):
            if entry is not None and entry.name == name:
                self._index[slot] = None
                return
        raise FileNotFound(name)

    def size(self, name: str) -> int:
        """Capacity of the file's sectors in bytes."""
        return SECTOR_DATA_SIZE * len(self._find(name).sectors)

    def read(self, name: str) -> bytes:
        """The full contents of every sector of the file."""
        return b"".join(bytes(sector) for sector in self._find(name).sectors)

    def write(self, name: str, data: str | bytes) -> None:
        """Store ``data`` at the start of the file."""
        if isinstance(data, str):
            data = data.encode("latin-1")
        sector = self._find(name).sectors[0]
        kept = data[:SECTOR_DATA_SIZE]
        sector[: len(kept)] = kept

    def clean(self, name: str) -> None:
        """Zero every sector of the file."""
        for sector in self._find(name).sectors:
            sector[:] = bytes(len(sector))


def mkfs(filesystem: FileSystem) -> None:
    """Create the standard files of a fresh system."""
    files = {
        "os-release": (
            f'NAME="pearlOS {OS_GENERIC}"\n'
            f'PRETTY_NAME="pearlOS {OS_VERSION}"\n'
            f'VERSION=" {OS_VERSION} ({OS_GENERIC})"\n'
        ),
        "license": (
            "pearlOS is released under the Hippocratic 3.0 License (HL3).\n"
        ),
        "readme": (
            "Thank you for using pearlOS! Many, many thanks!\n"
            'If you\'ve got any questions, type "help" to open\n'
            "the KSH manual.\n"
            "And with that, enjoy the OS!\n"
        ),
        "roadmap": (
            "---- ROADMAP ----\n\n"
            "[x]. Get pearlOS to run.\n"
            "[x]. Add some extra programs.\n"
            "[ ]. Add a text editor (in progress!)\n"
            "[ ]. Create a warningless C build.\n"
            "[ ]. Create a proper syscall interface.\n"
            "[ ]. Create a desktop enviroment.\n"
        ),
    }
    for name, text in files.items():
        filesystem.make(name)
        filesystem.write(name, text)