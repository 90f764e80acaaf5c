from abc import ABC, abstractmethod
from pathlib import Path

class ITextReader(ABC):
    @abstractmethod
    def read_text(self, path: Path, encoding: str) -> str:
        """
        Reads the whole file as text.

        Raises:
            OSError: If the file cannot be opened or read.
            UnicodeError: If the bytes are not valid in `encoding`.
        """
        pass

class ITextWriter(ABC):
    @abstractmethod
    def write_text(self, path: Path, content: str, encoding: str) -> int:
        """
        Replaces the file at `path` with `content`, creating parent folders.
        Returns: size of the written file in bytes.
        """
        pass
