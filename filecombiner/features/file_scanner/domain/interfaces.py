from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterator

class IFileWalker(ABC):
    """
    Contract for traversing a filesystem.
    Abstracts os.walk vs pathlib.
    """
    @abstractmethod
    def walk(self, root: Path, recursive: bool) -> Iterator[Path]:
        """
        Yields file paths one by one, in a stable order.

        Raises:
            PermissionError: If a directory cannot be listed.
            OSError: For any other listing failure.
        """
        pass
