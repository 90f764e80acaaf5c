import os
from pathlib import Path
from typing import Iterator
from ..domain.interfaces import IFileWalker


def _raise_walk_error(error: OSError) -> None:
    # os.walk ignores listing errors unless told otherwise
    raise error


class LocalFileWalker(IFileWalker):
    """
    Concrete implementation using standard os.walk for efficiency.
    Entries are sorted by name so repeated scans yield identical order.
    """

    def walk(self, root: Path, recursive: bool) -> Iterator[Path]:
        if recursive:
            for dirpath, dirnames, filenames in os.walk(root, onerror=_raise_walk_error):
                # Sorting 'dirnames' in place fixes the order os.walk descends in
                dirnames.sort()

                for filename in sorted(filenames):
                    yield Path(dirpath) / filename
        else:
            # Non-recursive: just iterate the immediate directory
            for item in sorted(root.iterdir(), key=lambda p: p.name):
                if item.is_file():
                    yield item
