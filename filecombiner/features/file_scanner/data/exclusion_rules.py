import os
from pathlib import Path
from typing import Tuple

from filecombiner.core.common.paths import file_extension, normalize_extension, normalize_folder, relative_display_path
from ..domain.models import ScanRequest

class ExclusionRules:
    """
    Decides which walked files are dropped before the predicate runs.
    Checks run in a fixed order and stop at the first match:
    folder, then extension, then exact file name.
    """

    def __init__(self, root: Path, folders: Tuple[str, ...] = (),
                 extensions: Tuple[str, ...] = (), file_names: Tuple[str, ...] = ()):
        self.root = root
        self.folders = tuple(f.casefold() for f in (normalize_folder(x) for x in folders) if f)
        self.extensions = {e for e in (normalize_extension(x) for x in extensions) if e}
        self.file_names = {name.strip().casefold() for name in file_names if name.strip()}

    @classmethod
    def from_request(cls, request: ScanRequest) -> "ExclusionRules":
        return cls(
            root=request.directory_path,
            folders=request.exclude_folders,
            extensions=request.exclude_extensions,
            file_names=request.exclude_file_names,
        )

    @property
    def is_empty(self) -> bool:
        return not (self.folders or self.extensions or self.file_names)

    def should_exclude(self, path: Path) -> bool:
        """
        Returns True if the file should be skipped.
        """
        # 1. Folder exclusion ('build' excludes build/x.txt but not build2/x.txt)
        if self.folders:
            relative = relative_display_path(self.root, path).casefold()
            for folder in self.folders:
                if relative == folder or relative.startswith(folder + os.sep):
                    return True

        # 2. Extension exclusion
        if self.extensions and file_extension(path).lower() in self.extensions:
            return True

        # 3. Exact file name exclusion
        if self.file_names and path.name.casefold() in self.file_names:
            return True

        return False
