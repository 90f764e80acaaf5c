from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Tuple, Union

FilePredicate = Callable[[Path], bool]


def _as_tuple(values: Union[str, Iterable[str], None]) -> Tuple[str, ...]:
    """
    Order-preserving, de-duplicated tuple of non-blank strings.
    A bare string counts as a single entry, not as a sequence of characters.
    """
    if values is None:
        return ()
    if isinstance(values, (str, Path)):
        values = [values]

    seen = []
    for value in values:
        text = str(value)
        if text.strip() and text not in seen:
            seen.append(text)
    return tuple(seen)


@dataclass(frozen=True)
class ScanRequest:
    """
    What to look for and where.
    Explicit paths are always considered (subject to existing on disk);
    the filters only apply to files found by walking `directory_path`.
    """
    directory_path: Optional[Path] = None
    explicit_paths: Tuple[str, ...] = ()
    include_extensions: Tuple[str, ...] = ()
    exclude_folders: Tuple[str, ...] = ()
    exclude_extensions: Tuple[str, ...] = ()
    exclude_file_names: Tuple[str, ...] = ()
    recursive: bool = False
    predicate: Optional[FilePredicate] = None

    def __post_init__(self):
        # Accept plain strings / lists from callers and freeze them
        if self.directory_path is not None and not isinstance(self.directory_path, Path):
            directory = str(self.directory_path)
            object.__setattr__(self, "directory_path", Path(directory) if directory.strip() else None)

        for name in ("explicit_paths", "include_extensions", "exclude_folders",
                     "exclude_extensions", "exclude_file_names"):
            object.__setattr__(self, name, _as_tuple(getattr(self, name)))

        if self.predicate is not None and not callable(self.predicate):
            raise ValueError(f"predicate must be callable, got {type(self.predicate).__name__}")

    @property
    def has_source(self) -> bool:
        return self.directory_path is not None or bool(self.explicit_paths)


@dataclass
class ScanResult:
    """
    Outcome of a scan. Successful if and only if `error` is None.
    """
    files: List[Path] = field(default_factory=list)
    base_path: str = ""
    error: Optional[str] = None

    @property
    def is_success(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, files: List[Path], base_path: str) -> "ScanResult":
        return cls(files=list(files), base_path=base_path)

    @classmethod
    def failure(cls, error: str) -> "ScanResult":
        return cls(error=error)
