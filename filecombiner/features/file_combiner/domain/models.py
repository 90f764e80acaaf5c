from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from filecombiner.features.file_scanner.domain.models import ScanRequest

DEFAULT_HEADER_FORMAT = "// {path}"
DEFAULT_FILE_SEPARATOR = "\n\n"

@dataclass(frozen=True)
class CombineRequest(ScanRequest):
    """
    A ScanRequest plus everything needed to render and persist the combined text.
    Header placeholders: {path}, {name}, {ext}, {index}.
    """
    output_path: Optional[Path] = None
    include_headers: bool = True
    header_format: str = DEFAULT_HEADER_FORMAT
    file_separator: str = DEFAULT_FILE_SEPARATOR
    encoding: str = "utf-8"

    def __post_init__(self):
        super().__post_init__()
        if self.output_path is not None and not isinstance(self.output_path, Path):
            output = str(self.output_path)
            object.__setattr__(self, "output_path", Path(output) if output.strip() else None)

    def to_scan_request(self) -> ScanRequest:
        return ScanRequest(
            directory_path=self.directory_path,
            explicit_paths=self.explicit_paths,
            include_extensions=self.include_extensions,
            exclude_folders=self.exclude_folders,
            exclude_extensions=self.exclude_extensions,
            exclude_file_names=self.exclude_file_names,
            recursive=self.recursive,
            predicate=self.predicate,
        )

@dataclass
class CombineContentResult:
    """
    Combined text held in memory.
    """
    content: Optional[str] = None
    files_processed: int = 0
    error: Optional[str] = None

    @property
    def is_success(self) -> bool:
        return self.error is None

    @property
    def total_bytes(self) -> int:
        # Character count of the in-memory text, not encoded size
        return len(self.content) if self.content is not None else 0

    @classmethod
    def success(cls, content: str, files_processed: int) -> "CombineContentResult":
        return cls(content=content, files_processed=files_processed)

    @classmethod
    def failure(cls, error: str) -> "CombineContentResult":
        return cls(error=error)

@dataclass
class CombineResult:
    """
    Report returned after the combined text has been written to disk.
    `total_bytes` is the size of the written file.
    """
    output_path: Optional[Path] = None
    files_processed: int = 0
    total_bytes: int = 0
    error: Optional[str] = None

    @property
    def is_success(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, output_path: Path, files_processed: int, total_bytes: int) -> "CombineResult":
        return cls(output_path=output_path, files_processed=files_processed, total_bytes=total_bytes)

    @classmethod
    def failure(cls, error: str) -> "CombineResult":
        return cls(error=error)
