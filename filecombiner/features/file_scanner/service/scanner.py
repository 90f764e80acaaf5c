import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from filecombiner.core.common.paths import file_extension, normalize_extension, path_key, to_absolute

from ..domain.interfaces import IFileWalker
from ..domain.models import ScanRequest, ScanResult
from ..data.exclusion_rules import ExclusionRules
from ..data.file_walker import LocalFileWalker

class FileScanner:
    """
    Resolves a ScanRequest into an ordered, de-duplicated list of absolute file paths.
    Explicit paths come first, followed by whatever the directory walk finds.
    """

    def __init__(self, walker: Optional[IFileWalker] = None, logger: Optional[logging.Logger] = None):
        self.walker = walker or LocalFileWalker()
        self.logger = logger or logging.getLogger(__name__)

    def scan(self, request: ScanRequest) -> ScanResult:
        if request is None:
            raise ValueError("ScanRequest must not be None")

        directory = request.directory_path
        self.logger.debug(
            f"Scanning {directory or '<no directory>'} "
            f"(extensions: {', '.join(request.include_extensions) or 'all'}, recursive: {request.recursive})"
        )

        # Insertion-ordered map keyed case-insensitively: acts as an ordered set
        collected: Dict[str, Path] = {}

        try:
            # 1. Explicit paths (best effort, missing ones are skipped)
            for entry in request.explicit_paths:
                candidate = to_absolute(directory / entry if directory is not None else entry)
                if candidate.is_file():
                    collected.setdefault(path_key(candidate), candidate)
                else:
                    self.logger.warning(f"Explicit file not found, skipping: {candidate}")

            if directory is None:
                return self._finish(collected, "")

            # 2. Directory scan
            if not directory.is_dir():
                if not collected:
                    self.logger.warning(f"Directory not found: {directory}")
                    return ScanResult.failure(f"Directory not found: {directory}")

                self.logger.warning(
                    f"Directory not found: {directory}. Continuing with {len(collected)} explicit file(s)."
                )
                return self._finish(collected, str(directory))

            for path in self._scan_directory(request):
                collected.setdefault(path_key(path), path)

        except PermissionError as e:
            self.logger.error(f"Access denied scanning directory {directory}: {e}")
            return ScanResult.failure(f"Access denied: {e}")
        except OSError as e:
            self.logger.error(f"Error scanning directory {directory}: {e}")
            return ScanResult.failure(f"Error scanning directory: {e}")

        return self._finish(collected, str(directory))

    def _finish(self, collected: Dict[str, Path], base_path: str) -> ScanResult:
        self.logger.debug(f"Found {len(collected)} file(s) matching the criteria")
        return ScanResult.success(list(collected.values()), base_path)

    def _scan_directory(self, request: ScanRequest) -> List[Path]:
        root = to_absolute(request.directory_path)
        walked = list(self.walker.walk(root, request.recursive))

        # 1. Inclusion: union of one pass per requested extension, in request order
        candidates = self._filter_by_extension(walked, request.include_extensions)

        # 2. Exclusions (folder -> extension -> name)
        rules = ExclusionRules.from_request(request)
        if not rules.is_empty:
            candidates = [path for path in candidates if not rules.should_exclude(path)]

        # 3. Caller-supplied predicate runs last
        if request.predicate is not None:
            candidates = [path for path in candidates if request.predicate(path)]

        return candidates

    @staticmethod
    def _filter_by_extension(paths: List[Path], extensions: Iterable[str]) -> List[Path]:
        normalized = []
        for ext in extensions:
            ext = normalize_extension(ext)
            if ext and ext not in normalized:
                normalized.append(ext)

        if not normalized:
            return paths

        matched: Dict[str, Path] = {}
        for ext in normalized:
            for path in paths:
                if file_extension(path).lower() == ext:
                    matched.setdefault(path_key(path), path)
        return list(matched.values())
