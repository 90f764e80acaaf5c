import asyncio
import logging
from pathlib import Path
from typing import Dict, List, Optional

from filecombiner.core.common.encodings import resolve_encoding
from filecombiner.core.common.paths import file_extension, path_key, relative_display_path, to_absolute

# Cross-Feature Import (Service calls Service)
from filecombiner.features.file_scanner.service.scanner import FileScanner

from ..domain.interfaces import ITextReader, ITextWriter
from ..domain.models import CombineContentResult, CombineRequest, CombineResult
from ..data.header_template import HeaderTemplate
from ..data.text_io import LocalTextFileIO

LINE_TERMINATOR = "\n"

class FileCombiner:
    """
    Scans, reads and concatenates files into one text blob.
    Files are read one at a time in scan order; a file that cannot be read
    is logged and skipped instead of failing the whole run.
    """

    def __init__(self,
                 scanner: Optional[FileScanner] = None,
                 reader: Optional[ITextReader] = None,
                 writer: Optional[ITextWriter] = None,
                 logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)
        self.scanner = scanner or FileScanner(logger=logger)
        local_io = LocalTextFileIO()
        self.reader = reader or local_io
        self.writer = writer or local_io

    def combine_to_file(self, request: CombineRequest) -> CombineResult:
        """
        Combines the matched files and writes the result to `request.output_path`,
        replacing any existing file.
        """
        if request is None:
            raise ValueError("CombineRequest must not be None")

        if request.output_path is None:
            self.logger.error("Error during file combining: OutputPath is empty or null")
            return CombineResult.failure("Error during file combining: OutputPath is empty or null")

        self.logger.info(
            f"Starting file combining with directory: {request.directory_path}, output: {request.output_path}"
        )

        try:
            content_result = self.combine_to_string(request)
            if not content_result.is_success:
                return CombineResult.failure(content_result.error)

            encoding = resolve_encoding(request.encoding)
            size = self.writer.write_text(request.output_path, content_result.content, encoding)

            self.logger.info(
                f"Successfully combined {content_result.files_processed} files "
                f"into {request.output_path} ({size} bytes)"
            )
            return CombineResult.success(request.output_path, content_result.files_processed, size)

        except Exception as e:
            self.logger.error(f"Error during file combining: {e}", exc_info=True)
            return CombineResult.failure(f"Error during file combining: {e}")

    def combine_to_string(self, request: CombineRequest) -> CombineContentResult:
        """
        Combines the matched files into a string.

        Each file contributes, in scan order:
            [header line + "\\n"]  (when include_headers)
            content + "\\n"
            file_separator       (verbatim)
        """
        if request is None:
            raise ValueError("CombineRequest must not be None")

        if not request.has_source:
            self.logger.error("Either DirectoryPath or ExplicitFilePaths must be provided")
            return CombineContentResult.failure("Either DirectoryPath or ExplicitFilePaths must be provided")

        try:
            encoding = resolve_encoding(request.encoding)
        except LookupError:
            error_msg = f"Error during file combining to string: unknown encoding '{request.encoding}'"
            self.logger.error(error_msg)
            return CombineContentResult.failure(error_msg)

        self.logger.info(f"Starting file combining to string with directory: {request.directory_path}")

        try:
            # 1. Resolve the file list
            scan_result = self.scanner.scan(request.to_scan_request())

            if not scan_result.is_success:
                self.logger.error(f"Failed to scan directory: {scan_result.error}")
                return CombineContentResult.failure(scan_result.error)

            if not scan_result.files:
                self.logger.warning("No files found matching the specified criteria")
                return CombineContentResult.failure("No files found matching the specified criteria")

            self.logger.info(f"Found {len(scan_result.files)} file(s) to combine")

            # 2. Read and assemble
            explicit_names = self._explicit_display_paths(request)
            template = HeaderTemplate(request.header_format)
            parts: List[str] = []
            files_processed = 0

            for file_path in scan_result.files:
                try:
                    file_content = self.reader.read_text(file_path, encoding)
                except Exception as e:
                    self.logger.warning(f"Error reading file {file_path}: {e}")
                    continue

                if request.include_headers:
                    header = template.render(
                        path=self._display_path(request, file_path, explicit_names),
                        name=file_path.name,
                        ext=file_extension(file_path),
                        index=files_processed,
                    )
                    parts.append(header + LINE_TERMINATOR)

                parts.append(file_content + LINE_TERMINATOR)
                parts.append(request.file_separator)
                files_processed += 1

            if files_processed == 0:
                self.logger.warning("No files were successfully processed")
                return CombineContentResult.failure("No files were successfully processed")

            content = "".join(parts)
            self.logger.info(
                f"Successfully combined {files_processed} files into string content ({len(content)} characters)"
            )
            return CombineContentResult.success(content, files_processed)

        except Exception as e:
            self.logger.error(f"Error during file combining to string: {e}", exc_info=True)
            return CombineContentResult.failure(f"Error during file combining to string: {e}")

    async def combine_to_file_async(self, request: CombineRequest) -> CombineResult:
        """Runs combine_to_file in a worker thread so the event loop is not blocked."""
        return await asyncio.to_thread(self.combine_to_file, request)

    async def combine_to_string_async(self, request: CombineRequest) -> CombineContentResult:
        return await asyncio.to_thread(self.combine_to_string, request)

    @staticmethod
    def _explicit_display_paths(request: CombineRequest) -> Dict[str, str]:
        """
        Maps explicit files to the literal string the caller gave for them.
        Only relative entries (or any entry when no directory is set) are kept;
        absolute entries under a directory are shown relative to it instead.
        """
        names: Dict[str, str] = {}
        directory = request.directory_path

        for entry in request.explicit_paths:
            if directory is not None and Path(entry).is_absolute():
                continue
            resolved = to_absolute(directory / entry if directory is not None else entry)
            names.setdefault(path_key(resolved), entry)

        return names

    @staticmethod
    def _display_path(request: CombineRequest, file_path: Path, explicit_names: Dict[str, str]) -> str:
        literal = explicit_names.get(path_key(file_path))
        if literal is not None:
            return literal

        if request.directory_path is not None:
            return relative_display_path(request.directory_path, file_path)

        return str(file_path)
