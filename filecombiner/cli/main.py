# File: filecombiner/cli/main.py

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from rich.console import Console

from filecombiner.core.common.encodings import is_known_encoding
from filecombiner.core.common.enums import ScanOutputFormat
from filecombiner.core.common.paths import file_extension, relative_display_path
from filecombiner.core.config.settings import settings
from filecombiner.core.logging.setup import configure_logging
from filecombiner.features.file_combiner.data.header_template import HeaderTemplate
from filecombiner.features.file_combiner.domain.models import CombineRequest
from filecombiner.features.file_combiner.service.api import combine_files, combine_files_to_string
from filecombiner.features.file_scanner.domain.models import ScanRequest, ScanResult
from filecombiner.features.file_scanner.service.api import scan_files

logger = logging.getLogger(__name__)


def human_readable_size(size: int) -> str:
    if size < 1024:
        return f"{size} B"
    if size < 1024 ** 2:
        return f"{size / 1024:.1f} KB"
    if size < 1024 ** 3:
        return f"{size / 1024 ** 2:.1f} MB"
    return f"{size / 1024 ** 3:.1f} GB"


# --- Parser ---

def _add_global_flags(parser: argparse.ArgumentParser) -> None:
    # SUPPRESS keeps a sub-command's default from overwriting a flag given before it
    parser.add_argument("-v", "--verbose", action="store_true", default=argparse.SUPPRESS,
                        help="Enable verbose logging")
    parser.add_argument("-q", "--quiet", action="store_true", default=argparse.SUPPRESS,
                        help="Suppress all output except errors")


def _add_filter_options(parser: argparse.ArgumentParser, directory_help: str) -> None:
    parser.add_argument("-d", "--directory", help=directory_help)
    parser.add_argument("-f", "--files", nargs="+", action="extend", default=[], metavar="FILE",
                        help="Explicit file paths to include (can be used multiple times)")
    parser.add_argument("-e", "--extensions", nargs="+", action="extend", default=[], metavar="EXT",
                        help="File extensions to include (e.g. .py .txt)")
    parser.add_argument("-xe", "--exclude-extensions", nargs="+", action="extend", default=[], metavar="EXT",
                        help="File extensions to exclude")
    parser.add_argument("-xf", "--exclude-folders", nargs="+", action="extend", default=[], metavar="FOLDER",
                        help="Folder paths to exclude (relative to directory)")
    parser.add_argument("-xn", "--exclude-files", nargs="+", action="extend", default=[], metavar="NAME",
                        help="Specific file names to exclude")
    parser.add_argument("-r", "--recursive", action="store_true", help="Include subdirectories in the scan")


def _add_render_options(parser: argparse.ArgumentParser) -> None:
    placeholders = ", ".join(HeaderTemplate.PLACEHOLDERS)
    parser.add_argument("--no-headers", action="store_true", help="Exclude file headers from output")
    parser.add_argument("--header-format", default=settings.HEADER_FORMAT,
                        help=f"Custom header format (placeholders: {placeholders})")
    parser.add_argument("--separator", default=settings.FILE_SEPARATOR, help="Separator written between files")
    parser.add_argument("--encoding", default=settings.ENCODING,
                        help="Text encoding (utf8, ascii, unicode, utf32, latin1, or any Python codec)")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="filecombiner",
        description="Scan a directory tree and combine matching files into a single document",
    )
    _add_global_flags(parser)
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True

    combine = subparsers.add_parser("combine", help="Combine files into a single output file")
    _add_global_flags(combine)
    combine.add_argument("-o", "--output", required=True, help="Output file path for the combined content")
    _add_filter_options(combine, "Base directory path to scan for files")
    _add_render_options(combine)
    combine.add_argument("--force", action="store_true", help="Overwrite output file if it exists")
    combine.add_argument("--dry-run", action="store_true",
                         help="Show what would be done without combining files")
    combine.set_defaults(handler=run_combine)

    to_string = subparsers.add_parser("to-string", help="Combine files and print the result (no file output)")
    _add_global_flags(to_string)
    _add_filter_options(to_string, "Base directory path to scan for files")
    _add_render_options(to_string)
    to_string.add_argument("-s", "--stats-only", action="store_true",
                           help="Show only statistics, not the content")
    to_string.set_defaults(handler=run_to_string)

    scan = subparsers.add_parser("scan", help="Scan directory and list matching files")
    _add_global_flags(scan)
    _add_filter_options(scan, "Directory path to scan")
    output_group = scan.add_mutually_exclusive_group()
    output_group.add_argument("-c", "--count-only", dest="output_format", action="store_const",
                              const=ScanOutputFormat.COUNT, help="Show only the count of matching files")
    output_group.add_argument("--json", dest="output_format", action="store_const",
                              const=ScanOutputFormat.JSON, help="Output results in JSON format")
    scan.set_defaults(handler=run_scan, output_format=ScanOutputFormat.TEXT)

    return parser


# --- Request mapping ---

def _scan_kwargs(args: argparse.Namespace) -> dict:
    # Paths typed on the command line are relative to the working directory
    return dict(
        directory_path=Path(args.directory).absolute() if args.directory else None,
        explicit_paths=[str(Path(f).absolute()) for f in args.files],
        include_extensions=args.extensions,
        exclude_folders=args.exclude_folders,
        exclude_extensions=args.exclude_extensions,
        exclude_file_names=args.exclude_files,
        recursive=args.recursive,
    )


def _combine_request(args: argparse.Namespace, output_path: Optional[Path] = None) -> CombineRequest:
    return CombineRequest(
        output_path=output_path,
        include_headers=not args.no_headers,
        header_format=args.header_format,
        file_separator=args.separator,
        encoding=args.encoding,
        **_scan_kwargs(args),
    )


def _display(result: ScanResult, path: Path) -> str:
    return relative_display_path(result.base_path, path) if result.base_path else str(path)


# --- Handlers ---

def run_combine(args: argparse.Namespace, out: Console, err: Console) -> int:
    if not is_known_encoding(args.encoding):
        err.print(f"Error: Unknown encoding '{args.encoding}'")
        return 1

    output = Path(args.output).absolute()
    if output.exists() and not args.force:
        err.print(f"Error: Output file '{output}' already exists. Use --force to overwrite.")
        return 1

    request = _combine_request(args, output)

    if args.dry_run:
        out.print("🔍 Dry run mode - showing what would be processed:")
        scan_result = scan_files(request.to_scan_request())
        if not scan_result.is_success:
            err.print(f"❌ Error during scan: {scan_result.error}")
            return 1

        out.print(f"📁 Would process {len(scan_result.files)} files")
        out.print(f"📝 Would write to: {output}")
        if args.verbose:
            out.print("\nFiles that would be processed:")
            for file_path in scan_result.files:
                out.print(f"  {file_path}")
        return 0

    if not args.quiet:
        out.print(f"🔄 Combining files to: {output}")
        if request.directory_path is not None:
            out.print(f"📁 Directory: {request.directory_path}")
        if request.explicit_paths:
            out.print(f"📄 Explicit files: {len(request.explicit_paths)}")

    result = combine_files(request)
    if not result.is_success:
        err.print(f"❌ Error: {result.error}")
        return 1

    if not args.quiet:
        out.print(f"✅ Successfully combined {result.files_processed} files")
        out.print(f"📁 Output: {result.output_path}")
        out.print(f"📊 Size: {result.total_bytes:,} bytes ({human_readable_size(result.total_bytes)})")
    return 0


def run_to_string(args: argparse.Namespace, out: Console, err: Console) -> int:
    if not is_known_encoding(args.encoding):
        err.print(f"Error: Unknown encoding '{args.encoding}'")
        return 1

    result = combine_files_to_string(_combine_request(args))
    if not result.is_success:
        err.print(f"❌ Error: {result.error}")
        return 1

    if args.stats_only:
        out.print(f"📊 Files processed: {result.files_processed}")
        out.print(f"📊 Total size: {result.total_bytes:,} characters ({human_readable_size(result.total_bytes)})")
        return 0

    if not args.quiet:
        out.print(f"📊 Combined {result.files_processed} files ({result.total_bytes:,} characters)")
        out.print("=" * 50)

    # Raw write: file contents must not go through Rich markup/wrapping
    out.file.write(result.content + "\n")
    return 0


def run_scan(args: argparse.Namespace, out: Console, err: Console) -> int:
    result = scan_files(ScanRequest(**_scan_kwargs(args)))

    if not result.is_success:
        if args.output_format == ScanOutputFormat.JSON:
            out.file.write(json.dumps({"success": False, "error": result.error}) + "\n")
        else:
            err.print(f"❌ Error: {result.error}")
        return 1

    if args.output_format == ScanOutputFormat.JSON:
        payload = {
            "success": True,
            "basePath": result.base_path,
            "fileCount": len(result.files),
            "files": [
                {
                    "fullPath": str(path),
                    "relativePath": _display(result, path),
                    "fileName": path.name,
                    "extension": file_extension(path),
                }
                for path in result.files
            ],
        }
        out.file.write(json.dumps(payload, indent=2) + "\n")
    elif args.output_format == ScanOutputFormat.COUNT:
        out.file.write(f"{len(result.files)}\n")
    else:
        out.print(f"📁 Base path: {result.base_path}")
        out.print(f"📊 Found {len(result.files)} matching file(s):")
        out.print()
        for path in result.files:
            out.print(f"  {_display(result, path)}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    args.verbose = getattr(args, "verbose", False)
    args.quiet = getattr(args, "quiet", False)

    configure_logging(verbose=args.verbose, quiet=args.quiet)

    out = Console(soft_wrap=True, highlight=False, markup=False, emoji=False)
    err = Console(stderr=True, soft_wrap=True, highlight=False, markup=False, emoji=False)

    if args.directory is None and not args.files:
        err.print("Error: Either --directory or --files must be specified")
        return 1

    try:
        return args.handler(args, out, err)
    except Exception as e:
        logger.error(f"Unexpected error occurred: {e}", exc_info=args.verbose)
        err.print(f"❌ Unexpected error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
