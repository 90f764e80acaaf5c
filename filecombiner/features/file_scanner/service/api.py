from ..domain.models import ScanRequest, ScanResult
from .scanner import FileScanner

def scan_files(request: ScanRequest) -> ScanResult:
    """
    Public Service API: List the files a request resolves to.

    Args:
        request: Directory, explicit paths and filters to apply.

    Returns:
        ScanResult with absolute paths (explicit paths first) or an error message.
    """
    return scanner.scan(request)

# Singleton Instance for easy import
scanner = FileScanner()
