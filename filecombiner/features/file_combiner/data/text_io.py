import codecs
from pathlib import Path
from ..domain.interfaces import ITextReader, ITextWriter

class LocalTextFileIO(ITextReader, ITextWriter):
    """
    Plain local-disk text I/O.
    newline="" on both sides keeps line endings byte for byte, so reading a
    written file back yields exactly the in-memory content.
    """

    def read_text(self, path: Path, encoding: str) -> str:
        # A leading UTF-8 BOM is file metadata, not content
        if codecs.lookup(encoding).name == "utf-8":
            encoding = "utf-8-sig"
        with open(path, "r", encoding=encoding, newline="") as f:
            return f.read()

    def write_text(self, path: Path, content: str, encoding: str) -> int:
        # 1. Ensure the directory for the output file exists
        path.parent.mkdir(parents=True, exist_ok=True)

        # 2. Overwrite in place (no temp file + rename)
        with open(path, "w", encoding=encoding, newline="") as f:
            f.write(content)

        # 3. Report what actually landed on disk (encoded size, BOMs included)
        return path.stat().st_size
