# File: filecombiner/core/config/settings.py

import os
from pathlib import Path


class Settings:
    # --- Paths ---
    # filecombiner/core/config/settings.py -> config -> core -> filecombiner -> ROOT
    BASE_DIR: Path = Path(__file__).resolve().parent.parent.parent.parent

    # --- Logging ---
    LOG_LEVEL: str = os.getenv("FILECOMBINER_LOG_LEVEL", "INFO").upper()

    # --- Combine Defaults (CLI only, the core takes these from requests) ---
    HEADER_FORMAT: str = os.getenv("FILECOMBINER_HEADER_FORMAT", "// {path}")
    FILE_SEPARATOR: str = os.getenv("FILECOMBINER_SEPARATOR", "\n\n")
    ENCODING: str = os.getenv("FILECOMBINER_ENCODING", "utf-8")


settings = Settings()
