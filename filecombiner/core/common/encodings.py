# File: filecombiner/core/common/encodings.py

import codecs

# Friendly names accepted on the command line
ENCODING_ALIASES = {
    "utf8": "utf-8",
    "utf-8": "utf-8",
    "ascii": "ascii",
    "unicode": "utf-16",
    "utf16": "utf-16",
    "utf-16": "utf-16",
    "utf32": "utf-32",
    "utf-32": "utf-32",
    "latin1": "latin-1",
    "iso-8859-1": "latin-1",
}

DEFAULT_ENCODING = "utf-8"


def resolve_encoding(name: str) -> str:
    """
    Maps an alias (or any codec name Python knows) to a canonical codec name.

    Raises:
        LookupError: If the name is not a known text encoding.
    """
    if not name or not name.strip():
        return DEFAULT_ENCODING

    key = name.strip().lower()
    candidate = ENCODING_ALIASES.get(key, key)

    # codecs.lookup raises LookupError for unknown names
    return codecs.lookup(candidate).name


def is_known_encoding(name: str) -> bool:
    try:
        resolve_encoding(name)
    except LookupError:
        return False
    return True
