# File: filecombiner/core/common/enums.py

from enum import Enum, unique

@unique
class ScanOutputFormat(str, Enum):
    TEXT = "text"
    COUNT = "count"
    JSON = "json"
