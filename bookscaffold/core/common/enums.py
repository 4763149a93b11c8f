# File: bookscaffold/core/common/enums.py

from enum import Enum, unique

@unique
class DocumentType(str, Enum):
    NOTEBOOK = ".ipynb"
    MARKDOWN = ".md"

    @classmethod
    def from_suffix(cls, suffix: str):
        """Case-insensitive lookup. Returns None for unsupported suffixes."""
        try:
            return cls(suffix.lower())
        except ValueError:
            return None

@unique
class ScanErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    PERMISSION_DENIED = "permission_denied"
    NOT_A_DIRECTORY = "not_a_directory"
    UNKNOWN = "unknown"
