from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from bookscaffold.core.common.enums import ScanErrorKind

@dataclass(frozen=True)
class ScanError:
    """
    A folder that could not be listed, with the reason.
    """
    path: Path
    kind: ScanErrorKind
    message: str

    def __str__(self) -> str:
        return f"Unable to access {self.path}: {self.message}"

    def as_exception(self) -> OSError:
        """Re-raisable form, for callers that cannot continue without the folder."""
        exc_type = {
            ScanErrorKind.NOT_FOUND: FileNotFoundError,
            ScanErrorKind.PERMISSION_DENIED: PermissionError,
            ScanErrorKind.NOT_A_DIRECTORY: NotADirectoryError,
        }.get(self.kind, OSError)
        return exc_type(str(self))

@dataclass
class FolderListing:
    """
    Result of a single directory listing.
    Entries keep listing order; errors are empty on success.
    """
    entries: List[str] = field(default_factory=list)
    errors: List[ScanError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

@dataclass
class NotebookRegistry:
    """
    Accumulator for discovered notebooks, passed in by the caller.
    notebook_names[i] always belongs to notebook_paths[i].
    """
    notebook_names: List[str] = field(default_factory=list)
    notebook_paths: List[Path] = field(default_factory=list)
    notebook_folders: List[str] = field(default_factory=list)

    def add_notebook(self, name: str, path: Path) -> None:
        self.notebook_names.append(name)
        self.notebook_paths.append(path)

    def add_folder(self, name: str) -> None:
        self.notebook_folders.append(name)

    def __len__(self) -> int:
        return len(self.notebook_names)

@dataclass
class CountSummary:
    """
    Report returned after counting notebooks in one or many folders.
    """
    count: int = 0
    errors: List[ScanError] = field(default_factory=list)

    @property
    def error_messages(self) -> List[str]:
        return [str(e) for e in self.errors]
