from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

@dataclass(frozen=True)
class BookContext:
    """
    Caller input for a TOC build.
    Chapter names are assigned to chapter folders by discovery order.
    """
    chapter_names: List[str] = field(default_factory=list)
    root: Optional[Path] = None

@dataclass
class BuildSummary:
    """
    Report returned after the TOC and chapter readmes are written.
    """
    toc_path: Optional[Path] = None
    toc_content: str = ""
    chapters_written: List[Path] = field(default_factory=list)
    entries_written: int = 0
    errors: List[str] = field(default_factory=list)
