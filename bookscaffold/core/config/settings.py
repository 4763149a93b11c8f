# File: bookscaffold/core/config/settings.py

import os
from pathlib import Path


class Settings:
    # --- Paths ---
    # Relative to the current working directory unless BOOK_ROOT is set
    BOOK_ROOT: Path = Path(os.getenv("BOOK_ROOT", "."))
    CONTENT_DIR_NAME: str = os.getenv("BOOK_CONTENT_DIR", "content")
    TOC_RELATIVE_PATH: str = os.getenv("BOOK_TOC_PATH", "_data/toc.yml")
    README_NAME: str = "readme.md"

    # --- Logging ---
    LOG_LEVEL: str = os.getenv("BOOK_LOG_LEVEL", "INFO").upper()

    @property
    def CONTENT_DIR(self) -> Path:
        return self.BOOK_ROOT / self.CONTENT_DIR_NAME

    @property
    def TOC_PATH(self) -> Path:
        return self.BOOK_ROOT / self.TOC_RELATIVE_PATH

    def content_dir_for(self, root: Path) -> Path:
        """Content folder of a book rooted somewhere other than BOOK_ROOT."""
        return root / self.CONTENT_DIR_NAME

    def toc_path_for(self, root: Path) -> Path:
        return root / self.TOC_RELATIVE_PATH


settings = Settings()
