import logging
import re
from pathlib import Path
from typing import Dict, Optional

from bookscaffold.core.common.enums import DocumentType
from bookscaffold.features.notebook_scanner.domain.interfaces import IFolderReader
from bookscaffold.features.notebook_scanner.data.folder_reader import LocalFolderReader

from ..domain.interfaces import ITitleStrategy, UNTITLED
from ..data.strategies import MarkdownTitleStrategy, NotebookTitleStrategy, is_untitled

logger = logging.getLogger(__name__)

LINE_SPLIT_RE = re.compile(r"\r?\n")

class TitleExtractor:
    """
    Picks a title strategy by file extension and applies it to the file's text.
    """

    def __init__(self, reader: Optional[IFolderReader] = None):
        self.reader = reader or LocalFolderReader()
        self.strategies: Dict[str, ITitleStrategy] = {
            DocumentType.NOTEBOOK.value: NotebookTitleStrategy(),
            DocumentType.MARKDOWN.value: MarkdownTitleStrategy(),
        }

    def register(self, extension: str, strategy: ITitleStrategy) -> None:
        self.strategies[extension.lower()] = strategy

    def supports(self, path: Path) -> bool:
        return Path(path).suffix.lower() in self.strategies

    def extract(self, path: Path) -> Optional[str]:
        """
        Returns the title of the document at `path`. Files with no usable
        title line are "Untitled" whatever their type; otherwise None if the
        extension has no registered strategy. Read errors propagate.
        """
        path = Path(path)
        lines = LINE_SPLIT_RE.split(self.reader.read_text(path))
        if is_untitled(lines):
            return UNTITLED

        strategy = self.strategies.get(path.suffix.lower())
        if strategy is None:
            logger.debug(f"No title strategy for {path.name}")
            return None
        return strategy.extract(lines)
