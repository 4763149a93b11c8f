from abc import ABC, abstractmethod
from typing import List, Optional

UNTITLED = "Untitled"

class ITitleStrategy(ABC):
    """
    Contract for pulling a display title out of a document's text lines.
    """
    @abstractmethod
    def extract(self, lines: List[str]) -> Optional[str]:
        """
        Returns the title for the document, or None if this strategy
        cannot produce one.
        """
        pass
