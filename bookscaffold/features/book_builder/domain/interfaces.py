from abc import ABC, abstractmethod
from pathlib import Path

class IBookWriter(ABC):
    @abstractmethod
    def write_text(self, path: Path, content: str) -> Path:
        """
        Writes `content` to `path`, replacing anything already there.
        Returns the written path.
        """
        pass
