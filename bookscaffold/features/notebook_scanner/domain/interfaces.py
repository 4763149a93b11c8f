from abc import ABC, abstractmethod
from pathlib import Path

from .models import FolderListing

class IFolderReader(ABC):
    """
    Contract for reading folders and files from a filesystem.
    """
    @abstractmethod
    def list_folder(self, folder: Path) -> FolderListing:
        """
        Lists the entry names of a folder.
        Must not raise: failures are reported as ScanErrors on the listing.
        """
        pass

    @abstractmethod
    def is_dir(self, path: Path) -> bool:
        pass

    @abstractmethod
    def read_text(self, path: Path) -> str:
        """
        Reads a whole file as UTF-8 text, replacing undecodable bytes.
        May raise OSError.
        """
        pass
