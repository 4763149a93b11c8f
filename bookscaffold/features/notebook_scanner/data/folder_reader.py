import logging
import os
from pathlib import Path

from bookscaffold.core.common.enums import ScanErrorKind
from ..domain.interfaces import IFolderReader
from ..domain.models import FolderListing, ScanError

logger = logging.getLogger(__name__)

class LocalFolderReader(IFolderReader):
    """
    Concrete implementation on top of os.listdir / pathlib.
    """

    def list_folder(self, folder: Path) -> FolderListing:
        folder = Path(folder)
        listing = FolderListing()

        try:
            if not folder.is_dir():
                if folder.exists():
                    raise NotADirectoryError(f"Not a directory: '{folder}'")
                raise FileNotFoundError(f"No such file or directory: '{folder}'")

            # os.listdir order depends on the filesystem; sort so output is stable
            listing.entries = sorted(os.listdir(folder))

        except OSError as e:
            error = ScanError(path=folder, kind=self._classify(e), message=e.strerror or str(e))
            logger.warning(str(error))
            listing.errors.append(error)

        return listing

    def is_dir(self, path: Path) -> bool:
        return Path(path).is_dir()

    def read_text(self, path: Path) -> str:
        # Undecodable bytes become U+FFFD
        return Path(path).read_text(encoding="utf-8", errors="replace")

    def _classify(self, error: OSError) -> ScanErrorKind:
        if isinstance(error, FileNotFoundError):
            return ScanErrorKind.NOT_FOUND
        if isinstance(error, NotADirectoryError):
            return ScanErrorKind.NOT_A_DIRECTORY
        if isinstance(error, PermissionError):
            return ScanErrorKind.PERMISSION_DENIED
        return ScanErrorKind.UNKNOWN
