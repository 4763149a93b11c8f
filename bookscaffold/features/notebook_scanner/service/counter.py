import logging
from pathlib import Path
from typing import Callable, Optional

from bookscaffold.core.common.enums import DocumentType

from ..domain.interfaces import IFolderReader
from ..domain.models import CountSummary, NotebookRegistry
from ..data.folder_reader import LocalFolderReader

logger = logging.getLogger(__name__)

LogSink = Callable[[str], None]

class NotebookCounter:
    """
    Counts notebook and markdown files in a folder (or in every subfolder
    of a book) and records them on the injected registry.
    """

    def __init__(
        self,
        registry: NotebookRegistry,
        log: Optional[LogSink] = None,
        reader: Optional[IFolderReader] = None,
    ):
        self.registry = registry
        self.log = log or logger.info
        self.reader = reader or LocalFolderReader()

    def count_folder(self, folder: Path) -> CountSummary:
        """
        Scans one folder and registers every .ipynb / .md entry.
        """
        folder = Path(folder)
        summary = CountSummary()

        listing = self.reader.list_folder(folder)
        summary.errors.extend(listing.errors)

        for name in listing.entries:
            try:
                if DocumentType.from_suffix(Path(name).suffix) is None:
                    continue
                self.registry.add_notebook(name, folder / name)
                summary.count += 1
            except Exception as e:
                logger.error(f"Finding notebook files encountered an error: {e}")

        return summary

    def process_notebook_folder(self, folder: Path) -> int:
        summary = self.count_folder(folder)
        errors = summary.error_messages

        if summary.count <= 0:
            self.log(f"No valid notebooks found in {folder}" + (".\n" + "\n".join(errors) if errors else ""))
            return summary.count

        self.log(
            f"{summary.count} notebook(s) found."
            + ("\n\nProblems while converting: \n" + "\n".join(errors) if errors else "")
        )
        return summary.count

    def process_book_folder(self, root: Path) -> int:
        """
        Counts notebooks in every subfolder of a book root.
        Always returns the total found so far, even after an unexpected failure.
        """
        root = Path(root)
        summary = CountSummary()

        try:
            self.log("Jupyter Book found!")

            listing = self.reader.list_folder(root)
            summary.errors.extend(listing.errors)

            for name in listing.entries:
                if not self.reader.is_dir(root / name):
                    continue
                folder_summary = self.count_folder(root / name)
                summary.count += folder_summary.count
                summary.errors.extend(folder_summary.errors)
                self.registry.add_folder(name)

            errors = summary.error_messages
            self.log(
                f"{summary.count} notebook(s) found! "
                + ("\n\nProblems while converting: \n" + "\n".join(errors) if errors else "")
            )
        except Exception as e:
            logger.critical(f"Book scan failed fatally: {e}")
            self.log(f"An unexpected error occurred: {e}")

        return summary.count
