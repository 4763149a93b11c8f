import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from bookscaffold.core.config.settings import settings
from bookscaffold.core.common.enums import DocumentType

# Cross-Feature Imports (Service calls Service)
from bookscaffold.features.notebook_scanner.domain.interfaces import IFolderReader
from bookscaffold.features.notebook_scanner.data.folder_reader import LocalFolderReader
from bookscaffold.features.titles.service.extractor import TitleExtractor
from bookscaffold.features.titles.domain.interfaces import UNTITLED

from ..domain.interfaces import IBookWriter
from ..domain.models import BookContext, BuildSummary
from ..data.local_fs import LocalBookWriter

logger = logging.getLogger(__name__)

README_HEADER = "## Notebooks in this Chapter\n"

CHAPTER_STANZA = (
    "- title: {title}\n"
    "  url: {folder}/readme\n"
    "  not_numbered: true\n"
    "  expand_sections: true\n"
    "  sections: \n"
)
SECTION_STANZA = "  - title: {title}\n    url: {folder}/{slug}\n"
PAGE_STANZA = "- title: {title}\n  url: {slug}\n"
README_LINK = "- [{title}]({file_name})\n"


@dataclass(frozen=True)
class _Page:
    file_name: str
    title: str


def sliced_filename(file_name: str) -> str:
    """
    Drops the '.ipynb' (6 chars) or '.md' (3 chars) suffix.
    Anything that is not a notebook is assumed to carry a 3 char suffix.
    """
    if Path(file_name).suffix.lower() == DocumentType.NOTEBOOK.value:
        return file_name[:-6]
    return file_name[:-3]


class TocBuilder:
    """
    Builds _data/toc.yml and a readme.md per chapter for a
    content/<chapter>/<notebook> book layout.
    """

    def __init__(
        self,
        reader: Optional[IFolderReader] = None,
        writer: Optional[IBookWriter] = None,
        titles: Optional[TitleExtractor] = None,
    ):
        self.reader = reader or LocalFolderReader()
        self.writer = writer or LocalBookWriter()
        self.titles = titles or TitleExtractor(self.reader)

    def build(self, context: BookContext) -> BuildSummary:
        root = Path(context.root) if context.root is not None else settings.BOOK_ROOT
        content_dir = settings.content_dir_for(root)
        summary = BuildSummary(toc_path=settings.toc_path_for(root))

        logger.info(f"Building table of contents from: {content_dir}")

        listing = self.reader.list_folder(content_dir)
        if not listing.ok:
            summary.errors.extend(str(e) for e in listing.errors)
            return summary

        chapter_idx = 0
        toc_content = ""

        for entry in listing.entries:
            entry_path = content_dir / entry
            try:
                if self.reader.is_dir(entry_path):
                    chapter_title = self._chapter_title(context.chapter_names, chapter_idx, entry)
                    chapter_idx += 1
                    toc_content += self._build_chapter(entry_path, chapter_title, summary)
                else:
                    toc_content += self._build_page(entry_path, summary)

            except Exception as e:
                error_msg = f"Failed to add {entry} to the table of contents: {str(e)}"
                logger.error(error_msg)
                summary.errors.append(error_msg)

        summary.toc_content = toc_content
        self.writer.write_text(summary.toc_path, toc_content)

        logger.info(
            f"Table of contents complete. Chapters: {len(summary.chapters_written)}, "
            f"entries: {summary.entries_written}"
        )
        return summary

    def _chapter_title(self, chapter_names: List[str], idx: int, folder_name: str) -> str:
        if idx < len(chapter_names):
            return chapter_names[idx]
        logger.warning(f"No chapter name left for '{folder_name}', using the folder name")
        return folder_name

    def _build_chapter(self, chapter_dir: Path, chapter_title: str, summary: BuildSummary) -> str:
        """
        Renders the chapter stanza with one section per non-readme file and
        writes the chapter's readme.md.
        """
        folder = chapter_dir.name
        pages = self._collect_pages(chapter_dir)

        content = CHAPTER_STANZA.format(title=chapter_title, folder=folder)
        for page in pages:
            content += SECTION_STANZA.format(
                title=page.title,
                folder=folder.lower(),
                slug=sliced_filename(page.file_name).lower(),
            )

        readme = README_HEADER + "".join(
            README_LINK.format(title=page.title, file_name=page.file_name) for page in pages
        )
        summary.chapters_written.append(
            self.writer.write_text(chapter_dir / settings.README_NAME, readme)
        )
        summary.entries_written += 1 + len(pages)
        return content

    def _build_page(self, file_path: Path, summary: BuildSummary) -> str:
        title = self._title_for(file_path)
        summary.entries_written += 1
        return PAGE_STANZA.format(title=title, slug=sliced_filename(file_path.name).lower())

    def _collect_pages(self, chapter_dir: Path) -> List[_Page]:
        listing = self.reader.list_folder(chapter_dir)
        if not listing.ok:
            raise listing.errors[0].as_exception()

        pages = []
        for file_name in listing.entries:
            file_path = chapter_dir / file_name
            # readme.md has its own slot in the chapter stanza
            if "readme" in file_name.lower() or self.reader.is_dir(file_path):
                continue
            pages.append(_Page(file_name=file_name, title=self._title_for(file_path)))
        return pages

    def _title_for(self, file_path: Path) -> str:
        title = self.titles.extract(file_path)
        return UNTITLED if title is None else title


def build_custom_book(context: BookContext, builder: Optional[TocBuilder] = None) -> BuildSummary:
    """
    Entry point used by the scaffolding CLI. Never raises.
    """
    builder = builder or TocBuilder()
    try:
        return builder.build(context)
    except Exception as e:
        logger.critical(f"An unexpected error occurred: {e}")
        return BuildSummary(errors=[f"An unexpected error occurred: {e}"])
