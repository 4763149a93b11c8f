"""CLI for scaffolding a Jupyter Book from a folder of notebooks."""

import argparse
import logging
import sys
from pathlib import Path

from bookscaffold.core.config.settings import settings


class HelpFormatter(argparse.RawDescriptionHelpFormatter):
    """Formatter that preserves description whitespace and widens help columns."""

    def __init__(self, prog, **kwargs):
        kwargs.setdefault("max_help_position", 40)
        super().__init__(prog, **kwargs)


def cmd_count(args):
    from bookscaffold.features.notebook_scanner.domain.models import NotebookRegistry
    from bookscaffold.features.notebook_scanner.service.counter import NotebookCounter

    registry = NotebookRegistry()
    count = NotebookCounter(registry, log=print).process_notebook_folder(args.folder)
    for path in registry.notebook_paths:
        print(f"  {path}")
    return 0 if count > 0 else 1


def cmd_count_book(args):
    from bookscaffold.features.notebook_scanner.domain.models import NotebookRegistry
    from bookscaffold.features.notebook_scanner.service.counter import NotebookCounter

    registry = NotebookRegistry()
    count = NotebookCounter(registry, log=print).process_book_folder(args.root)
    for folder in registry.notebook_folders:
        print(f"  {folder}/")
    return 0 if count > 0 else 1


def cmd_build_toc(args):
    from bookscaffold.features.book_builder.domain.models import BookContext
    from bookscaffold.features.book_builder.service.toc_builder import build_custom_book

    context = BookContext(chapter_names=args.chapter or [], root=args.root)
    summary = build_custom_book(context)
    for error in summary.errors:
        print(error, file=sys.stderr)
    if summary.toc_path is not None and not summary.errors:
        print(f"Wrote {summary.toc_path} and {len(summary.chapters_written)} chapter readme(s)")
    return 1 if summary.errors else 0


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="bookscaffold",
        formatter_class=HelpFormatter,
        description="Discover notebooks and generate Jupyter Book TOC/readme scaffolding.",
        epilog="""\
examples:
  %(prog)s count ./notebooks                       Count notebooks in one folder
  %(prog)s count-book ./book/content               Count notebooks per chapter folder
  %(prog)s build-toc -c "Intro" -c "Deep Dive"     Write _data/toc.yml and chapter readmes""",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(
        dest="command",
        required=True,
        title="commands",
        metavar="<command>",
    )

    # count
    p = sub.add_parser(
        "count",
        formatter_class=HelpFormatter,
        help="Count .ipynb/.md files in a folder",
    )
    p.add_argument("folder", type=Path, metavar="FOLDER", help="Folder to scan (not recursive)")
    p.set_defaults(func=cmd_count)

    # count-book
    p = sub.add_parser(
        "count-book",
        formatter_class=HelpFormatter,
        help="Count .ipynb/.md files in every subfolder of a book",
    )
    p.add_argument("root", type=Path, metavar="ROOT", help="Folder whose subfolders hold notebooks")
    p.set_defaults(func=cmd_count_book)

    # build-toc
    p = sub.add_parser(
        "build-toc",
        formatter_class=HelpFormatter,
        help="Generate _data/toc.yml and a readme.md per chapter",
        description="Walk <root>/content and write <root>/_data/toc.yml.\n"
        "Chapter names are assigned to chapter folders in sorted order.",
    )
    p.add_argument("--root", "-r", type=Path, default=settings.BOOK_ROOT, metavar="DIR",
                   help="Book root containing content/ (default: BOOK_ROOT or cwd)")
    p.add_argument("--chapter", "-c", action="append", metavar="NAME",
                   help="Chapter display name; repeat once per chapter folder")
    p.set_defaults(func=cmd_build_toc)

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
