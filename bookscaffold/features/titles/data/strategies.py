import re
from typing import List, Optional

from ..domain.interfaces import ITitleStrategy, UNTITLED

# Characters dropped from a title line, plus literal "\n" escapes
STRIP_CHARS_RE = re.compile(r"""[:#"',]""")
ESCAPED_NEWLINE_RE = re.compile(r"\\n")

# A notebook serialized by Jupyter has its first cell's metadata on line 6
NOTEBOOK_TITLE_LINE = 6


def clean_title(line: str) -> str:
    return ESCAPED_NEWLINE_RE.sub("", STRIP_CHARS_RE.sub("", line)).strip()


def is_untitled(lines: List[str]) -> bool:
    """
    Empty first line, or a collapsed first cell, means there is no usable title.
    """
    if not lines or lines[0] == "":
        return True
    return len(lines) > NOTEBOOK_TITLE_LINE and "collapsed" in lines[NOTEBOOK_TITLE_LINE]


class LineOffsetTitleStrategy(ITitleStrategy):
    """
    Takes the title verbatim from a fixed line of the document.
    """
    line_index: int = 0

    def extract(self, lines: List[str]) -> Optional[str]:
        if is_untitled(lines) or len(lines) <= self.line_index:
            return UNTITLED
        return clean_title(lines[self.line_index])


class NotebookTitleStrategy(LineOffsetTitleStrategy):
    """
    Reads the title from the source of the first markdown cell,
    as laid out by Jupyter's pretty-printed .ipynb JSON.
    """
    line_index = NOTEBOOK_TITLE_LINE


class MarkdownTitleStrategy(LineOffsetTitleStrategy):
    """First line is expected to be the H1 heading."""
    line_index = 0
