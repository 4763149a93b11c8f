# File: tests/conftest.py

import pytest
import os
import sys
import logging

# 1. Add project root to path
sys.path.append(os.getcwd())


def _write_notebook(path, title_line):
    """
    Writes a notebook laid out like Jupyter's pretty-printed JSON,
    with `title_line` landing on line index 6.
    """
    path.write_text(
        "{\n"
        ' "cells": [\n'
        "  {\n"
        '   "cell_type": "markdown",\n'
        '   "metadata": {},\n'
        '   "source": [\n'
        f"    {title_line}\n"
        "   ]\n"
        "  }\n"
        " ]\n"
        "}\n"
    )
    return path


@pytest.fixture(scope="session", autouse=True)
def global_setup():
    """
    Runs once per test session.
    Keeps library logging visible to caplog at DEBUG.
    """
    logging.getLogger("bookscaffold").setLevel(logging.DEBUG)
    yield


@pytest.fixture
def make_notebook():
    return _write_notebook


@pytest.fixture
def notebook_folder(tmp_path):
    """
    A flat folder with:
    - 3 valid files (.ipynb, .md, upper-case .IPYNB)
    - 2 ignored files (.txt, .png)
    """
    folder = tmp_path / "notebooks"
    folder.mkdir()
    _write_notebook(folder / "a_setup.ipynb", '"# Setup\\n",')
    (folder / "b_notes.md").write_text("# Notes\n")
    _write_notebook(folder / "c_LOUD.IPYNB", '"# Loud\\n",')
    (folder / "d_data.txt").write_text("not a notebook")
    (folder / "e_plot.png").write_bytes(b"\x89PNG")
    return folder


@pytest.fixture
def book_root(tmp_path):
    """
    Minimal book:
      content/
        ch1/intro.md          "# Intro"
        standalone.md         "# Standalone"
    """
    root = tmp_path / "book"
    chapter = root / "content" / "ch1"
    chapter.mkdir(parents=True)
    (chapter / "intro.md").write_text("# Intro\nSome text.\n")
    (root / "content" / "standalone.md").write_text("# Standalone\n")
    return root
