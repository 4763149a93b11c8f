import pytest
from pathlib import Path

from bookscaffold.core.common.enums import ScanErrorKind
from bookscaffold.features.notebook_scanner.data.folder_reader import LocalFolderReader
from bookscaffold.features.notebook_scanner.domain.models import NotebookRegistry
from bookscaffold.features.notebook_scanner.service.counter import NotebookCounter

# --- FIXTURES ---

@pytest.fixture
def registry():
    return NotebookRegistry()

@pytest.fixture
def messages():
    """Collects everything the counter sends to its log sink."""
    return []

@pytest.fixture
def counter(registry, messages):
    return NotebookCounter(registry, log=messages.append)

# --- FOLDER READER ---

def test_list_folder_returns_sorted_entries(notebook_folder):
    listing = LocalFolderReader().list_folder(notebook_folder)

    assert listing.ok
    assert listing.entries == [
        "a_setup.ipynb", "b_notes.md", "c_LOUD.IPYNB", "d_data.txt", "e_plot.png"
    ]

def test_list_folder_missing_path_records_one_error(tmp_path):
    missing = tmp_path / "does_not_exist"

    listing = LocalFolderReader().list_folder(missing)

    assert listing.entries == []
    assert len(listing.errors) == 1
    error = listing.errors[0]
    assert error.kind == ScanErrorKind.NOT_FOUND
    assert error.path == missing
    assert str(missing) in str(error)
    assert str(error).startswith("Unable to access ")

def test_list_folder_on_file_is_not_a_directory(tmp_path):
    a_file = tmp_path / "plain.md"
    a_file.write_text("# Plain\n")

    listing = LocalFolderReader().list_folder(a_file)

    assert listing.entries == []
    assert [e.kind for e in listing.errors] == [ScanErrorKind.NOT_A_DIRECTORY]
    assert isinstance(listing.errors[0].as_exception(), NotADirectoryError)

# --- SINGLE FOLDER ---

def test_count_folder_registers_only_notebooks(counter, registry, notebook_folder):
    """
    Verifies:
    1. .ipynb and .md match regardless of case.
    2. Other extensions are skipped.
    3. Names and paths stay index-aligned in listing order.
    """
    summary = counter.count_folder(notebook_folder)

    assert summary.count == 3
    assert summary.errors == []
    assert registry.notebook_names == ["a_setup.ipynb", "b_notes.md", "c_LOUD.IPYNB"]
    assert registry.notebook_paths == [notebook_folder / n for n in registry.notebook_names]
    assert len(registry) == 3

def test_process_notebook_folder_logs_count(counter, messages, notebook_folder):
    count = counter.process_notebook_folder(notebook_folder)

    assert count == 3
    assert messages == ["3 notebook(s) found."]

def test_process_notebook_folder_missing_path(counter, registry, messages, tmp_path):
    missing = tmp_path / "nowhere"

    count = counter.process_notebook_folder(missing)

    assert count == 0
    assert len(registry) == 0
    assert len(messages) == 1
    assert messages[0].startswith(f"No valid notebooks found in {missing}.\n")
    assert f"Unable to access {missing}" in messages[0]

def test_process_notebook_folder_empty_folder(counter, messages, tmp_path):
    count = counter.process_notebook_folder(tmp_path)

    assert count == 0
    assert messages == [f"No valid notebooks found in {tmp_path}"]

def test_default_log_sink_uses_logging(registry, notebook_folder, caplog):
    counter = NotebookCounter(registry)

    with caplog.at_level("INFO"):
        counter.process_notebook_folder(notebook_folder)

    assert "3 notebook(s) found." in caplog.text

# --- BOOK WIDE ---

def test_process_book_folder_counts_every_subfolder(counter, registry, messages, tmp_path):
    (tmp_path / "chapter_a").mkdir()
    (tmp_path / "chapter_a" / "one.ipynb").write_text("{}")
    (tmp_path / "chapter_a" / "two.md").write_text("# Two\n")
    (tmp_path / "chapter_b").mkdir()
    (tmp_path / "chapter_b" / "three.md").write_text("# Three\n")
    (tmp_path / "chapter_b" / "image.png").write_bytes(b"")
    (tmp_path / "stray.md").write_text("# Stray\n")

    total = counter.process_book_folder(tmp_path)

    assert total == 3
    assert registry.notebook_folders == ["chapter_a", "chapter_b"]
    assert registry.notebook_names == ["one.ipynb", "two.md", "three.md"]
    assert messages == ["Jupyter Book found!", "3 notebook(s) found! "]

def test_process_book_folder_missing_root_still_returns_count(counter, messages, tmp_path):
    missing = tmp_path / "no_book"

    total = counter.process_book_folder(missing)

    assert total == 0
    assert "Problems while converting" in messages[-1]
    assert str(missing) in messages[-1]

def test_process_book_folder_unexpected_failure_returns_partial_total(registry, messages, tmp_path):
    """
    A failure outside the per-folder scan is logged, never raised,
    and the count gathered so far is still returned.
    """
    (tmp_path / "ok").mkdir()
    (tmp_path / "ok" / "nb.ipynb").write_text("{}")
    (tmp_path / "boom").mkdir()

    class ExplodingRegistry(NotebookRegistry):
        def add_folder(self, name):
            if name == "ok":
                raise RuntimeError("registry is read-only")
            super().add_folder(name)

    counter = NotebookCounter(ExplodingRegistry(), log=messages.append)

    total = counter.process_book_folder(tmp_path)

    # "boom" sorts first and holds nothing; "ok" counts one before failing
    assert total == 1
    assert messages[-1] == "An unexpected error occurred: registry is read-only"
