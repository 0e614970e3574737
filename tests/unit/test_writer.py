"""Tests for FileWriter - smart page writer."""

from pathlib import Path

import pytest

from serialized_form.models.node import DocumentNode, Role
from serialized_form.writer import FileWriter


def _body(text: str = "content") -> DocumentNode:
    return DocumentNode(Role.BODY).append(DocumentNode(Role.MAIN).append(text))


def test_init_creates_writer_for_valid_directory(tmp_path: Path) -> None:
    """FileWriter accepts an existing directory."""
    writer = FileWriter(tmp_path)

    assert writer.outdir == str(tmp_path.resolve())
    assert writer.dry_run is False
    assert writer.filename == "serialized-form.html"


def test_init_raises_for_missing_directory(tmp_path: Path) -> None:
    """FileWriter raises ValueError when directory does not exist."""
    with pytest.raises(ValueError, match="not found"):
        FileWriter(tmp_path / "does_not_exist")


def test_init_dry_run_allows_missing_directory(tmp_path: Path) -> None:
    """In dry-run mode, missing directory is allowed."""
    writer = FileWriter(tmp_path / "does_not_exist", dry_run=True)

    assert writer.dry_run is True


def test_is_possible_output_accepts_html_only(tmp_path: Path) -> None:
    writer = FileWriter(tmp_path)

    assert writer.is_possible_output("serialized-form.html") is True
    assert writer.is_possible_output("notes.txt") is False


def test_print_document_writes_rendered_html(tmp_path: Path) -> None:
    writer = FileWriter(tmp_path)

    writer.print_document(_body(), title="Serialized Form")

    written = (tmp_path / "serialized-form.html").read_text()
    assert "<title>Serialized Form</title>" in written
    assert "<main>content</main>" in written


def test_make_page_file_reports_actions(tmp_path: Path) -> None:
    """First write creates, identical write is skipped, new contents update."""
    writer = FileWriter(tmp_path)

    assert writer.make_page_file("a.html", contents="one") == "create"
    assert writer.make_page_file("a.html", contents="one") == "same"
    assert writer.make_page_file("a.html", contents="two") == "update"
    assert (tmp_path / "a.html").read_text() == "two"
    assert writer.updates == [
        ("create", str(tmp_path.resolve() / "a.html")),
        ("update", str(tmp_path.resolve() / "a.html")),
    ]


def test_make_page_file_skips_unchanged_content(tmp_path: Path) -> None:
    (tmp_path / "a.html").write_text("same")
    writer = FileWriter(tmp_path)

    writer.make_page_file("a.html", contents="same")

    assert writer._num_same == 1
    assert writer._num_changed == 0
    assert writer.summary() == "Outputs: 1 same, 0 changed, 0 new"


def test_make_page_file_rejects_absolute_path(tmp_path: Path) -> None:
    writer = FileWriter(tmp_path)

    with pytest.raises(ValueError, match="must be relative"):
        writer.make_page_file("/etc/page.html", contents="")


def test_make_page_file_rejects_escaping_path(tmp_path: Path) -> None:
    writer = FileWriter(tmp_path / "out", dry_run=True)

    with pytest.raises(ValueError, match="Path escapes outdir"):
        writer.make_page_file("../page.html", contents="")


def test_make_page_file_rejects_non_html(tmp_path: Path) -> None:
    writer = FileWriter(tmp_path)

    with pytest.raises(ValueError, match="is_possible_output"):
        writer.make_page_file("page.txt", contents="")


def test_make_page_file_creates_subdirectories(tmp_path: Path) -> None:
    writer = FileWriter(tmp_path)

    writer.make_page_file("sub/dir/page.html", contents="x")

    assert (tmp_path / "sub" / "dir" / "page.html").exists()


def test_dry_run_writes_nothing(tmp_path: Path) -> None:
    writer = FileWriter(tmp_path, dry_run=True)

    writer.print_document(_body(), title="Serialized Form")

    assert not (tmp_path / "serialized-form.html").exists()
    assert writer.updates == [("create", str(tmp_path.resolve() / "serialized-form.html"))]


def test_print_document_raises_os_error_on_unwritable_target(tmp_path: Path) -> None:
    # A directory in place of the page file makes open() fail.
    (tmp_path / "serialized-form.html").mkdir()
    writer = FileWriter(tmp_path)

    with pytest.raises(OSError):
        writer.print_document(_body(), title="Serialized Form")
