"""Unit tests for result store path resolution and cleanup."""

from __future__ import annotations

from pathlib import Path

import pytest

from docfreeze.project import ProjectContext
from docfreeze.store.paths import (
    StoreLayout,
    as_freezer_dir,
    freeze_result_file,
    freezer_figs_dir,
    freezer_freeze_file,
    input_files_dir,
    output_extension,
    remove_freeze_results,
)


@pytest.mark.parametrize(
    ("output", "expected"),
    [
        ("doc.html", "html"),
        (Path("out/report.pdf"), "pdf"),
        ("html", "html"),
        (".docx", "docx"),
    ],
)
def test_output_extension(output: str | Path, expected: str) -> None:
    """Derive the record name from an output file or a bare extension."""
    assert output_extension(output) == expected


def test_freeze_result_file_layout(tmp_path: Path) -> None:
    """Place records under <stem>_files/execute-results/<ext>.json."""
    input_path = tmp_path / "doc.md"
    assert input_files_dir(input_path) == "doc_files"
    assert freeze_result_file(input_path, "doc.html") == (
        tmp_path / "doc_files" / "execute-results" / "html.json"
    )
    assert not (tmp_path / "doc_files").exists()


def test_freeze_result_file_is_per_format(tmp_path: Path) -> None:
    """Give each output format its own record and keep the mapping stable."""
    input_path = tmp_path / "doc.md"
    html = freeze_result_file(input_path, "doc.html")
    pdf = freeze_result_file(input_path, "doc.pdf")
    assert html != pdf
    assert freeze_result_file(input_path, "doc.html") == html


def test_freeze_result_file_ensure_dir_is_idempotent(tmp_path: Path) -> None:
    """Create the results directory on request, twice without error."""
    input_path = tmp_path / "doc.md"
    first = freeze_result_file(input_path, "doc.html", ensure_dir=True)
    second = freeze_result_file(input_path, "doc.html", ensure_dir=True)
    assert first == second
    assert first.parent.is_dir()


def test_remove_freeze_results_removes_current_and_legacy(tmp_path: Path) -> None:
    """Remove both layouts and the then-empty files dir."""
    files_dir = tmp_path / "doc_files"
    for layout in StoreLayout:
        (files_dir / layout).mkdir(parents=True)
        (files_dir / layout / "html.json").write_text("{}")

    remove_freeze_results(files_dir)

    assert not files_dir.exists()


def test_remove_freeze_results_keeps_other_artifacts(tmp_path: Path) -> None:
    """Leave the files dir in place while it still holds figures."""
    files_dir = tmp_path / "doc_files"
    (files_dir / "execute-results").mkdir(parents=True)
    (files_dir / "figure-html").mkdir()
    (files_dir / "figure-html" / "plot.png").write_bytes(b"png")

    remove_freeze_results(files_dir)

    assert not (files_dir / "execute-results").exists()
    assert (files_dir / "figure-html" / "plot.png").exists()


def test_remove_freeze_results_tolerates_missing_dir(tmp_path: Path) -> None:
    """Do nothing when there is nothing to remove."""
    remove_freeze_results(tmp_path / "missing_files")


def test_store_layout_legacy_names() -> None:
    assert StoreLayout.CURRENT == "execute-results"
    assert StoreLayout.legacy() == (StoreLayout.LEGACY,)
    assert StoreLayout.LEGACY == "execute"


@pytest.mark.parametrize(
    ("files_dir", "expected"),
    [
        ("doc_files", "doc"),
        ("chapters/intro_files", "chapters/intro"),
        ("figures", "figures"),
        ("my_files_dir", "my_files_dir"),
    ],
)
def test_as_freezer_dir(files_dir: str, expected: str) -> None:
    """Strip only a trailing _files suffix."""
    assert as_freezer_dir(files_dir) == expected


def test_freezer_freeze_file(project: ProjectContext) -> None:
    """Mirror a record path into the visible freezer."""
    record = Path("chapters/intro_files/execute-results/html.json")
    assert freezer_freeze_file(project, record) == (
        project.dir / "_freeze" / "chapters/intro" / "execute-results" / "html.json"
    )
    assert freezer_freeze_file(project, project.dir / record) == (
        freezer_freeze_file(project, record)
    )


def test_freezer_figs_dir(project: ProjectContext) -> None:
    assert freezer_figs_dir(project, "doc_files", "figure-html") == (
        project.dir / "_freeze" / "doc" / "figure-html"
    )
