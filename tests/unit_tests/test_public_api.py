"""Unit tests for top-level wrappers and logging setup."""

from __future__ import annotations

import logging
from pathlib import Path

import docfreeze
from docfreeze.application import build_render_options, render_input
from docfreeze.logging_utils import configure_logging
from docfreeze.schemas import ExecuteResult
from docfreeze.temp import TempFileAllocator


class _Engine:
    def execute(self, input_path: Path, output_path: Path) -> ExecuteResult:
        del input_path, output_path
        return ExecuteResult(supporting=[])


class _Converter:
    def convert(
        self, input_path: Path, output_path: Path, result: ExecuteResult
    ) -> Path:
        del input_path, result
        return output_path


def test_freeze_then_defrost_wrappers(
    project_dir: Path, temp: TempFileAllocator
) -> None:
    input_path = project_dir / "doc.md"
    input_path.write_text("A")

    record = docfreeze.freeze(input_path, "html", ExecuteResult(supporting=[]))
    restored = docfreeze.defrost(input_path, "html", temp=temp)

    assert record == project_dir / "doc_files" / "execute-results" / "html.json"
    assert restored is not None
    assert restored.supporting == []


def test_application_wrappers_delegate(project_dir: Path) -> None:
    input_path = project_dir / "doc.md"
    input_path.write_text("A")

    result = render_input(
        input_path=input_path,
        output_path=project_dir / "doc.html",
        engine=_Engine(),
        converter=_Converter(),
        options=build_render_options(freeze="auto"),
    )

    assert result.from_cache is False
    assert result.output_path == project_dir / "doc.html"


def test_configure_logging_replaces_handler() -> None:
    logger = configure_logging(logging.DEBUG)
    configure_logging(logging.WARNING)
    try:
        assert logger.name == "docfreeze"
        assert len(logger.handlers) == 1
        assert logger.level == logging.WARNING
        assert logger.handlers[0].level == logging.WARNING
    finally:
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)
