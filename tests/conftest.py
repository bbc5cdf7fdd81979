"""Shared pytest configuration, fixtures and marker assignment."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from docfreeze.project import ProjectContext
from docfreeze.schemas import ProjectConfig, ProjectSection
from docfreeze.temp import TempFileAllocator


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Attach suite markers based on test file path."""
    del config
    for item in items:
        path = Path(str(item.fspath))
        parts = set(path.parts)
        if "integration_tests" in parts:
            item.add_marker(pytest.mark.integration)
        elif "unit_tests" in parts:
            item.add_marker(pytest.mark.unit)


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """Real (symlink-free) project root."""
    root = tmp_path / "project"
    root.mkdir()
    return root.resolve()


@pytest.fixture
def project(project_dir: Path) -> ProjectContext:
    return ProjectContext(dir=project_dir, config=ProjectConfig())


@pytest.fixture
def lib_project(project_dir: Path) -> ProjectContext:
    """Project declaring a shared ``site_libs`` library directory."""
    return ProjectContext(
        dir=project_dir,
        config=ProjectConfig(project=ProjectSection(lib_dir="site_libs")),
    )


@pytest.fixture
def temp() -> Iterator[TempFileAllocator]:
    allocator = TempFileAllocator()
    yield allocator
    allocator.cleanup()
