"""Project context: root directory, scratch area and configuration."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import yaml
from pydantic import ValidationError

from docfreeze.constants import PROJECT_CONFIG_FILE, PROJECT_SCRATCH_DIR
from docfreeze.errors import ProjectConfigError
from docfreeze.schemas import ProjectConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProjectContext:
    """Project a set of inputs is rendered in.

    Parameters
    ----------
    dir : Path
        Absolute project root directory.
    config : ProjectConfig | None, default=None
        Parsed project configuration, if the project has one.
    """

    dir: Path
    config: ProjectConfig | None = None

    @property
    def lib_dir(self) -> str | None:
        """Shared library output directory name, if declared."""
        if self.config is None:
            return None
        return self.config.project.lib_dir

    def scratch_path(self, *parts: str) -> Path:
        """Resolve a path inside the project scratch area, creating it."""
        path = self.dir.joinpath(PROJECT_SCRATCH_DIR, *parts)
        path.mkdir(parents=True, exist_ok=True)
        return path

    @classmethod
    def load(cls, project_dir: Path) -> ProjectContext:
        """Build a context from ``project_dir`` and its ``_project.yml``.

        Raises
        ------
        ProjectConfigError
            If the configuration file is not valid YAML or fails validation.
        """
        project_dir = Path(project_dir).resolve()
        config_path = project_dir / PROJECT_CONFIG_FILE
        if not config_path.exists():
            return cls(dir=project_dir, config=ProjectConfig())
        return cls(dir=project_dir, config=load_project_config(config_path))


def load_project_config(config_path: Path) -> ProjectConfig:
    """Read and validate a project configuration file."""
    try:
        raw = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ProjectConfigError(f"Invalid YAML in {config_path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ProjectConfigError(f"{config_path} must contain a mapping.")

    try:
        config = ProjectConfig.model_validate(raw)
    except ValidationError as exc:
        raise ProjectConfigError(
            f"Invalid project configuration in {config_path}: {exc}"
        ) from exc
    logger.debug("loaded project config from %s", config_path)
    return config
