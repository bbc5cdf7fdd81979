"""Fixed on-disk names shared by the result store and the freezer."""

from __future__ import annotations

from docfreeze.types import IncludeKind

PROJECT_FREEZE_DIR = "_freeze"
PROJECT_SCRATCH_DIR = ".docfreeze"
PROJECT_CONFIG_FILE = "_project.yml"

FREEZE_EXECUTE_RESULTS = "execute-results"
OLD_FREEZE_EXECUTE_RESULTS = "execute"

FILES_DIR_SUFFIX = "_files"
RECORD_SUFFIX = ".json"

INCLUDE_IN_HEADER: IncludeKind = "include-in-header"
INCLUDE_BEFORE_BODY: IncludeKind = "include-before-body"
INCLUDE_AFTER_BODY: IncludeKind = "include-after-body"

INCLUDE_KINDS: tuple[IncludeKind, ...] = (
    INCLUDE_IN_HEADER,
    INCLUDE_BEFORE_BODY,
    INCLUDE_AFTER_BODY,
)
