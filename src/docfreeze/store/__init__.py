"""Freeze cache: result store, freeze/defrost and the project freezer."""

from docfreeze.store.defrost import defrost_execute_result, read_frozen_record
from docfreeze.store.freeze import freeze_execute_result
from docfreeze.store.freezer import (
    copy_from_project_freezer,
    copy_to_project_freezer,
    project_freezer_dir,
    prune_project_freezer,
    prune_project_freezer_dir,
)
from docfreeze.store.paths import (
    StoreLayout,
    as_freezer_dir,
    freeze_result_file,
    freezer_figs_dir,
    freezer_freeze_file,
    input_files_dir,
    remove_freeze_results,
)

__all__ = [
    "StoreLayout",
    "as_freezer_dir",
    "copy_from_project_freezer",
    "copy_to_project_freezer",
    "defrost_execute_result",
    "freeze_execute_result",
    "freeze_result_file",
    "freezer_figs_dir",
    "freezer_freeze_file",
    "input_files_dir",
    "project_freezer_dir",
    "prune_project_freezer",
    "prune_project_freezer_dir",
    "read_frozen_record",
    "remove_freeze_results",
]
