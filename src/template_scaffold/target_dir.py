"""Resolution of the target directory and the project name derived from it."""

import os

from template_scaffold.naming import format_target_dir

DEFAULT_TARGET_DIR = "my-project"
CURRENT_DIR = "."
GIT_DIR = ".git"


def resolve_target_dir(argument: str | None, entered: str | None = None) -> str:
    """Pick the target directory.

    The positional argument wins over an interactively entered value,
    which wins over DEFAULT_TARGET_DIR. Both inputs are normalized with
    format_target_dir and ignored when they normalize to an empty string.
    """
    return (
        format_target_dir(argument)
        or format_target_dir(entered)
        or DEFAULT_TARGET_DIR
    )


def is_empty(path) -> bool:
    """Return True if path has no entries, or only a .git directory."""
    entries = os.listdir(path)
    return len(entries) == 0 or (len(entries) == 1 and entries[0] == GIT_DIR)


def is_occupied(path) -> bool:
    """Return True if path exists and would need overwriting."""
    if not os.path.exists(path):
        return False
    return not os.path.isdir(path) or not is_empty(path)


def project_name_for(target_dir: str, cwd: str) -> str:
    if target_dir == CURRENT_DIR:
        return os.path.basename(os.path.abspath(cwd))
    return target_dir


def describe_target(target_dir: str) -> str:
    if target_dir == CURRENT_DIR:
        return "Current directory"
    return f'Target directory "{target_dir}"'
