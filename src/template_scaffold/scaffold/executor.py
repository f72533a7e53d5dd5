"""ScaffoldExecutor: turns a ResolvedConfig into a project directory on disk."""

import os
import shutil

import click

from template_scaffold.errors import CloneFailedError, ScaffoldError, failure_mark
from template_scaffold.scaffold.package_descriptor import rename_package

GIT_DIR = ".git"
LOCKFILES = ("package-lock.json", "yarn.lock", "pnpm-lock.yaml")


class ScaffoldExecutor:
    """Clears the target, clones the template and post-processes the result.

    Args:
        cloner: Object with clone(source_url, destination), e.g. TemplateCloner.
    """

    def __init__(self, cloner):
        self._cloner = cloner

    def execute(self, config) -> bool:
        """Scaffold config.template into config.root.

        Nothing is rolled back on failure: a failed clone may leave a
        partial directory behind.

        Returns:
            True on success, False if the clone failed.

        Raises:
            ScaffoldError: If emptying the target, the descriptor rewrite
                or the cleanup fails.
        """
        root = str(config.root)
        if os.path.lexists(root):
            try:
                _clear_directory(root)
            except OSError as exc:
                raise ScaffoldError(f"Could not empty {root}: {exc}") from exc

        print(f"\nClone project template in {root}...\n")
        try:
            self._cloner.clone(config.template.source_url, root)
        except CloneFailedError as exc:
            click.echo(f"{failure_mark()} {exc}", err=True)
            return False

        try:
            rename_package(root, config.descriptor_name)
        except (OSError, ValueError) as exc:
            raise ScaffoldError(f"Could not rewrite package.json: {exc}") from exc

        try:
            remove_vcs_artifacts(root)
        except OSError as exc:
            raise ScaffoldError(f"Could not clean {root}: {exc}") from exc

        print("Done.\n")
        return True


def remove_vcs_artifacts(root):
    """Delete the .git directory and known lockfiles; missing entries are ignored."""
    git_dir = os.path.join(root, GIT_DIR)
    if os.path.isdir(git_dir):
        shutil.rmtree(git_dir)
    for lockfile in LOCKFILES:
        path = os.path.join(root, lockfile)
        if os.path.lexists(path):
            os.remove(path)


def _clear_directory(path):
    """Remove everything inside path, keeping path itself.

    A regular file at path is removed outright.
    """
    if not os.path.isdir(path) or os.path.islink(path):
        os.remove(path)
        return
    for entry in os.listdir(path):
        entry_path = os.path.join(path, entry)
        if os.path.isdir(entry_path) and not os.path.islink(entry_path):
            shutil.rmtree(entry_path)
        else:
            os.remove(entry_path)
