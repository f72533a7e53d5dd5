"""Exceptions raised while resolving and scaffolding a project."""

import click

CROSS = "✖"


def failure_mark() -> str:
    return click.style(CROSS, fg="red")


class ScaffoldToolError(Exception):
    """Base class for errors reported to the user by the CLI."""


class OperationCancelled(ScaffoldToolError):
    """The user declined to overwrite the target or aborted a prompt."""

    def __init__(self, message="Operation cancelled"):
        super().__init__(message)


class TemplateNotAvailable(ScaffoldToolError):
    """Neither the --template flag nor the prompt produced a template."""

    def __init__(self, message="Something error. Template not available now."):
        super().__init__(message)


class CatalogError(ScaffoldToolError):
    """The template catalog could not be fetched."""


class CloneFailedError(ScaffoldToolError):
    """git clone of the selected template failed."""


class ScaffoldError(ScaffoldToolError):
    """Post-clone rewrite or cleanup of the scaffold failed."""
