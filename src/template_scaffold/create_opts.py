"""Options dataclass for the create command."""

from dataclasses import dataclass

from template_scaffold.catalog.github_catalog import DEFAULT_OWNER


@dataclass
class CreateOpts:
    """All options for the create command."""

    target_dir: str | None = None
    template: str | None = None
    owner: str = DEFAULT_OWNER
    github_token: str | None = None
