"""CreateCommand: fetch the catalog, run the prompts, scaffold the project."""

import os
from dataclasses import dataclass

import click

from template_scaffold.catalog.github_catalog import GitHubTemplateCatalog
from template_scaffold.errors import OperationCancelled, failure_mark
from template_scaffold.flow.decision_flow import DecisionFlow
from template_scaffold.flow.prompter import ClickPrompter
from template_scaffold.scaffold.executor import ScaffoldExecutor
from template_scaffold.scaffold.resolved_config import resolve_config
from template_scaffold.scaffold.template_cloner import TemplateCloner


@dataclass
class CreateDeps:
    """Injectable collaborators for the create command."""

    catalog: object
    prompter: object = None
    cloner: object = None
    cwd: str = None

    @classmethod
    def for_opts(cls, opts, **overrides):
        """Build deps whose default catalog uses the owner and token in opts."""
        if overrides.get("catalog") is None:
            overrides["catalog"] = GitHubTemplateCatalog(opts.owner, token=opts.github_token)
        return cls(**overrides)

    def __post_init__(self):
        if self.prompter is None:
            self.prompter = ClickPrompter()
        if self.cloner is None:
            self.cloner = TemplateCloner()
        if self.cwd is None:
            self.cwd = os.getcwd()


class CreateCommand:
    """Scaffolds a new project from a template repository."""

    def __init__(self, opts, deps=None):
        self.opts = opts
        self.deps = deps or CreateDeps.for_opts(opts)

    def execute(self) -> bool:
        """Run the whole create workflow.

        Returns:
            True if the project was scaffolded, False if the user cancelled
            or the clone failed.

        Raises:
            CatalogError: If the template list cannot be fetched.
            TemplateNotAvailable: If no template was selected.
            ScaffoldError: If post-clone processing fails.
        """
        templates = self.deps.catalog.fetch_template_repositories()

        flow = DecisionFlow(self.deps.prompter, templates, self.deps.cwd)
        try:
            result = flow.run(self.opts.target_dir, self.opts.template)
        except OperationCancelled as exc:
            click.echo(f"{failure_mark()} {exc}")
            return False

        config = resolve_config(result, templates, self.opts.template, self.deps.cwd)
        return ScaffoldExecutor(self.deps.cloner).execute(config)
