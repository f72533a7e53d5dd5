"""ResolvedConfig: everything the executor needs, settled once the prompts are done."""

import os
from dataclasses import dataclass
from pathlib import Path

from template_scaffold.catalog.template import Template, find_template
from template_scaffold.errors import TemplateNotAvailable


@dataclass(frozen=True)
class ResolvedConfig:
    """Final answers of the decision flow.

    Attributes:
        target_dir: Target directory as entered, relative to the cwd.
        project_name: target_dir, or the cwd basename when target_dir is ".".
        package_name: Package name entered at the prompt, None if the
            project name was already a valid package name.
        template: The catalog entry to clone.
        overwrite: The overwrite answer, None if the question was not asked.
        root: Absolute path of the scaffold.
    """

    target_dir: str
    project_name: str
    package_name: str | None
    template: Template
    overwrite: bool | None
    root: Path

    @property
    def descriptor_name(self) -> str:
        return self.package_name or self.project_name


def resolve_config(flow_result, templates, template_argument, cwd) -> ResolvedConfig:
    """Combine the flow answers with the --template flag.

    The template chosen at the prompt wins; otherwise the flag value is
    looked up in the catalog.

    Raises:
        TemplateNotAvailable: If no template could be resolved.
    """
    template = flow_result.template or find_template(templates, template_argument)
    if template is None:
        raise TemplateNotAvailable()
    return ResolvedConfig(
        target_dir=flow_result.target_dir,
        project_name=flow_result.project_name,
        package_name=flow_result.package_name,
        template=template,
        overwrite=flow_result.overwrite,
        root=Path(os.path.join(cwd, flow_result.target_dir)).resolve(),
    )
