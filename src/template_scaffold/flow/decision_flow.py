"""Decision flow: the ordered prompts that settle directory, package name and template.

next_step() is a pure transition function over FlowState. DecisionFlow
drives it, asking each step through an injected prompter.
"""

import os
from dataclasses import dataclass, field
from enum import Enum

from template_scaffold.catalog.template import Template
from template_scaffold.errors import OperationCancelled
from template_scaffold.naming import (
    format_target_dir,
    is_valid_package_name,
    to_valid_package_name,
)
from template_scaffold.target_dir import (
    DEFAULT_TARGET_DIR,
    describe_target,
    is_occupied,
    project_name_for,
    resolve_target_dir,
)

INVALID_PACKAGE_NAME = "Invalid package.json name"


class FlowStep(Enum):
    PROJECT_NAME = "project_name"
    OVERWRITE = "overwrite"
    PACKAGE_NAME = "package_name"
    TEMPLATE = "template"


@dataclass
class FlowState:
    """Inputs and answers accumulated while the flow runs.

    Attributes:
        target_dir: Current target directory, updated when the project
            name is answered.
        target_dir_from_argument: True if the positional argument fixed
            target_dir, in which case the project name is not asked.
        target_occupied: True if target_dir exists and is not empty.
        cwd: Working directory the target is resolved against.
        template_from_flag_valid: True if --template named a catalog entry.
    """

    target_dir: str = DEFAULT_TARGET_DIR
    target_dir_from_argument: bool = False
    target_occupied: bool = False
    cwd: str = "."
    template_from_flag_valid: bool = False
    overwrite: bool | None = None
    package_name: str | None = None
    template: Template | None = None
    asked: set = field(default_factory=set)

    @property
    def project_name(self) -> str:
        return project_name_for(self.target_dir, self.cwd)


def _wants_project_name(state):
    return not state.target_dir_from_argument


def _wants_overwrite(state):
    return state.target_occupied


def _wants_package_name(state):
    return not is_valid_package_name(state.project_name)


def _wants_template(state):
    return not state.template_from_flag_valid


_STEP_CONDITIONS = [
    (FlowStep.PROJECT_NAME, _wants_project_name),
    (FlowStep.OVERWRITE, _wants_overwrite),
    (FlowStep.PACKAGE_NAME, _wants_package_name),
    (FlowStep.TEMPLATE, _wants_template),
]


def next_step(state: FlowState) -> FlowStep | None:
    """Return the next step to ask, or None when the flow is complete.

    Raises:
        OperationCancelled: If the user answered no to overwriting.
    """
    if state.overwrite is False:
        raise OperationCancelled()
    for step, wanted in _STEP_CONDITIONS:
        if step not in state.asked and wanted(state):
            return step
    return None


@dataclass
class FlowResult:
    target_dir: str
    project_name: str
    overwrite: bool | None
    package_name: str | None
    template: Template | None


class DecisionFlow:
    """Runs the decision flow against a prompter.

    Args:
        prompter: Object with text(), confirm() and select() methods
            (ClickPrompter, or a fake in tests).
        templates: The catalog, in display order.
        cwd: Working directory the target is resolved against.
    """

    def __init__(self, prompter, templates, cwd):
        self._prompter = prompter
        self._templates = list(templates)
        self._cwd = cwd

    def run(self, target_dir_argument=None, template_argument=None) -> FlowResult:
        state = self.initial_state(target_dir_argument, template_argument)
        step = next_step(state)
        while step is not None:
            self._ask(step, state, template_argument)
            state.asked.add(step)
            step = next_step(state)
        return FlowResult(
            target_dir=state.target_dir,
            project_name=state.project_name,
            overwrite=state.overwrite,
            package_name=state.package_name,
            template=state.template,
        )

    def initial_state(self, target_dir_argument=None, template_argument=None) -> FlowState:
        target_dir = resolve_target_dir(target_dir_argument)
        return FlowState(
            target_dir=target_dir,
            target_dir_from_argument=bool(format_target_dir(target_dir_argument)),
            target_occupied=self._occupied(target_dir),
            cwd=self._cwd,
            template_from_flag_valid=any(
                t.name == template_argument for t in self._templates
            ),
        )

    def _occupied(self, target_dir):
        return is_occupied(os.path.join(self._cwd, target_dir))

    def _ask(self, step, state, template_argument):
        if step is FlowStep.PROJECT_NAME:
            entered = self._prompter.text("Project name", default=DEFAULT_TARGET_DIR)
            state.target_dir = resolve_target_dir(None, entered)
            state.target_occupied = self._occupied(state.target_dir)
        elif step is FlowStep.OVERWRITE:
            state.overwrite = self._prompter.confirm(
                f"{describe_target(state.target_dir)} is not empty. "
                "Remove existing files and continue?"
            )
        elif step is FlowStep.PACKAGE_NAME:
            state.package_name = self._prompter.text(
                "Package name",
                default=to_valid_package_name(state.project_name),
                validate=is_valid_package_name,
                error_message=INVALID_PACKAGE_NAME,
            )
        elif step is FlowStep.TEMPLATE:
            state.template = self._select_template(template_argument)

    def _select_template(self, template_argument):
        if not self._templates:
            return None
        if template_argument:
            message = (
                f'"{template_argument}" isn\'t a valid template. '
                "Please choose from below: "
            )
        else:
            message = "Select a template:"
        options = [(t.name, t.summary) for t in self._templates]
        return self._templates[self._prompter.select(message, options, default_index=0)]
