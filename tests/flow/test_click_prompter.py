"""Tests for ClickPrompter, run inside small click commands via CliRunner."""

import click
import pytest
from click.testing import CliRunner

from template_scaffold.errors import OperationCancelled
from template_scaffold.flow.prompter import ClickPrompter
from template_scaffold.naming import is_valid_package_name


def _run(ask, input_text):
    """Invoke ask(prompter) inside a click command and echo its answer."""

    @click.command()
    def command():
        try:
            answer = ask(ClickPrompter())
        except OperationCancelled:
            click.echo("<cancelled>")
            return
        click.echo(f"<answer:{answer}>")

    return CliRunner().invoke(command, input=input_text)


@pytest.mark.unit
class TestClickPrompterText:

    def test_returns_typed_value(self):
        result = _run(lambda p: p.text("Project name", default="my-project"), "demo\n")
        assert "<answer:demo>" in result.output

    def test_enter_returns_default(self):
        result = _run(lambda p: p.text("Project name", default="my-project"), "\n")
        assert "Project name [my-project]" in result.output
        assert "<answer:my-project>" in result.output

    def test_rejected_value_is_reasked(self):
        result = _run(
            lambda p: p.text(
                "Package name", default="x",
                validate=is_valid_package_name,
                error_message="Invalid package.json name",
            ),
            "Bad Name\ngood-name\n",
        )
        assert "Invalid package.json name" in result.output
        assert "<answer:good-name>" in result.output

    def test_closed_input_cancels(self):
        result = _run(lambda p: p.text("Project name", default="my-project"), "")
        assert "<cancelled>" in result.output


@pytest.mark.unit
class TestClickPrompterConfirm:

    def test_yes(self):
        result = _run(lambda p: p.confirm("Remove existing files and continue?"), "y\n")
        assert "<answer:True>" in result.output

    def test_default_is_no(self):
        result = _run(lambda p: p.confirm("Remove existing files and continue?"), "\n")
        assert "<answer:False>" in result.output

    def test_closed_input_cancels(self):
        result = _run(lambda p: p.confirm("Remove existing files and continue?"), "")
        assert "<cancelled>" in result.output


@pytest.mark.unit
class TestClickPrompterSelect:

    OPTIONS = [("t1", "one"), ("t2", "...")]

    def test_returns_zero_based_index(self):
        result = _run(lambda p: p.select("Select a template:", self.OPTIONS), "2\n")

        assert "Select a template:" in result.output
        assert "  1) t1 - one" in result.output
        assert "  2) t2 - ..." in result.output
        assert "<answer:1>" in result.output

    def test_enter_takes_default_index(self):
        result = _run(lambda p: p.select("Pick", self.OPTIONS, default_index=1), "\n")

        assert "Template number [2]" in result.output
        assert "<answer:1>" in result.output

    def test_out_of_range_choice_is_reasked(self):
        result = _run(lambda p: p.select("Pick", self.OPTIONS), "5\nabc\n1\n")

        assert "is not in the range" in result.output
        assert "<answer:0>" in result.output

    def test_option_without_description_has_no_suffix(self):
        result = _run(lambda p: p.select("Pick", [("bare", "")]), "1\n")

        assert "  1) bare\n" in result.output

    def test_closed_input_cancels(self):
        result = _run(lambda p: p.select("Pick", self.OPTIONS), "")

        assert "<cancelled>" in result.output
