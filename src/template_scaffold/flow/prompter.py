"""ClickPrompter: terminal prompts for the decision flow."""

import click

from template_scaffold.errors import OperationCancelled


def _option_line(number, title, description):
    line = f"  {number}) {title}"
    if description:
        line += f" - {description}"
    return line


class ClickPrompter:
    """Asks questions on the terminal using click.

    Every method converts click.Abort (Ctrl-C, closed input) into
    OperationCancelled so callers see a single cancellation signal.
    """

    def _ask(self, ask_fn, *args, **kwargs):
        try:
            return ask_fn(*args, **kwargs)
        except click.Abort:
            click.echo("")
            raise OperationCancelled()

    def text(self, message, default, validate=None, error_message="Invalid value"):
        """Prompt for a line of text, re-asking while validate rejects it."""

        def value_proc(value):
            if validate is not None and not validate(value):
                raise click.BadParameter(error_message)
            return value

        return self._ask(click.prompt, message, default=default, value_proc=value_proc)

    def confirm(self, message, default=False):
        return self._ask(click.confirm, message, default=default)

    def select(self, message, options, default_index=0):
        """List options as a numbered menu and return the 0-based index picked.

        Out-of-range or non-numeric answers are re-asked by click.
        """
        click.echo("")
        click.echo(message)
        for number, (title, description) in enumerate(options, start=1):
            click.echo(_option_line(number, title, description))
        choice = self._ask(
            click.prompt,
            "Template number",
            type=click.IntRange(1, len(options)),
            default=default_index + 1,
        )
        return choice - 1
