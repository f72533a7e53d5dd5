"""TemplateCloner: clones a template repository with GitPython."""

from git import Repo
from git.exc import CommandError

from template_scaffold.errors import CloneFailedError


class TemplateCloner:
    """Clones a template repository into the scaffold directory."""

    def clone(self, source_url, destination):
        """Clone source_url into destination and wait for git to finish.

        destination may exist as long as it is empty.

        Raises:
            CloneFailedError: If git is missing or git clone exits with an
                error.
        """
        try:
            Repo.clone_from(str(source_url), str(destination))
        except CommandError as exc:
            raise CloneFailedError(f"git clone {source_url} failed: {exc}") from exc
