"""Template value object: one clonable repository in the catalog."""

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class Template:
    """A template repository as listed by the catalog."""

    name: str
    description: str | None
    source_url: str

    @classmethod
    def from_search_item(cls, item: Mapping[str, Any]) -> "Template":
        """Build a Template from a GitHub repository search result item."""
        return cls(
            name=item["name"],
            description=item.get("description"),
            source_url=item["clone_url"],
        )

    @property
    def summary(self) -> str:
        return self.description if self.description is not None else "..."


def find_template(templates, name):
    """Return the template whose name equals name exactly, or None."""
    if not name:
        return None
    for template in templates:
        if template.name == name:
            return template
    return None
