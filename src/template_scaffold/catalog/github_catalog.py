"""GitHubTemplateCatalog: lists an account's template repositories via the search API."""

from typing import List, Optional

import httpx

from template_scaffold.catalog.template import Template
from template_scaffold.errors import CatalogError

GITHUB_API_URL = "https://api.github.com"
GITHUB_API_VERSION = "2022-11-28"
DEFAULT_OWNER = "congnv0330"


def build_client(token: Optional[str] = None) -> httpx.Client:
    """Create an httpx.Client preconfigured for the GitHub REST API."""
    headers = {
        "Accept": "application/vnd.github+json",
        "X-GitHub-Api-Version": GITHUB_API_VERSION,
    }
    if token:
        headers["Authorization"] = f"Bearer {token}"
    return httpx.Client(base_url=GITHUB_API_URL, headers=headers)


class GitHubTemplateCatalog:
    """Fetches the repositories of one account that are marked as templates.

    Args:
        owner: GitHub user whose template repositories form the catalog.
        token: Optional API token, sent as a bearer token.
        client: Optional httpx.Client; tests pass one backed by
            httpx.MockTransport.
        per_page: Page size requested from the search API.
    """

    def __init__(self, owner=DEFAULT_OWNER, token=None, client=None, per_page=100):
        self._owner = owner
        self._client = client or build_client(token)
        self._per_page = per_page

    @property
    def query(self) -> str:
        return f"template:true user:{self._owner}"

    def fetch_template_repositories(self) -> List[Template]:
        """Return every template repository, following pagination.

        Pages are requested until the accumulated item count reaches the
        total_count reported by the API, or a page comes back empty.

        Raises:
            CatalogError: On any transport or HTTP status error.
        """
        templates: List[Template] = []
        page = 1
        while True:
            data = self._search(page)
            items = data.get("items", [])
            templates.extend(Template.from_search_item(item) for item in items)
            if not items or len(templates) >= data.get("total_count", 0):
                return templates
            page += 1

    def _search(self, page):
        try:
            response = self._client.get(
                "/search/repositories",
                params={"q": self.query, "per_page": self._per_page, "page": page},
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise CatalogError(
                f"Template search failed with HTTP {exc.response.status_code}: "
                f"{exc.response.text}"
            ) from exc
        except httpx.HTTPError as exc:
            raise CatalogError(f"Template search failed: {exc}") from exc
        try:
            return response.json()
        except ValueError as exc:
            raise CatalogError(f"Template search returned invalid JSON: {exc}") from exc
