"""Encyclopedia client for the Wikipedia REST API (page summaries)."""

from typing import Any
from urllib.parse import quote

from ..base import EncyclopediaClient
from ..models import EncyclopediaResult, EncyclopediaSummary
from .http import HttpBackendClient


class WikipediaClient(HttpBackendClient, EncyclopediaClient):
    """Fetches page summaries from one language edition.

    Args:
        language: Wikipedia language code (default: tr)
    """

    def __init__(self, language: str = "tr", base_url: str | None = None, **kwargs: Any):
        super().__init__(
            base_url=base_url or f"https://{language}.wikipedia.org/api/rest_v1/",
            **kwargs,
        )

    async def get_summary(self, title: str) -> EncyclopediaResult:
        path = "page/summary/" + quote(title.strip().replace(" ", "_"), safe="")
        response = await self._get(path, params={"redirect": "true"})
        if not response.is_success:
            return EncyclopediaResult(success=False, status_code=response.status_code)
        return EncyclopediaResult(
            success=True,
            status_code=response.status_code,
            body=EncyclopediaSummary.model_validate(response.json()),
        )
