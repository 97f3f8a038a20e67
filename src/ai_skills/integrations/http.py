"""HTTP operations abstraction.

Architecture:
- HttpClient: Abstract base class defining the interface
- RealHttpClient: Production implementation using requests
- tests/fakes/http.py: In-memory fake keyed by URL
"""

import json
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

import requests

from ai_skills.errors import SourceFetchFailed

logger = logging.getLogger(__name__)

USER_AGENT = "ai-skills-cli"
DEFAULT_TIMEOUT_SECONDS = 15.0


@dataclass(frozen=True)
class HttpResponse:
    """Minimal response view used by the source resolver."""

    url: str
    status: int
    text: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


class HttpClient(ABC):
    """Abstract interface for the HTTP reads ai-skills performs."""

    @abstractmethod
    def get(self, url: str, headers: dict[str, str] | None = None) -> HttpResponse:
        """Perform a GET request.

        Non-2xx statuses are returned, not raised.

        Raises:
            SourceFetchFailed: On network-level failure (DNS, refused, timeout)
        """
        ...

    def get_json(self, url: str, headers: dict[str, str] | None = None) -> Any | None:
        """GET a JSON document, returning None on a non-2xx status."""
        response = self.get(url, headers=headers)
        if not response.ok:
            return None
        return json.loads(response.text)


class RealHttpClient(HttpClient):
    """Production implementation backed by a requests session."""

    def __init__(self, timeout: float = DEFAULT_TIMEOUT_SECONDS) -> None:
        self._timeout = timeout
        self._session = requests.Session()
        self._session.headers["User-Agent"] = USER_AGENT

    def get(self, url: str, headers: dict[str, str] | None = None) -> HttpResponse:
        logger.debug("GET %s", url)
        try:
            response = self._session.get(url, headers=headers, timeout=self._timeout)
        except requests.RequestException as e:
            raise SourceFetchFailed(url, None, str(e)) from e
        logger.debug("GET %s -> %s", url, response.status_code)
        # requests falls back to ISO-8859-1 for text/* without a charset
        if "charset" not in response.headers.get("Content-Type", "").lower():
            response.encoding = "utf-8"
        return HttpResponse(url=url, status=response.status_code, text=response.text)
