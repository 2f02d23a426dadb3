"""HTTP transport abstraction.

Separates the HTTP transport from request derivation and error
classification so tests can replay canned exchanges without a network.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Protocol

from ethproofs_api.rpc.base import HttpMethod


@dataclass
class HttpResponse:
    """HTTP response data container."""

    status_code: int
    text: str | None  # Raw body, None if it could not be read
    headers: dict[str, str] = field(default_factory=dict)
    url: str = ""

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300

    def json(self) -> Any:
        """Decode the body as JSON.

        Raises:
            json.JSONDecodeError: If the body is not valid JSON
        """
        return json.loads(self.text if self.text is not None else "")


class IHttpClient(Protocol):
    """Abstraction for the HTTP transport.

    Single Responsibility: Execute one HTTP exchange and return the response.
    Does NOT handle:
    - Status code classification
    - Response decoding
    - Retries
    """

    async def request(
        self,
        method: HttpMethod,
        url: str,
        json: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> HttpResponse:
        """Execute one request.

        Args:
            method: HTTP method
            url: Absolute URL
            json: JSON body, sent only when not None
            headers: HTTP headers

        Raises:
            RequestError: On network, connection or timeout errors
        """
        ...

    async def close(self) -> None:
        """Release pooled connections."""
        ...
