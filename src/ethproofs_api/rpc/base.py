"""Base classes shared by every request and response payload."""

from typing import Any, ClassVar, Literal
from urllib.parse import quote

from pydantic import BaseModel, ConfigDict

HttpMethod = Literal["GET", "POST"]


class WireModel(BaseModel):
    """Immutable payload that maps 1:1 onto a JSON object on the wire."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_wire(self, omit_none: bool = True) -> dict[str, Any]:
        """Serialize using wire field names."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=omit_none)


class ApiRequest(WireModel):
    """One endpoint call.

    Subclasses declare the HTTP method, the concrete response model the
    endpoint returns, and how the path is built from their fields.
    """

    method: ClassVar[HttpMethod] = "GET"
    response_type: ClassVar[type[BaseModel]]
    # ProvedProofRequest sends explicit nulls, everything else omits them
    omit_none: ClassVar[bool] = True

    def endpoint(self) -> str:
        """Path relative to the base URL, including any query string.

        Subclasses must override this; the base class has no path of its own.
        """
        raise NotImplementedError(f"{type(self).__name__} does not define an endpoint")

    def body(self) -> dict[str, Any] | None:
        """JSON body for mutating requests, ``None`` for reads."""
        if self.method == "GET":
            return None
        return self.to_wire(omit_none=self.omit_none)


def path_segment(value: Any) -> str:
    return quote(str(value), safe="")


def with_query(path: str, params: list[tuple[str, Any]]) -> str:
    """Append ``params`` whose value is not None, in order.

    The first parameter is joined with ``?`` and the rest with ``&``.
    """
    parts = [
        f"{name}={quote(str(value), safe=',')}"
        for name, value in params
        if value is not None
    ]
    if not parts:
        return path
    return f"{path}?{'&'.join(parts)}"
