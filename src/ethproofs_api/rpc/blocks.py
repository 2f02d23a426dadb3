"""Block details: ``GET /blocks/{block}``."""

from typing import ClassVar

from pydantic import BaseModel, Field, NonNegativeInt

from ethproofs_api.rpc.base import ApiRequest, HttpMethod, WireModel, path_segment
from ethproofs_api.rpc.common import NumberOrString


class GetBlockDetailsResponse(WireModel):
    block_number: NonNegativeInt
    timestamp: str
    gas_used: NonNegativeInt
    transaction_count: NonNegativeInt
    hash: str
    created_at: str
    updated_at: str | None = None


class GetBlockDetailsRequest(ApiRequest):
    """GET /blocks/{block}, by block number or block hash."""

    method: ClassVar[HttpMethod] = "GET"
    response_type: ClassVar[type[BaseModel]] = GetBlockDetailsResponse

    block_number: NumberOrString = Field(..., alias="block")

    def endpoint(self) -> str:
        return f"/blocks/{path_segment(self.block_number)}"
