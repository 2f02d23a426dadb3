"""Cloud instance catalogue: ``GET /cloud-instances``."""

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, RootModel

from ethproofs_api.rpc.base import ApiRequest, HttpMethod, with_query
from ethproofs_api.rpc.common import CloudInstance


class ListCloudInstancesResponse(RootModel[list[CloudInstance]]):
    """Bare JSON array of cloud instances."""

    model_config = ConfigDict(frozen=True)

    @property
    def instances(self) -> list[CloudInstance]:
        return self.root


class ListCloudInstancesRequest(ApiRequest):
    method: ClassVar[HttpMethod] = "GET"
    response_type: ClassVar[type[BaseModel]] = ListCloudInstancesResponse

    provider: str | None = None

    def endpoint(self) -> str:
        return with_query("/cloud-instances", [("provider", self.provider)])
