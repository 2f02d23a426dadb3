"""
The closed set of requests the client can dispatch.

``into_parts`` is the single derivation point from a request value to the
(method, endpoint, body) triple handed to the transport.
"""

from dataclasses import dataclass
from typing import Any, Union, get_args

from pydantic_core import PydanticSerializationError

from ethproofs_api.exceptions import SerializationError
from ethproofs_api.rpc import (
    CreateClusterRequest,
    CreateSingleMachineRequest,
    DownloadProofRequest,
    DownloadProofsRequest,
    GetBlockDetailsRequest,
    ListActiveClustersForATeamRequest,
    ListCloudInstancesRequest,
    ListClustersRequest,
    ListProofsRequest,
    ProvedProofRequest,
    ProvingProofRequest,
    QueuedProofRequest,
)
from ethproofs_api.rpc.base import HttpMethod

EthProofsRequest = Union[
    GetBlockDetailsRequest,
    CreateClusterRequest,
    ListClustersRequest,
    ListActiveClustersForATeamRequest,
    CreateSingleMachineRequest,
    DownloadProofRequest,
    DownloadProofsRequest,
    ListProofsRequest,
    QueuedProofRequest,
    ProvingProofRequest,
    ProvedProofRequest,
    ListCloudInstancesRequest,
]

REQUEST_TYPES: tuple[type, ...] = get_args(EthProofsRequest)


@dataclass(frozen=True)
class RequestParts:
    """Everything the transport needs to know about one request."""

    method: HttpMethod
    endpoint: str
    body: dict[str, Any] | None


def into_parts(request: EthProofsRequest) -> RequestParts:
    """Derive method, endpoint and body from a request.

    Raises:
        TypeError: If ``request`` is not one of the known request variants
        SerializationError: If the body cannot be serialized to JSON
    """
    if not isinstance(request, REQUEST_TYPES):
        raise TypeError(f"Unsupported request type: {type(request).__name__}")

    try:
        body = request.body()
    except (PydanticSerializationError, TypeError, ValueError) as e:
        raise SerializationError(
            f"Could not serialize {type(request).__name__}: {e}"
        ) from e

    return RequestParts(method=request.method, endpoint=request.endpoint(), body=body)
