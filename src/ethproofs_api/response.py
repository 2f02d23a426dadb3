"""
Tagged responses.

``EthProofsResponse`` pairs a decoded payload with the endpoint that produced
it. ``into_inner`` narrows it back to one concrete payload type and fails
loudly when the tag does not match.
"""

import enum
from dataclasses import dataclass
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from ethproofs_api.exceptions import ParseError
from ethproofs_api.rpc import (
    CreateClusterResponse,
    CreateSingleMachineResponse,
    DownloadProofResponse,
    DownloadProofsResponse,
    GetBlockDetailsResponse,
    ListActiveClustersForATeamResponse,
    ListCloudInstancesResponse,
    ListClustersResponse,
    ListProofsResponse,
    ProvedProofResponse,
    ProvingProofResponse,
    QueuedProofResponse,
)

T = TypeVar("T", bound=BaseModel)


class ResponseKind(str, enum.Enum):
    """One member per endpoint."""

    GET_BLOCK_DETAILS = "get_block_details"
    CREATE_CLUSTER = "create_cluster"
    LIST_CLUSTERS = "list_clusters"
    LIST_ACTIVE_CLUSTERS_FOR_A_TEAM = "list_active_clusters_for_a_team"
    CREATE_SINGLE_MACHINE = "create_single_machine"
    DOWNLOAD_PROOF = "download_proof"
    DOWNLOAD_PROOFS = "download_proofs"
    LIST_PROOFS = "list_proofs"
    QUEUED_PROOF = "queued_proof"
    PROVING_PROOF = "proving_proof"
    PROVED_PROOF = "proved_proof"
    LIST_CLOUD_INSTANCES = "list_cloud_instances"


RESPONSE_TYPES: dict[ResponseKind, type[BaseModel]] = {
    ResponseKind.GET_BLOCK_DETAILS: GetBlockDetailsResponse,
    ResponseKind.CREATE_CLUSTER: CreateClusterResponse,
    ResponseKind.LIST_CLUSTERS: ListClustersResponse,
    ResponseKind.LIST_ACTIVE_CLUSTERS_FOR_A_TEAM: ListActiveClustersForATeamResponse,
    ResponseKind.CREATE_SINGLE_MACHINE: CreateSingleMachineResponse,
    ResponseKind.DOWNLOAD_PROOF: DownloadProofResponse,
    ResponseKind.DOWNLOAD_PROOFS: DownloadProofsResponse,
    ResponseKind.LIST_PROOFS: ListProofsResponse,
    ResponseKind.QUEUED_PROOF: QueuedProofResponse,
    ResponseKind.PROVING_PROOF: ProvingProofResponse,
    ResponseKind.PROVED_PROOF: ProvedProofResponse,
    ResponseKind.LIST_CLOUD_INSTANCES: ListCloudInstancesResponse,
}

_KIND_BY_TYPE: dict[type[BaseModel], ResponseKind] = {
    payload_type: kind for kind, payload_type in RESPONSE_TYPES.items()
}


def kind_for(payload_type: type[BaseModel]) -> ResponseKind:
    """Return the kind tagging ``payload_type``.

    Raises:
        ParseError: If the type is not a known response payload
    """
    try:
        return _KIND_BY_TYPE[payload_type]
    except KeyError:
        raise ParseError(
            f"{payload_type.__name__} is not a response type",
            expected=payload_type.__name__,
        ) from None


def decode_payload(payload_type: type[T], data: Any) -> T:
    """Validate already-decoded JSON into ``payload_type``."""
    try:
        return payload_type.model_validate(data)
    except ValidationError as e:
        raise ParseError(str(e), expected=payload_type.__name__) from e


@dataclass(frozen=True)
class EthProofsResponse:
    """A response payload tagged with the endpoint that produced it."""

    kind: ResponseKind
    payload: BaseModel

    def __post_init__(self):
        expected = RESPONSE_TYPES[self.kind]
        if type(self.payload) is not expected:
            raise TypeError(
                f"{self.kind.value} responses carry {expected.__name__}, "
                f"got {type(self.payload).__name__}"
            )

    @classmethod
    def wrap(cls, payload: BaseModel) -> "EthProofsResponse":
        return cls(kind=kind_for(type(payload)), payload=payload)

    @classmethod
    def decode(cls, kind: ResponseKind, data: Any) -> "EthProofsResponse":
        return cls(kind=kind, payload=decode_payload(RESPONSE_TYPES[kind], data))

    def into_inner(self, expected_type: type[T]) -> T:
        """Return the payload if it is an ``expected_type``.

        Raises:
            ParseError: If the response holds a different payload type
        """
        if RESPONSE_TYPES[self.kind] is not expected_type:
            raise ParseError(
                f"expected {expected_type.__name__}, "
                f"found {type(self.payload).__name__}",
                expected=expected_type.__name__,
            )
        return self.payload
