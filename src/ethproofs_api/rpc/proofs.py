"""Proof lifecycle, listing and download endpoints."""

from typing import ClassVar

from pydantic import BaseModel, Field, NonNegativeInt

from ethproofs_api.rpc.base import (
    ApiRequest,
    HttpMethod,
    WireModel,
    path_segment,
    with_query,
)
from ethproofs_api.rpc.common import ClusterMachine, NumberOrString, ProofStatus

BLOCK_HASH_PATTERN = r"^0x[a-fA-F0-9]{64}$"
DEFAULT_LIMIT = 100
MAX_LIMIT = 1000
DEFAULT_OFFSET = 0


# ============================================================================
# Downloads
# ============================================================================


class DownloadProofResponse(WireModel):
    proof_binary_file: str


class DownloadProofRequest(ApiRequest):
    """Download a single proved proof by its proof ID."""

    method: ClassVar[HttpMethod] = "GET"
    response_type: ClassVar[type[BaseModel]] = DownloadProofResponse

    proof_id: str = Field(..., alias="id", description="Proof UUID")

    def endpoint(self) -> str:
        return f"/proofs/download/{path_segment(self.proof_id)}"


class DownloadProofsResponse(WireModel):
    proofs_zip_file: str


class DownloadProofsRequest(ApiRequest):
    """Download all proved proofs of a block as a ZIP file."""

    method: ClassVar[HttpMethod] = "GET"
    response_type: ClassVar[type[BaseModel]] = DownloadProofsResponse

    block_hash: str = Field(..., alias="block", pattern=BLOCK_HASH_PATTERN)

    def endpoint(self) -> str:
        return f"/proofs/download/block/{path_segment(self.block_hash)}"


# ============================================================================
# Listing
# ============================================================================


class Team(WireModel):
    id: str
    name: str
    slug: str
    created_at: str
    updated_at: str | None = None
    github_org: str
    logo_url: str | None = None
    storage_quota_bytes: NonNegativeInt | None = None
    twitter_handle: str | None = None
    website_url: str | None = None


class Block(WireModel):
    number: NonNegativeInt = Field(..., alias="block_number")
    hash: str
    timestamp: str
    gas_used: NonNegativeInt
    transaction_count: NonNegativeInt
    created_at: str
    updated_at: str | None = None


class ZkvmRecord(WireModel):
    id: NonNegativeInt
    name: str
    slug: str
    isa: str
    team_id: str
    created_at: str
    continuations: bool
    dual_licenses: bool
    frontend: str
    is_open_source: bool
    is_proving_mainnet: bool
    parallelizable_proving: bool
    precompiles: bool
    repo_url: str


class ZkvmVersion(WireModel):
    id: NonNegativeInt
    version: str
    zkvm_id: NonNegativeInt
    release_date: str | None = None
    created_at: str
    updated_at: str | None = None
    zkvm: ZkvmRecord


class ClusterRecord(WireModel):
    id: str
    nickname: str | None = None
    created_at: str
    updated_at: str | None = None
    cycle_type: str
    description: str
    hardware: str
    index: NonNegativeInt
    is_active: bool
    is_multi_machine: bool
    is_open_source: bool
    proof_type: str
    software_link: str | None = None
    team_id: str


class ClusterVersion(WireModel):
    id: NonNegativeInt
    cluster_id: str
    created_at: str
    updated_at: str | None = None
    cluster: ClusterRecord
    zkvm_version: ZkvmVersion
    cluster_machines: list[ClusterMachine]
    is_active: bool
    vk_path: str | None = None
    index: NonNegativeInt


class ProofRecord(WireModel):
    block_number: NonNegativeInt
    # A UUID in practice, although documented as numeric
    cluster_id: str
    proof_id: NonNegativeInt
    proof_status: ProofStatus
    proving_cycles: NonNegativeInt | None = None
    team_id: str
    created_at: str
    proved_timestamp: str | None = None
    proving_timestamp: str | None = None
    queued_timestamp: str | None = None
    proving_time: NonNegativeInt | None = None
    program_id: int | None = None
    size_bytes: NonNegativeInt | None = None
    team: Team | None = None
    block: Block | None = None
    cluster_version: ClusterVersion | None = None
    cluster_version_id: NonNegativeInt
    updated_at: str


class ListProofsResponse(WireModel):
    proofs: list[ProofRecord]
    total_count: NonNegativeInt
    limit: NonNegativeInt
    offset: NonNegativeInt


class ListProofsRequest(ApiRequest):
    """Filtered, paginated proof listing."""

    method: ClassVar[HttpMethod] = "GET"
    response_type: ClassVar[type[BaseModel]] = ListProofsResponse

    block: NumberOrString | None = Field(
        default=None, description="Block number or 0x-prefixed block hash"
    )
    clusters: str | None = Field(
        default=None, description="Comma-separated cluster UUIDs"
    )
    limit: int = Field(default=DEFAULT_LIMIT, ge=1, le=MAX_LIMIT)
    offset: NonNegativeInt = Field(default=DEFAULT_OFFSET)

    def endpoint(self) -> str:
        return with_query(
            "/proofs",
            [
                ("block", self.block),
                ("clusters", self.clusters),
                ("limit", self.limit),
                ("offset", self.offset),
            ],
        )


# ============================================================================
# Lifecycle transitions
# ============================================================================


class QueuedProofResponse(WireModel):
    proof_id: NonNegativeInt


class QueuedProofRequest(ApiRequest):
    """The prover will prove this block but has not started yet."""

    method: ClassVar[HttpMethod] = "POST"
    response_type: ClassVar[type[BaseModel]] = QueuedProofResponse

    block_number: NonNegativeInt
    cluster_id: NonNegativeInt

    def endpoint(self) -> str:
        return "/proofs/queue"


class ProvingProofResponse(WireModel):
    proof_id: NonNegativeInt


class ProvingProofRequest(ApiRequest):
    """The prover has started proving this block."""

    method: ClassVar[HttpMethod] = "POST"
    response_type: ClassVar[type[BaseModel]] = ProvingProofResponse

    block_number: NonNegativeInt
    cluster_id: NonNegativeInt

    def endpoint(self) -> str:
        return "/proofs/proving"


class ProvedProofResponse(WireModel):
    proof_id: NonNegativeInt


class ProvedProofRequest(ApiRequest):
    """The prover finished proving this block."""

    method: ClassVar[HttpMethod] = "POST"
    response_type: ClassVar[type[BaseModel]] = ProvedProofResponse
    omit_none: ClassVar[bool] = False

    block_number: NonNegativeInt
    cluster_id: NonNegativeInt
    proving_time: NonNegativeInt = Field(
        ...,
        description="Milliseconds spent proving, witness generation included",
    )
    proving_cycles: NonNegativeInt | None = None
    proof: str = Field(..., description="Base64-encoded proof")
    verifier_id: str | None = Field(default=None, description="vkey / image id")

    def endpoint(self) -> str:
        return "/proofs/proved"
