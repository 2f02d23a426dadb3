"""Cluster registration and listing endpoints."""

from typing import ClassVar

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    NonNegativeInt,
    RootModel,
    model_validator,
)

from ethproofs_api.rpc.base import (
    ApiRequest,
    HttpMethod,
    WireModel,
    with_query,
)
from ethproofs_api.rpc.common import MachineConfiguration, MachineData
from ethproofs_api.validators import (
    validate_cluster_configuration,
    validate_proving_system_fields,
)


class ClusterConfiguration(WireModel):
    """One machine type of a cluster and its equivalent cloud instance."""

    machine: MachineConfiguration
    machine_count: NonNegativeInt = Field(..., description="Must be greater than 0")
    cloud_instance_name: str = Field(
        ..., description="instance_name of a listed cloud instance"
    )
    cloud_instance_count: NonNegativeInt = Field(
        ..., description="Must be greater than 0"
    )


# ============================================================================
# Create cluster
# ============================================================================


class CreateClusterResponse(WireModel):
    id: NonNegativeInt


class CreateClusterRequest(ApiRequest):
    """
    POST /clusters

    Prefer ``CreateClusterRequestBuilder`` to construct one; constructing it
    directly runs the same checks and raises the same errors.
    """

    method: ClassVar[HttpMethod] = "POST"
    response_type: ClassVar[type[BaseModel]] = CreateClusterResponse

    nickname: str = Field(..., description="Display name, max 50 characters")
    description: str | None = Field(default=None, description="Max 200 characters")
    zkvm_version_id: NonNegativeInt = Field(..., description="Must be greater than 0")
    hardware: str | None = Field(
        default=None,
        description="Deprecated: use configuration[].machine instead",
    )
    cycle_type: str | None = Field(default=None)
    proof_type: str | None = Field(default=None, description="e.g. Groth16 or PlonK")
    configuration: tuple[ClusterConfiguration, ...]

    @model_validator(mode="after")
    def check_constraints(self):
        validate_proving_system_fields(
            self.nickname,
            self.description,
            self.zkvm_version_id,
            self.hardware,
            self.cycle_type,
            self.proof_type,
        )
        validate_cluster_configuration(self.configuration)
        return self

    def endpoint(self) -> str:
        return "/clusters"


# ============================================================================
# List clusters
# ============================================================================


class ClusterData(WireModel):
    id: NonNegativeInt | None = None
    nickname: str
    # Nullable on the wire (string or null)
    description: str | None = None
    hardware: str | None = None
    cycle_type: str | None = None
    proof_type: str | None = None
    machines: list[MachineData]


class ListClustersResponse(WireModel):
    clusters: list[ClusterData]


class ListClustersRequest(ApiRequest):
    method: ClassVar[HttpMethod] = "GET"
    response_type: ClassVar[type[BaseModel]] = ListClustersResponse

    def endpoint(self) -> str:
        return "/clusters"


# ============================================================================
# Active clusters for a team
# ============================================================================


class ClusterID(WireModel):
    id: NonNegativeInt


class ListActiveClustersForATeamResponse(RootModel[list[ClusterID]]):
    """Bare JSON array of ``{"id": ...}`` objects."""

    model_config = ConfigDict(frozen=True)

    @property
    def clusters(self) -> list[ClusterID]:
        return self.root


class ListActiveClustersForATeamRequest(ApiRequest):
    method: ClassVar[HttpMethod] = "GET"
    response_type: ClassVar[type[BaseModel]] = ListActiveClustersForATeamResponse

    team_id: str = Field(..., description="Team UUID")

    def endpoint(self) -> str:
        return with_query("/clusters/active", [("team_id", self.team_id)])
