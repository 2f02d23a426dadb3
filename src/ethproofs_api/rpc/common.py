"""Types shared across endpoint groups: block references, proof status, hardware."""

import enum
from typing import Union

from pydantic import Field, NonNegativeInt

from ethproofs_api.rpc.base import WireModel

# Either a block number or an opaque identifier such as a block hash.
# Serialized untagged: a bare JSON integer or a bare JSON string.
NumberOrString = Union[NonNegativeInt, str]
BlockNumber = NumberOrString


def format_block_number(value: NumberOrString) -> str:
    """Render a block reference the way it appears in URLs."""
    return str(value)


class ProofStatus(str, enum.Enum):
    """Lifecycle of a proof: queued -> proving -> proved."""

    QUEUED = "queued"
    PROVING = "proving"
    PROVED = "proved"

    def can_advance_to(self, other: "ProofStatus") -> bool:
        order = list(ProofStatus)
        return order.index(other) > order.index(self)


class MachineConfiguration(WireModel):
    """
    Physical or cloud hardware specification of a single machine.

    GPU arrays are parallel (one entry per GPU model) and optional.
    Memory arrays are parallel and required. Range and length constraints are
    enforced when a request is built, not here, so that responses carrying
    the same structure decode without validation.
    """

    # ========== CPU (Required) ==========
    cpu_model: str = Field(..., description="CPU model name, max 200 characters")
    cpu_cores: NonNegativeInt = Field(..., description="Number of CPU cores, > 0")

    # ========== GPU (Optional, parallel arrays) ==========
    gpu_models: tuple[str, ...] | None = Field(default=None)
    gpu_count: tuple[NonNegativeInt, ...] | None = Field(default=None)
    gpu_memory_gb: tuple[NonNegativeInt, ...] | None = Field(default=None)

    # ========== MEMORY (Required, parallel arrays) ==========
    memory_size_gb: tuple[NonNegativeInt, ...]
    memory_count: tuple[NonNegativeInt, ...]
    memory_type: tuple[str, ...]

    # ========== DESCRIPTORS (Optional) ==========
    storage_size_gb: NonNegativeInt | None = Field(default=None)
    total_tera_flops: NonNegativeInt | None = Field(default=None)
    network_between_machines: str | None = Field(
        default=None, description="Network between machines, max 500 characters"
    )


class CloudInstance(WireModel):
    """Cloud instance type as listed by the service."""

    id: NonNegativeInt
    provider: str
    instance_name: str
    region: str
    hourly_price: float
    cpu_architecture: str | None = Field(default=None, alias="cpu_arch")
    cpu_cores: NonNegativeInt
    cpu_effective_cores: NonNegativeInt | None = None
    cpu_name: str | None = None
    memory: NonNegativeInt
    gpu_count: NonNegativeInt | None = None
    gpu_architecture: str | None = Field(default=None, alias="gpu_arch")
    gpu_name: str | None = None
    gpu_memory: NonNegativeInt | None = None
    mobo_name: str | None = None
    disk_name: str | None = None
    disk_space: NonNegativeInt | None = None
    created_at: str
    snapshot_date: str | None = None


class MachineData(WireModel):
    """A machine entry of a registered cluster."""

    machine: MachineConfiguration
    machine_count: NonNegativeInt
    cloud_instance: CloudInstance
    cloud_instance_count: NonNegativeInt


# Cluster versions embed the same shape under a different name
ClusterMachine = MachineData
