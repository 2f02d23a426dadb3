"""
Field-level validation for outbound request payloads.

Every check is a plain function that raises one of the request validation
errors on the first violated constraint. Checks never aggregate: callers run
them in a fixed order and the first failure is what gets reported.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from ethproofs_api.exceptions import (
    InvalidFieldError,
    MalformedRequestError,
    MissingFieldError,
)

if TYPE_CHECKING:
    from ethproofs_api.rpc.clusters import ClusterConfiguration
    from ethproofs_api.rpc.common import MachineConfiguration

NICKNAME_MAX_LENGTH = 50
DESCRIPTION_MAX_LENGTH = 200
HARDWARE_MAX_LENGTH = 200
TEXT_FIELD_MAX_LENGTH = 200
NETWORK_MAX_LENGTH = 500


# ============================================================================
# Primitive checks
# ============================================================================


def require(field: str, value: Any) -> Any:
    """Return ``value`` or raise MissingFieldError when it was never set."""
    if value is None:
        raise MissingFieldError(field)
    return value


def check_max_length(field: str, value: str | None, max_len: int) -> None:
    if value is not None and len(value) > max_len:
        raise InvalidFieldError(field, f"must be at most {max_len} characters")


def check_not_empty(field: str, value: str | None) -> None:
    if value is not None and not value:
        raise InvalidFieldError(field, f"{field} is required")


def check_positive(field: str, value: int | None) -> None:
    if value is not None and value <= 0:
        raise InvalidFieldError(field, "must be greater than 0")


def _length(values: Sequence[Any] | None) -> int:
    # Absent arrays count as empty
    return 0 if values is None else len(values)


# ============================================================================
# Composite checks
# ============================================================================


def validate_proving_system_fields(
    nickname: str | None,
    description: str | None,
    zkvm_version_id: int | None,
    hardware: str | None,
    cycle_type: str | None,
    proof_type: str | None,
) -> None:
    """Validate the header fields shared by cluster and single-machine requests.

    Order matters: nickname, description, zkvm_version_id, hardware,
    cycle_type, proof_type.
    """
    require("nickname", nickname)
    check_max_length("nickname", nickname, NICKNAME_MAX_LENGTH)
    check_max_length("description", description, DESCRIPTION_MAX_LENGTH)

    require("zkvm_version_id", zkvm_version_id)
    check_positive("zkvm_version_id", zkvm_version_id)

    check_max_length("hardware", hardware, HARDWARE_MAX_LENGTH)
    check_not_empty("cycle_type", cycle_type)
    check_not_empty("proof_type", proof_type)


def validate_machine(machine: MachineConfiguration) -> None:
    """Validate one machine's CPU, GPU, memory and optional descriptors."""
    check_max_length("cpu_model", machine.cpu_model, TEXT_FIELD_MAX_LENGTH)
    check_positive("cpu_cores", machine.cpu_cores)

    gpu_len = _length(machine.gpu_models)
    if (
        _length(machine.gpu_count) != gpu_len
        or _length(machine.gpu_memory_gb) != gpu_len
    ):
        raise MalformedRequestError(
            "gpu_models, gpu_count, and gpu_memory_gb must have the same length"
        )
    for i, model in enumerate(machine.gpu_models or []):
        check_max_length(f"gpu_models[{i}]", model, TEXT_FIELD_MAX_LENGTH)
        check_positive(f"gpu_count[{i}]", machine.gpu_count[i])
        check_positive(f"gpu_memory_gb[{i}]", machine.gpu_memory_gb[i])

    mem_len = len(machine.memory_size_gb)
    if len(machine.memory_count) != mem_len or len(machine.memory_type) != mem_len:
        raise MalformedRequestError(
            "memory_size_gb, memory_count, and memory_type must have the same length"
        )
    if mem_len == 0:
        raise MalformedRequestError(
            "memory_size_gb, memory_count, and memory_type must not be empty"
        )
    for i, size in enumerate(machine.memory_size_gb):
        check_positive(f"memory_size_gb[{i}]", size)
        check_positive(f"memory_count[{i}]", machine.memory_count[i])
        check_max_length(
            f"memory_type[{i}]", machine.memory_type[i], TEXT_FIELD_MAX_LENGTH
        )

    check_positive("storage_size_gb", machine.storage_size_gb)
    check_positive("total_tera_flops", machine.total_tera_flops)
    check_max_length(
        "network_between_machines",
        machine.network_between_machines,
        NETWORK_MAX_LENGTH,
    )


def validate_cluster_configuration(
    configuration: Sequence[ClusterConfiguration] | None,
) -> None:
    require("configuration", configuration)
    if not configuration:
        raise InvalidFieldError("configuration", "configuration must not be empty")

    for config in configuration:
        check_positive("machine_count", config.machine_count)
        check_positive("cloud_instance_count", config.cloud_instance_count)
        validate_machine(config.machine)
