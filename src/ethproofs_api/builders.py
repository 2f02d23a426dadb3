"""
Staged construction of the mutating requests.

A builder is a mutable staging object: setters record values and return the
builder, ``build()`` validates everything in a fixed order and freezes the
result into an immutable request. The first failing rule is reported as a
``MissingFieldError``, ``InvalidFieldError`` or ``MalformedRequestError``.

Usage:
    >>> request = (
    ...     CreateClusterRequestBuilder()
    ...     .nickname("My Cluster")
    ...     .zkvm_version_id(1)
    ...     .configuration([cluster_config])
    ...     .build()
    ... )
"""

import warnings
from collections.abc import Sequence

from ethproofs_api.rpc.clusters import ClusterConfiguration, CreateClusterRequest
from ethproofs_api.rpc.common import MachineConfiguration
from ethproofs_api.rpc.single_machine import CreateSingleMachineRequest
from ethproofs_api.validators import (
    check_not_empty,
    require,
    validate_cluster_configuration,
    validate_machine,
    validate_proving_system_fields,
)


class _ProvingSystemBuilder:
    """Setters for the header fields both request kinds share."""

    def __init__(self):
        self._nickname: str | None = None
        self._description: str | None = None
        self._zkvm_version_id: int | None = None
        self._hardware: str | None = None
        self._cycle_type: str | None = None
        self._proof_type: str | None = None

    def nickname(self, nickname: str):
        """Human-readable display name, max 50 characters."""
        self._nickname = nickname
        return self

    def description(self, description: str):
        """Free-form description, max 200 characters."""
        self._description = description
        return self

    def zkvm_version_id(self, zkvm_version_id: int):
        """ID of the zkVM version, must be greater than 0."""
        self._zkvm_version_id = zkvm_version_id
        return self

    def hardware(self, hardware: str):
        """Legacy hardware description, max 200 characters.

        Still accepted by the service; describe machines instead.
        """
        warnings.warn(
            "hardware is deprecated, describe machines instead",
            DeprecationWarning,
            stacklevel=2,
        )
        self._hardware = hardware
        return self

    def cycle_type(self, cycle_type: str):
        self._cycle_type = cycle_type
        return self

    def proof_type(self, proof_type: str):
        """Proof system, e.g. Groth16 or PlonK."""
        self._proof_type = proof_type
        return self

    def _validate_header(self) -> None:
        validate_proving_system_fields(
            self._nickname,
            self._description,
            self._zkvm_version_id,
            self._hardware,
            self._cycle_type,
            self._proof_type,
        )

    def _header_fields(self) -> dict:
        return {
            "nickname": self._nickname,
            "description": self._description,
            "zkvm_version_id": self._zkvm_version_id,
            "hardware": self._hardware,
            "cycle_type": self._cycle_type,
            "proof_type": self._proof_type,
        }


class CreateClusterRequestBuilder(_ProvingSystemBuilder):
    """Builder for ``CreateClusterRequest``."""

    def __init__(self):
        super().__init__()
        self._configuration: tuple[ClusterConfiguration, ...] | None = None

    def configuration(self, configuration: Sequence[ClusterConfiguration]):
        """Machine types making up the cluster, at least one."""
        self._configuration = tuple(configuration)
        return self

    def build(self) -> CreateClusterRequest:
        """Validate and freeze.

        Raises:
            MissingFieldError: nickname, zkvm_version_id or configuration unset
            InvalidFieldError: A value violates a length or range constraint
            MalformedRequestError: Parallel machine arrays disagree in length
        """
        self._validate_header()
        validate_cluster_configuration(self._configuration)

        return CreateClusterRequest(
            **self._header_fields(),
            configuration=self._configuration,
        )


class CreateSingleMachineRequestBuilder(_ProvingSystemBuilder):
    """Builder for ``CreateSingleMachineRequest``."""

    def __init__(self):
        super().__init__()
        self._machine: MachineConfiguration | None = None
        self._cloud_instance_name: str | None = None

    def machine(self, machine: MachineConfiguration):
        self._machine = machine
        return self

    def cloud_instance_name(self, cloud_instance_name: str):
        """``instance_name`` of one of the listed cloud instances."""
        self._cloud_instance_name = cloud_instance_name
        return self

    def build(self) -> CreateSingleMachineRequest:
        """Validate and freeze.

        Raises:
            MissingFieldError: A required field is unset
            InvalidFieldError: A value violates a length or range constraint
            MalformedRequestError: Parallel machine arrays disagree in length
        """
        self._validate_header()
        validate_machine(require("machine", self._machine))
        require("cloud_instance_name", self._cloud_instance_name)
        check_not_empty("cloud_instance_name", self._cloud_instance_name)

        return CreateSingleMachineRequest(
            **self._header_fields(),
            machine=self._machine,
            cloud_instance_name=self._cloud_instance_name,
        )
