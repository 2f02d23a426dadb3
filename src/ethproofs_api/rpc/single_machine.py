"""Single-machine prover registration: ``POST /single-machine``."""

from typing import ClassVar

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    NonNegativeInt,
    RootModel,
    model_validator,
)

from ethproofs_api.rpc.base import ApiRequest, HttpMethod
from ethproofs_api.rpc.common import MachineConfiguration
from ethproofs_api.validators import (
    check_not_empty,
    validate_machine,
    validate_proving_system_fields,
)


class CreateSingleMachineResponse(RootModel[NonNegativeInt]):
    """Bare JSON integer: the new machine id."""

    model_config = ConfigDict(frozen=True)

    @property
    def machine_id(self) -> int:
        return self.root


class CreateSingleMachineRequest(ApiRequest):
    """POST /single-machine"""

    method: ClassVar[HttpMethod] = "POST"
    response_type: ClassVar[type[BaseModel]] = CreateSingleMachineResponse

    nickname: str = Field(..., description="Display name, max 50 characters")
    description: str | None = Field(default=None, description="Max 200 characters")
    zkvm_version_id: NonNegativeInt = Field(..., description="Must be greater than 0")
    hardware: str | None = Field(
        default=None, description="Deprecated: use machine instead"
    )
    cycle_type: str | None = Field(default=None)
    proof_type: str | None = Field(default=None)
    machine: MachineConfiguration
    cloud_instance_name: str

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
        validate_machine(self.machine)
        check_not_empty("cloud_instance_name", self.cloud_instance_name)
        return self

    def endpoint(self) -> str:
        return "/single-machine"
