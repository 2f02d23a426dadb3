"""Request and response payloads, one module per endpoint group."""

from .base import ApiRequest, WireModel  # noqa: F401
from .blocks import GetBlockDetailsRequest, GetBlockDetailsResponse  # noqa: F401
from .cloud_instances import (  # noqa: F401
    ListCloudInstancesRequest,
    ListCloudInstancesResponse,
)
from .clusters import (  # noqa: F401
    ClusterConfiguration,
    ClusterData,
    ClusterID,
    CreateClusterRequest,
    CreateClusterResponse,
    ListActiveClustersForATeamRequest,
    ListActiveClustersForATeamResponse,
    ListClustersRequest,
    ListClustersResponse,
)
from .common import (  # noqa: F401
    BlockNumber,
    CloudInstance,
    ClusterMachine,
    MachineConfiguration,
    MachineData,
    NumberOrString,
    ProofStatus,
    format_block_number,
)
from .proofs import (  # noqa: F401
    Block,
    ClusterRecord,
    ClusterVersion,
    DownloadProofRequest,
    DownloadProofResponse,
    DownloadProofsRequest,
    DownloadProofsResponse,
    ListProofsRequest,
    ListProofsResponse,
    ProofRecord,
    ProvedProofRequest,
    ProvedProofResponse,
    ProvingProofRequest,
    ProvingProofResponse,
    QueuedProofRequest,
    QueuedProofResponse,
    Team,
    ZkvmRecord,
    ZkvmVersion,
)
from .single_machine import (  # noqa: F401
    CreateSingleMachineRequest,
    CreateSingleMachineResponse,
)
