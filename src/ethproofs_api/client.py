import json
from typing import TypeVar

from pydantic import BaseModel
from yarl import URL

from ethproofs_api.config.value_objects import (
    PRODUCTION_URL,
    STAGING_URL,
    EthProofsConfig,
    HttpClientConfig,
)
from ethproofs_api.connectors.aiohttp_client import AiohttpClient
from ethproofs_api.error_mapper import ErrorMapper
from ethproofs_api.exceptions import InvalidURLError, ParseError
from ethproofs_api.observability import get_client_logger
from ethproofs_api.ports.http import IHttpClient
from ethproofs_api.request import EthProofsRequest, into_parts
from ethproofs_api.response import EthProofsResponse, decode_payload, kind_for
from ethproofs_api.rpc import (
    CreateClusterRequest,
    CreateClusterResponse,
    CreateSingleMachineRequest,
    CreateSingleMachineResponse,
    DownloadProofRequest,
    DownloadProofResponse,
    DownloadProofsRequest,
    DownloadProofsResponse,
    GetBlockDetailsRequest,
    GetBlockDetailsResponse,
    ListActiveClustersForATeamRequest,
    ListActiveClustersForATeamResponse,
    ListCloudInstancesRequest,
    ListCloudInstancesResponse,
    ListClustersRequest,
    ListClustersResponse,
    ListProofsRequest,
    ListProofsResponse,
    NumberOrString,
    ProvedProofRequest,
    ProvedProofResponse,
    ProvingProofRequest,
    ProvingProofResponse,
    QueuedProofRequest,
    QueuedProofResponse,
)
from ethproofs_api.rpc.proofs import DEFAULT_LIMIT, DEFAULT_OFFSET

T = TypeVar("T", bound=BaseModel)

log = get_client_logger("dispatcher")


def parse_base_url(base_url: str | URL) -> URL:
    """Parse an absolute http(s) base URL.

    Raises:
        InvalidURLError: If the URL cannot be parsed or is not absolute http(s)
    """
    try:
        url = base_url if isinstance(base_url, URL) else URL(base_url)
    except (TypeError, ValueError) as e:
        raise InvalidURLError(str(base_url), str(e)) from e

    if url.scheme not in ("http", "https"):
        raise InvalidURLError(str(base_url), "scheme must be http or https")
    if not url.host:
        raise InvalidURLError(str(base_url), "missing host")
    return url


class EthProofsClient:
    """Async client for the EthProofs API.

    Single Responsibility: Turn a request into one HTTP exchange and the
    exchange into a typed payload or a typed error.

    Base URL and API key are fixed for the client's lifetime, so one instance
    can serve any number of concurrent calls. Nothing is retried or cached.

    Usage:
        >>> async with EthProofsClient.staging(api_key) as client:
        ...     block = await client.get_block_details(23982100)
    """

    def __init__(
        self,
        base_url: str | URL,
        api_key: str,
        http_client: IHttpClient | None = None,
        http_config: HttpClientConfig | None = None,
    ):
        """Initialize the client.

        Args:
            base_url: API root, e.g. ``https://ethproofs.org/api/v0``
            api_key: Sent as ``Authorization: Bearer <api_key>``
            http_client: Transport to use. When omitted the client creates
                (and later closes) its own AiohttpClient.
            http_config: Configuration for the default transport

        Raises:
            InvalidURLError: If ``base_url`` cannot be parsed
        """
        self._base_url = parse_base_url(base_url)
        self._api_key = api_key
        self._owns_transport = http_client is None
        self._http_client = http_client or AiohttpClient(http_config)
        self._error_mapper = ErrorMapper()

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def production(cls, api_key: str, **kwargs) -> "EthProofsClient":
        return cls(PRODUCTION_URL, api_key, **kwargs)

    @classmethod
    def staging(cls, api_key: str, **kwargs) -> "EthProofsClient":
        return cls(STAGING_URL, api_key, **kwargs)

    @classmethod
    def with_base_url(
        cls, base_url: str | URL, api_key: str, **kwargs
    ) -> "EthProofsClient":
        return cls(base_url, api_key, **kwargs)

    @classmethod
    def from_config(
        cls, config: EthProofsConfig, http_client: IHttpClient | None = None
    ) -> "EthProofsClient":
        return cls(
            config.base_url,
            config.api_key,
            http_client=http_client,
            http_config=config.http_config,
        )

    @property
    def base_url(self) -> URL:
        return self._base_url

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base_url={str(self._base_url)!r})"

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def close(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_transport:
            await self._http_client.close()

    async def __aenter__(self) -> "EthProofsClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def _url_for(self, endpoint: str) -> str:
        return f"{str(self._base_url).rstrip('/')}{endpoint}"

    def _auth_headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self._api_key}"}

    async def call(
        self,
        request: EthProofsRequest,
        response_type: type[T] | None = None,
    ) -> T:
        """Send ``request`` and decode the response into ``response_type``.

        Args:
            request: Any request variant
            response_type: Payload type to decode into; defaults to the type
                the request's endpoint returns

        Returns:
            The decoded payload

        Raises:
            SerializationError: If the request body cannot be serialized
            RequestError: On transport failures
            ApiError: On any non-2xx status, carrying the raw body text
            ParseError: If the body is not JSON or does not match the type
        """
        if response_type is None:
            response_type = request.response_type

        parts = into_parts(request)
        log.debug(
            "request_dispatched",
            method=parts.method,
            endpoint=parts.endpoint,
            has_body=parts.body is not None,
        )

        response = await self._http_client.request(
            parts.method,
            self._url_for(parts.endpoint),
            json=parts.body,
            headers=self._auth_headers(),
        )
        log.debug(
            "response_received", endpoint=parts.endpoint, status=response.status_code
        )

        if not response.is_success:
            raise self._error_mapper.map_error(response)

        try:
            data = response.json()
        except json.JSONDecodeError as e:
            raise ParseError(
                f"invalid JSON body: {e}", expected=response_type.__name__
            ) from e

        return decode_payload(response_type, data)

    async def call_tagged(self, request: EthProofsRequest) -> EthProofsResponse:
        """Like ``call`` but returns the payload tagged by endpoint."""
        payload = await self.call(request)
        return EthProofsResponse(kind=kind_for(request.response_type), payload=payload)

    # ------------------------------------------------------------------
    # Convenience methods for specific endpoints
    # ------------------------------------------------------------------

    async def get_block_details(
        self, block_number: NumberOrString
    ) -> GetBlockDetailsResponse:
        return await self.call(
            GetBlockDetailsRequest(block_number=block_number), GetBlockDetailsResponse
        )

    async def create_cluster(
        self, request: CreateClusterRequest
    ) -> CreateClusterResponse:
        return await self.call(request, CreateClusterResponse)

    async def list_clusters(self) -> ListClustersResponse:
        return await self.call(ListClustersRequest(), ListClustersResponse)

    async def list_active_clusters_for_team(
        self, team_id: str
    ) -> ListActiveClustersForATeamResponse:
        return await self.call(
            ListActiveClustersForATeamRequest(team_id=team_id),
            ListActiveClustersForATeamResponse,
        )

    async def create_single_machine(
        self, request: CreateSingleMachineRequest
    ) -> CreateSingleMachineResponse:
        return await self.call(request, CreateSingleMachineResponse)

    async def download_proof(self, proof_id: str) -> DownloadProofResponse:
        return await self.call(
            DownloadProofRequest(proof_id=proof_id), DownloadProofResponse
        )

    async def download_proofs(self, block_hash: str) -> DownloadProofsResponse:
        return await self.call(
            DownloadProofsRequest(block_hash=block_hash), DownloadProofsResponse
        )

    async def list_proofs(
        self,
        block: NumberOrString | None = None,
        clusters: str | None = None,
        limit: int = DEFAULT_LIMIT,
        offset: int = DEFAULT_OFFSET,
    ) -> ListProofsResponse:
        request = ListProofsRequest(
            block=block, clusters=clusters, limit=limit, offset=offset
        )
        return await self.call(request, ListProofsResponse)

    async def queue_proof(
        self, block_number: int, cluster_id: int
    ) -> QueuedProofResponse:
        return await self.call(
            QueuedProofRequest(block_number=block_number, cluster_id=cluster_id),
            QueuedProofResponse,
        )

    async def proving_proof(
        self, block_number: int, cluster_id: int
    ) -> ProvingProofResponse:
        return await self.call(
            ProvingProofRequest(block_number=block_number, cluster_id=cluster_id),
            ProvingProofResponse,
        )

    async def proved_proof(
        self,
        block_number: int,
        cluster_id: int,
        proving_time: int,
        proof: str,
        proving_cycles: int | None = None,
        verifier_id: str | None = None,
    ) -> ProvedProofResponse:
        request = ProvedProofRequest(
            block_number=block_number,
            cluster_id=cluster_id,
            proving_time=proving_time,
            proving_cycles=proving_cycles,
            proof=proof,
            verifier_id=verifier_id,
        )
        return await self.call(request, ProvedProofResponse)

    async def list_cloud_instances(
        self, provider: str | None = None
    ) -> ListCloudInstancesResponse:
        return await self.call(
            ListCloudInstancesRequest(provider=provider), ListCloudInstancesResponse
        )
