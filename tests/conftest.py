"""
Shared fixtures: a recording fake transport, valid machine descriptions and
canned response bodies.
"""

import json
from dataclasses import dataclass
from typing import Any

import pytest

from ethproofs_api import EthProofsClient
from ethproofs_api.ports.http import HttpResponse
from ethproofs_api.rpc import ClusterConfiguration, MachineConfiguration

TEST_BASE_URL = "https://test.ethproofs.org/api/v0"
TEST_API_KEY = "test-api-key"


@dataclass
class RecordedCall:
    method: str
    url: str
    json: dict[str, Any] | None
    headers: dict[str, str] | None


class FakeHttpClient:
    """IHttpClient that replays queued responses and records every call."""

    def __init__(self):
        self._responses: list[HttpResponse | BaseException] = []
        self.calls: list[RecordedCall] = []
        self.closed = False

    def respond(self, status_code: int, payload: Any) -> "FakeHttpClient":
        """Queue a response whose body is ``payload`` encoded as JSON."""
        self._responses.append(HttpResponse(status_code, json.dumps(payload)))
        return self

    def respond_text(self, status_code: int, text: str | None) -> "FakeHttpClient":
        """Queue a response with a raw body (``None`` = unreadable)."""
        self._responses.append(HttpResponse(status_code, text))
        return self

    def fail(self, error: BaseException) -> "FakeHttpClient":
        self._responses.append(error)
        return self

    async def request(self, method, url, json=None, headers=None) -> HttpResponse:
        self.calls.append(RecordedCall(method, url, json, headers))
        if not self._responses:
            raise AssertionError(f"Unexpected request: {method} {url}")
        item = self._responses.pop(0)
        if isinstance(item, BaseException):
            raise item
        return item

    async def close(self) -> None:
        self.closed = True

    @property
    def last_call(self) -> RecordedCall:
        return self.calls[-1]


# ============================================================================
# Client
# ============================================================================


@pytest.fixture
def fake_http():
    return FakeHttpClient()


@pytest.fixture
def client(fake_http):
    return EthProofsClient(TEST_BASE_URL, TEST_API_KEY, http_client=fake_http)


# ============================================================================
# Request payloads
# ============================================================================


@pytest.fixture
def machine():
    """A valid single-GPU machine."""
    return MachineConfiguration(
        cpu_model="AMD EPYC 7763",
        cpu_cores=64,
        gpu_models=["RTX 4090"],
        gpu_count=[8],
        gpu_memory_gb=[24],
        memory_size_gb=[64],
        memory_count=[8],
        memory_type=["DDR5-4800"],
        storage_size_gb=2000,
        total_tera_flops=660,
        network_between_machines="100 Gbps Ethernet",
    )


@pytest.fixture
def cpu_only_machine():
    return MachineConfiguration(
        cpu_model="Intel Xeon 8480+",
        cpu_cores=56,
        memory_size_gb=[32, 16],
        memory_count=[4, 2],
        memory_type=["DDR5", "DDR4"],
    )


@pytest.fixture
def cluster_configuration(machine):
    return ClusterConfiguration(
        machine=machine,
        machine_count=4,
        cloud_instance_name="g6.16xlarge",
        cloud_instance_count=4,
    )


# ============================================================================
# Response bodies
# ============================================================================


@pytest.fixture
def block_details_payload():
    return {
        "block_number": 23982100,
        "timestamp": "2025-11-01T12:00:11Z",
        "gas_used": 14892311,
        "transaction_count": 187,
        "hash": "0x" + "ab" * 32,
        "created_at": "2025-11-01T12:00:20Z",
        "updated_at": None,
    }


@pytest.fixture
def cloud_instance_payload():
    return {
        "id": 12,
        "provider": "aws",
        "instance_name": "g6.16xlarge",
        "region": "us-east-1",
        "hourly_price": 3.3968,
        "cpu_arch": "x86_64",
        "cpu_cores": 64,
        "cpu_effective_cores": 32,
        "cpu_name": "AMD EPYC 7R13",
        "memory": 256,
        "gpu_count": 1,
        "gpu_arch": "Ada Lovelace",
        "gpu_name": "NVIDIA L4",
        "gpu_memory": 24,
        "created_at": "2025-01-10T00:00:00Z",
    }


@pytest.fixture
def proof_payload():
    return {
        "block_number": 23982100,
        "cluster_id": "5b8e4bf7-5a3a-4b8e-9a62-3f0b2c8d1e11",
        "proof_id": 981,
        "proof_status": "proved",
        "proving_cycles": 1200000,
        "team_id": "0f1d1b8e-6c0c-4f4b-9ad6-b1f5c2a1e2d3",
        "created_at": "2025-11-01T12:00:30Z",
        "proved_timestamp": "2025-11-01T12:01:02Z",
        "proving_time": 31000,
        "cluster_version_id": 44,
        "updated_at": "2025-11-01T12:01:02Z",
        "block": {
            "block_number": 23982100,
            "hash": "0x" + "ab" * 32,
            "timestamp": "2025-11-01T12:00:11Z",
            "gas_used": 14892311,
            "transaction_count": 187,
            "created_at": "2025-11-01T12:00:20Z",
        },
    }
