"""
Tests for response payloads and tagged-response narrowing.
"""

import pytest

from ethproofs_api import EthProofsResponse, ParseError, ResponseKind
from ethproofs_api.response import RESPONSE_TYPES, decode_payload, kind_for
from ethproofs_api.rpc import (
    CloudInstance,
    CreateClusterResponse,
    CreateSingleMachineResponse,
    GetBlockDetailsResponse,
    ListActiveClustersForATeamResponse,
    ListCloudInstancesResponse,
    ListClustersResponse,
    ListProofsResponse,
    MachineConfiguration,
    ProofStatus,
    format_block_number,
)


class TestPayloadDecoding:
    def test_block_details(self, block_details_payload):
        block = decode_payload(GetBlockDetailsResponse, block_details_payload)

        assert block.block_number == 23982100
        assert block.transaction_count == 187
        assert block.updated_at is None

    def test_cloud_instance_wire_names(self, cloud_instance_payload):
        instance = CloudInstance.model_validate(cloud_instance_payload)

        assert instance.cpu_architecture == "x86_64"
        assert instance.gpu_architecture == "Ada Lovelace"
        assert instance.to_wire()["cpu_arch"] == "x86_64"
        assert "cpu_architecture" not in instance.to_wire()

    def test_cloud_instance_list_is_bare_array(self, cloud_instance_payload):
        response = decode_payload(
            ListCloudInstancesResponse, [cloud_instance_payload]
        )

        assert len(response.instances) == 1
        assert response.instances[0].instance_name == "g6.16xlarge"

    def test_active_clusters_is_bare_array(self):
        response = decode_payload(
            ListActiveClustersForATeamResponse, [{"id": 4}, {"id": 9}]
        )
        assert [c.id for c in response.clusters] == [4, 9]

    def test_single_machine_is_bare_integer(self):
        response = decode_payload(CreateSingleMachineResponse, 42)
        assert response.machine_id == 42

    def test_list_proofs(self, proof_payload):
        response = decode_payload(
            ListProofsResponse,
            {"proofs": [proof_payload], "total_count": 1, "limit": 100, "offset": 0},
        )

        proof = response.proofs[0]
        assert proof.proof_status is ProofStatus.PROVED
        assert proof.block.number == 23982100
        assert proof.team is None
        assert proof.cluster_version is None

    def test_list_clusters(self, cloud_instance_payload):
        machine = MachineConfiguration(
            cpu_model="AMD EPYC 7763",
            cpu_cores=64,
            memory_size_gb=[64],
            memory_count=[8],
            memory_type=["DDR5"],
        ).to_wire()
        payload = {
            "clusters": [
                {
                    "id": 3,
                    "nickname": "ZK Cluster",
                    "description": None,
                    "machines": [
                        {
                            "machine": machine,
                            "machine_count": 2,
                            "cloud_instance": cloud_instance_payload,
                            "cloud_instance_count": 2,
                        }
                    ],
                }
            ]
        }

        response = decode_payload(ListClustersResponse, payload)

        cluster = response.clusters[0]
        assert cluster.description is None
        assert cluster.machines[0].cloud_instance.provider == "aws"

    def test_missing_field_raises_parse_error(self, block_details_payload):
        del block_details_payload["hash"]

        with pytest.raises(ParseError) as exc_info:
            decode_payload(GetBlockDetailsResponse, block_details_payload)

        assert exc_info.value.expected == "GetBlockDetailsResponse"

    def test_wrong_shape_raises_parse_error(self):
        with pytest.raises(ParseError):
            decode_payload(ListCloudInstancesResponse, {"instances": []})


class TestTaggedResponse:
    def test_every_kind_has_a_payload_type(self):
        assert set(RESPONSE_TYPES) == set(ResponseKind)

    def test_wrap_and_narrow(self):
        response = EthProofsResponse.wrap(CreateClusterResponse(id=7))

        assert response.kind is ResponseKind.CREATE_CLUSTER
        assert response.into_inner(CreateClusterResponse).id == 7

    def test_narrowing_to_other_type_fails(self):
        response = EthProofsResponse.wrap(CreateClusterResponse(id=7))

        with pytest.raises(ParseError) as exc_info:
            response.into_inner(ListClustersResponse)

        assert exc_info.value.expected == "ListClustersResponse"
        assert "CreateClusterResponse" in str(exc_info.value)

    def test_mismatched_kind_rejected(self):
        with pytest.raises(TypeError):
            EthProofsResponse(
                kind=ResponseKind.LIST_CLUSTERS, payload=CreateClusterResponse(id=1)
            )

    def test_decode_by_kind(self):
        response = EthProofsResponse.decode(ResponseKind.CREATE_SINGLE_MACHINE, 5)
        assert response.into_inner(CreateSingleMachineResponse).machine_id == 5

    def test_decode_invalid_data(self):
        with pytest.raises(ParseError):
            EthProofsResponse.decode(ResponseKind.CREATE_CLUSTER, {"id": "abc"})

    def test_kind_for_unknown_type(self):
        with pytest.raises(ParseError):
            kind_for(MachineConfiguration)


class TestCommonTypes:
    def test_proof_status_order(self):
        assert ProofStatus.QUEUED.can_advance_to(ProofStatus.PROVING)
        assert ProofStatus.PROVING.can_advance_to(ProofStatus.PROVED)
        assert not ProofStatus.PROVED.can_advance_to(ProofStatus.QUEUED)
        assert not ProofStatus.PROVING.can_advance_to(ProofStatus.PROVING)

    def test_format_block_number(self):
        assert format_block_number(23982100) == "23982100"
        assert format_block_number("0xabc") == "0xabc"
