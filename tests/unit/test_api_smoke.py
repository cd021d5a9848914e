"""
API Smoke Tests

Tests for the FastAPI endpoints:
1. GET /health returns ok
2. POST /root returns root hash, sum and leaf count
3. POST /tree returns every node, leaves first
4. POST /proof and POST /bundle return the sibling path
5. Domain errors map to 400 with a stable error code
"""

import pytest
from fastapi.testclient import TestClient

from sumtree.crypto.hashing import to_hex
from sumtree.merkle.sum_tree import calc_root, construct_tree
from sumtree_api.app import app


# Create test client
client = TestClient(app)


FOUR_LEAVES = {"sums": [1, 2, 3, 4], "data": ["0x00", "0x01", "0x02", "0x03"]}
FOUR_SUMS = [1, 2, 3, 4]
FOUR_DATA = [b"\x00", b"\x01", b"\x02", b"\x03"]


class TestHealth:
    """Tests for the health endpoints."""

    def test_health(self):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"ok": True, "service": "sumtree-api", "version": "v1"}

    def test_root_path(self):
        assert client.get("/").json()["ok"] is True


class TestRootEndpoint:
    """Tests for POST /root."""

    def test_four_leaves(self):
        response = client.post("/root", json=FOUR_LEAVES)

        assert response.status_code == 200
        body = response.json()
        assert body["ok"] is True
        assert body["root_hash"] == to_hex(calc_root(FOUR_SUMS, FOUR_DATA).hash)
        assert body["root_sum"] == 10
        assert body["leaf_count"] == 4

    def test_string_sums(self):
        response = client.post(
            "/root",
            json={"sums": ["1", "0x02", 3, 4], "data": FOUR_LEAVES["data"]},
        )

        assert response.json()["root_hash"] == to_hex(calc_root(FOUR_SUMS, FOUR_DATA).hash)

    def test_hash_algorithm(self):
        default = client.post("/root", json=FOUR_LEAVES).json()["root_hash"]
        blake = client.post("/root", json={**FOUR_LEAVES, "hash_algorithm": "blake2b"}).json()["root_hash"]

        assert default != blake

    def test_unknown_hash_algorithm(self):
        response = client.post("/root", json={**FOUR_LEAVES, "hash_algorithm": "md5"})

        assert response.status_code == 422


class TestTreeEndpoint:
    """Tests for POST /tree."""

    def test_three_leaves(self):
        response = client.post("/tree", json={"sums": [1, 2, 3], "data": ["0x00", "0x01", "0x02"]})

        assert response.status_code == 200
        body = response.json()
        assert body["leaf_count"] == 3
        nodes = body["nodes"]
        assert len(nodes) == 5
        assert [n["index"] for n in nodes] == [0, 1, 2, 3, 4]
        assert nodes[2]["parent"] == 4
        assert (nodes[4]["left"], nodes[4]["right"]) == (3, 2)
        assert nodes[4]["sum"] == 6
        assert nodes[4]["parent"] is None
        assert nodes[0]["data"] == "0x00"

    def test_matches_library(self):
        body = client.post("/tree", json=FOUR_LEAVES).json()
        nodes = construct_tree(FOUR_SUMS, FOUR_DATA)

        assert [n["hash"] for n in body["nodes"]] == [to_hex(n.hash) for n in nodes]


class TestProofEndpoints:
    """Tests for POST /proof and POST /bundle."""

    def test_proof(self):
        response = client.post("/proof", json={**FOUR_LEAVES, "index": 0})

        assert response.status_code == 200
        body = response.json()
        assert body["leaf_index"] == 0
        assert body["node_sums"] == [2, 7]
        assert len(body["side_nodes"]) == 2

    def test_single_leaf_proof(self):
        response = client.post("/proof", json={"sums": [5], "data": ["0xff"], "index": 0})

        assert response.json()["side_nodes"] == []
        assert response.json()["node_sums"] == []

    def test_bundle(self):
        response = client.post("/bundle", json={**FOUR_LEAVES, "index": 2})

        assert response.status_code == 200
        bundle = response.json()["bundle"]
        assert bundle["leaf_index"] == 2
        assert bundle["leaf_count"] == 4
        assert bundle["leaf_sum"] == 3
        assert bundle["leaf_data"] == "0x02"
        assert bundle["node_sums"] == [4, 3]
        assert bundle["root_sum"] == 10


class TestErrors:
    """Domain errors come back as 400 with a stable code."""

    @pytest.mark.parametrize(
        "path,payload,code",
        [
            ("/root", {"sums": [], "data": []}, "EMPTY_INPUT"),
            ("/root", {"sums": [1, 2], "data": ["0x00"]}, "LENGTH_MISMATCH"),
            ("/tree", {"sums": [1], "data": ["00"]}, "INVALID_LEAF_DATA"),
            ("/root", {"sums": [2**256], "data": ["0x00"]}, "SUM_OUT_OF_RANGE"),
            ("/proof", {**FOUR_LEAVES, "index": 4}, "INDEX_OUT_OF_BOUNDS"),
            ("/bundle", {**FOUR_LEAVES, "index": -1}, "INDEX_OUT_OF_BOUNDS"),
        ],
    )
    def test_error_codes(self, path, payload, code):
        response = client.post(path, json=payload)

        assert response.status_code == 400
        body = response.json()
        assert body["ok"] is False
        assert body["error"]["code"] == code

    def test_error_details(self):
        body = client.post("/proof", json={**FOUR_LEAVES, "index": 7}).json()

        assert body["error"]["details"] == {"index": 7, "leaf_count": 4}
        assert body["error"]["message"] == "Leaf index 7 out of range for 4 leaves"

    def test_missing_field(self):
        assert client.post("/root", json={"sums": [1]}).status_code == 422

    @pytest.mark.parametrize(
        "path,payload",
        [
            ("/root", {"sums": [True, 2], "data": ["0x00", "0x01"]}),
            ("/proof", {"sums": [1, 2], "data": ["0x00", "0x01"], "index": True}),
            ("/bundle", {"sums": [1, 2], "data": ["0x00", "0x01"], "index": False}),
            ("/proof", {"sums": [True, 2], "data": ["0x00", "0x01"], "index": True}),
        ],
    )
    def test_booleans_rejected(self, path, payload):
        """JSON true/false is not coerced to a sum or an index."""
        response = client.post(path, json=payload)

        assert response.status_code == 422

    def test_float_index_rejected(self):
        response = client.post("/proof", json={**FOUR_LEAVES, "index": 1.0})

        assert response.status_code == 422
