"""
CLI Unit Tests
Tests for sumtree_cli (argument parsing, leaf inputs, commands, config).
"""
import json

import pytest

from sumtree.crypto.hashing import to_hex
from sumtree.merkle.sum_proofs import SumProofBundle
from sumtree.merkle.sum_tree import calc_root, construct_tree
from sumtree.schemas.errors import InvalidLeafDataException
from sumtree_cli.commands.common import EXIT_RUNTIME_ERROR, EXIT_SUCCESS
from sumtree_cli.commands.tree import format_node
from sumtree_cli.config import get_default_config_template, load_config
from sumtree_cli.inputs import load_leaves_file, parse_leaf_arg, resolve_leaves
from sumtree_cli.main import create_parser, main


FOUR_LEAF_ARGS = ["--leaf", "1:0x00", "--leaf", "2:0x01", "--leaf", "3:0x02", "--leaf", "4:0x03"]
FOUR_SUMS = [1, 2, 3, 4]
FOUR_DATA = [b"\x00", b"\x01", b"\x02", b"\x03"]


@pytest.fixture
def leaves_json(tmp_path):
    path = tmp_path / "leaves.json"
    path.write_text(json.dumps({"sums": FOUR_SUMS, "data": ["0x00", "0x01", "0x02", "0x03"]}))
    return path


@pytest.fixture
def leaves_yaml(tmp_path):
    path = tmp_path / "leaves.yaml"
    path.write_text(
        "leaves:\n"
        "  - {sum: 1, data: '0x00'}\n"
        "  - {sum: 2, data: '0x01'}\n"
        "  - {sum: 3, data: '0x02'}\n"
    )
    return path


class TestInputs:
    """Tests for leaf argument and file parsing."""

    def test_parse_leaf_arg(self):
        assert parse_leaf_arg("5:0xdead") == (5, b"\xde\xad")
        assert parse_leaf_arg("0x10:0x") == (16, b"")

    def test_parse_leaf_arg_no_separator(self):
        with pytest.raises(InvalidLeafDataException, match="SUM:0xHEX"):
            parse_leaf_arg("5")

    def test_load_json(self, leaves_json):
        assert load_leaves_file(leaves_json) == (FOUR_SUMS, FOUR_DATA)

    def test_load_yaml(self, leaves_yaml):
        assert load_leaves_file(leaves_yaml) == ([1, 2, 3], [b"\x00", b"\x01", b"\x02"])

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_leaves_file(tmp_path / "missing.json")

    def test_unquoted_yaml_data(self, tmp_path):
        path = tmp_path / "bare.yaml"
        path.write_text("sums: [1, 2]\ndata: [0x00, 0x01]\n")

        with pytest.raises(InvalidLeafDataException, match="quote hex values in YAML") as exc_info:
            load_leaves_file(path)

        assert exc_info.value.details == {"leaf_index": 0}

    def test_unquoted_yaml_data_cli_error(self, capsys, tmp_path):
        path = tmp_path / "bare.yaml"
        path.write_text("sums: [1, 2]\ndata: [0x00, 0x01]\n")

        assert main(["root", "--leaves", str(path)]) == EXIT_RUNTIME_ERROR
        assert "quote hex values in YAML" in capsys.readouterr().err

    def test_resolve_file_then_args(self, leaves_yaml):
        sums, data = resolve_leaves(leaves_yaml, ["4:0x03"])

        assert sums == [1, 2, 3, 4]
        assert data == FOUR_DATA


class TestParser:
    """Tests for argument parsing."""

    def test_proof_index(self):
        args = create_parser().parse_args(["proof", "2", "--leaf", "1:0x00"])

        assert args.command == "proof"
        assert args.index == 2
        assert args.leaf == ["1:0x00"]

    def test_no_command(self, capsys):
        assert main([]) == EXIT_RUNTIME_ERROR

    def test_bad_hash_algorithm(self):
        with pytest.raises(SystemExit):
            create_parser().parse_args(["root", "--hash-algorithm", "md5"])


class TestRootCommand:
    """Tests for `sumtree root`."""

    def test_human_output(self, capsys):
        assert main(["root", *FOUR_LEAF_ARGS]) == EXIT_SUCCESS

        out = capsys.readouterr().out
        root = calc_root(FOUR_SUMS, FOUR_DATA)
        assert f"root_hash: {to_hex(root.hash)}" in out
        assert "root_sum: 10" in out
        assert "leaf_count: 4" in out

    def test_json_output(self, capsys, leaves_json):
        assert main(["root", "--leaves", str(leaves_json), "--json"]) == EXIT_SUCCESS

        payload = json.loads(capsys.readouterr().out)
        assert payload == {
            "root_hash": to_hex(calc_root(FOUR_SUMS, FOUR_DATA).hash),
            "root_sum": 10,
            "leaf_count": 4,
        }

    def test_hash_algorithm_flag(self, capsys):
        main(["root", *FOUR_LEAF_ARGS, "--json"])
        default_hash = json.loads(capsys.readouterr().out)["root_hash"]

        main(["root", *FOUR_LEAF_ARGS, "--json", "--hash-algorithm", "blake2b"])
        blake_hash = json.loads(capsys.readouterr().out)["root_hash"]

        assert default_hash != blake_hash

    def test_empty_input(self, capsys):
        assert main(["root"]) == EXIT_RUNTIME_ERROR

        assert "empty leaf list" in capsys.readouterr().err

    def test_json_error(self, capsys, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"sums": [1, 2], "data": ["0x00"]}))

        assert main(["root", "--leaves", str(path), "--json"]) == EXIT_RUNTIME_ERROR

        err = capsys.readouterr().err
        error = json.loads(err[err.index("{"):])
        assert error["code"] == "LENGTH_MISMATCH"

    def test_missing_leaves_file(self, capsys, tmp_path):
        assert main(["root", "--leaves", str(tmp_path / "none.json")]) == EXIT_RUNTIME_ERROR
        assert "not found" in capsys.readouterr().err

    def test_config_file_output_format(self, capsys, tmp_path):
        (tmp_path / "sumtree.yaml").write_text("output_format: json\n")

        assert main(["root", *FOUR_LEAF_ARGS]) == EXIT_SUCCESS
        assert json.loads(capsys.readouterr().out)["root_sum"] == 10


class TestTreeCommand:
    """Tests for `sumtree tree`."""

    def test_human_output(self, capsys, leaves_yaml):
        assert main(["tree", "--leaves", str(leaves_yaml)]) == EXIT_SUCCESS

        lines = capsys.readouterr().out.strip().splitlines()
        assert len(lines) == 5
        assert lines[0].startswith("[0] leaf sum=1")
        assert lines[4].startswith("[4] node sum=6")
        assert "left=3 right=2 parent=-" in lines[4]

    def test_json_output(self, capsys):
        assert main(["tree", *FOUR_LEAF_ARGS, "--json"]) == EXIT_SUCCESS

        payload = json.loads(capsys.readouterr().out)
        assert payload["leaf_count"] == 4
        assert len(payload["nodes"]) == 7
        root = payload["nodes"][-1]
        assert root["sum"] == 10
        assert "parent" not in root
        assert (root["left"], root["right"]) == (4, 5)

    def test_format_node(self):
        leaf = construct_tree([5], [b"\xab"])[0]

        assert format_node(leaf).endswith("parent=- data=0xab")


class TestProofCommands:
    """Tests for `sumtree proof` and `sumtree bundle`."""

    def test_proof_json(self, capsys):
        assert main(["proof", "0", *FOUR_LEAF_ARGS, "--json"]) == EXIT_SUCCESS

        payload = json.loads(capsys.readouterr().out)
        assert payload["leaf_index"] == 0
        assert payload["node_sums"] == [2, 7]
        assert len(payload["side_nodes"]) == 2

    def test_proof_human(self, capsys):
        assert main(["proof", "2", "--leaf", "1:0x00", "--leaf", "2:0x01", "--leaf", "3:0x02"]) == EXIT_SUCCESS

        out = capsys.readouterr().out
        assert "length: 1" in out
        assert "0: sum=3" in out

    def test_proof_out_of_range(self, capsys):
        assert main(["proof", "9", *FOUR_LEAF_ARGS]) == EXIT_RUNTIME_ERROR
        assert "out of range" in capsys.readouterr().err

    def test_bundle(self, capsys):
        assert main(["bundle", "3", *FOUR_LEAF_ARGS]) == EXIT_SUCCESS

        payload = json.loads(capsys.readouterr().out)
        assert payload["leaf_index"] == 3
        assert payload["leaf_count"] == 4
        assert payload["leaf_sum"] == 4
        assert payload["leaf_data"] == "0x03"
        assert payload["node_sums"] == [3, 3]
        assert payload["root_sum"] == 10

    def test_bundle_json_is_canonical(self, capsys):
        assert main(["bundle", "3", *FOUR_LEAF_ARGS, "--json"]) == EXIT_SUCCESS

        out = capsys.readouterr().out.strip()
        nodes = construct_tree(FOUR_SUMS, FOUR_DATA)
        assert out == SumProofBundle.from_tree(nodes, 3).to_canonical_json()
        assert "\n" not in out
        assert json.loads(out)["node_sums"] == [3, 3]


class TestConfigCommand:
    """Tests for `sumtree config` and config discovery."""

    def test_init_creates_template(self, capsys, tmp_path):
        target = tmp_path / "custom.yaml"

        assert main(["config", "--init", "--path", str(target)]) == EXIT_SUCCESS
        assert target.read_text() == get_default_config_template()

    def test_init_refuses_overwrite(self, capsys, tmp_path):
        target = tmp_path / "custom.yaml"
        target.write_text("output_format: human\n")

        assert main(["config", "--init", "--path", str(target)]) == EXIT_RUNTIME_ERROR

    def test_template_loads(self, tmp_path):
        target = tmp_path / "t.yaml"
        target.write_text(get_default_config_template())

        config = load_config(target)

        assert config.digest.algorithm == "sha256"
        assert config.digest.sum_width == 32

    def test_show(self, capsys, monkeypatch):
        monkeypatch.setenv("SUMTREE_HASH_ALGORITHM", "sha3_256")

        assert main(["config", "--show"]) == EXIT_SUCCESS

        shown = json.loads(capsys.readouterr().out)
        assert shown["digest"]["algorithm"] == "sha3_256"

    def test_bad_config_file(self, capsys, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("digest:\n  algorithm: md5\n")

        assert main(["--config", str(path), "root", *FOUR_LEAF_ARGS]) == EXIT_RUNTIME_ERROR
        assert "Error loading configuration" in capsys.readouterr().err

    def test_home_config_discovered(self, tmp_path):
        home_config = tmp_path / "home" / ".config" / "sumtree" / "config.yaml"
        home_config.parent.mkdir(parents=True)
        home_config.write_text("digest:\n  algorithm: blake2b\n")

        assert load_config().digest.algorithm == "blake2b"
