import logging
from pathlib import Path

from tgfgraph.config import DemoConfig


def test_defaults_without_file(tmp_path):
    cfg = DemoConfig.find(tmp_path)
    assert cfg.path is None
    assert cfg["graph_file"] == "gr.txt"
    assert cfg["root"] == 0


def test_load_file(tmp_path):
    (tmp_path / "tgf.yml").write_text("graph_file: animals.tgf\nroot: 2\n")
    cfg = DemoConfig.find(tmp_path)
    assert cfg.path == tmp_path / "tgf.yml"
    assert cfg["graph_file"] == "animals.tgf"
    assert cfg["root"] == 2


def test_empty_file(tmp_path):
    (tmp_path / "tgf.yml").write_text("")
    cfg = DemoConfig.find(tmp_path)
    assert cfg["graph_file"] == "gr.txt"


def test_validate_with_extra_defaults():
    cfg = DemoConfig.loads(Path("tgf.yml"), "root: 1\n")
    cfg.validate(graph_file="other.txt")
    assert cfg["graph_file"] == "other.txt"
    assert cfg["root"] == 1
    assert cfg.get("missing") is None


def test_invalid_yaml(caplog):
    cfg = DemoConfig.loads(Path("tgf.yml"), "root: [1\n")
    assert cfg.data == {}
    assert "cannot parse tgf.yml" in caplog.text


def test_not_a_mapping(caplog):
    cfg = DemoConfig.loads(Path("tgf.yml"), "- a\n- b\n")
    assert cfg.data == {}
    assert "invalid YAML in tgf.yml" in caplog.text


def test_unknown_key(caplog):
    cfg = DemoConfig.loads(Path("tgf.yml"), "colour: blue\n")
    with caplog.at_level(logging.WARNING):
        cfg.validate()
    assert "unknown key 'colour'" in caplog.text


def test_root_must_be_integer(tmp_path, caplog):
    (tmp_path / "tgf.yml").write_text("root: zero\n")
    cfg = DemoConfig.find(tmp_path)
    assert cfg["root"] == 0
    assert "root should be int, not 'zero'" in caplog.text


def test_root_rejects_bool(tmp_path, caplog):
    (tmp_path / "tgf.yml").write_text("root: yes\n")
    cfg = DemoConfig.find(tmp_path)
    assert cfg["root"] == 0
    assert "root should be int" in caplog.text


def test_graph_file_must_be_string(tmp_path, caplog):
    (tmp_path / "tgf.yml").write_text("graph_file: 5\nroot: 1\n")
    cfg = DemoConfig.find(tmp_path)
    assert cfg["graph_file"] == "gr.txt"
    assert cfg["root"] == 1
    assert "graph_file should be str, not 5" in caplog.text
