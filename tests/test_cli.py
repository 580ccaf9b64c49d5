import logging

import pytest

from tgfgraph.cli import main
from tgfgraph.logs import ExitStreamHandler

EXAMPLE = '0 "cat"\n1 "car"\n2 "cow"\n#\n0 1 2\n2 0\n'


@pytest.fixture(autouse=True)
def restore_logging():
    logger = logging.getLogger()
    level = logger.level
    yield
    for handler in list(logger.handlers):
        if isinstance(handler, ExitStreamHandler):
            logger.removeHandler(handler)
    logger.setLevel(level)


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    (tmp_path / "gr.txt").write_text(EXAMPLE)
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_show(workdir, capsys):
    main(["show"])
    assert capsys.readouterr().out == (
        "Node id: 0\n"
        "Adjacent nodes ids: [1, 2]\n"
        "Data: cat\n"
        "Node id: 1\n"
        "Adjacent nodes ids: []\n"
        "Data: car\n"
        "Node id: 2\n"
        "Adjacent nodes ids: [0]\n"
        "Data: cow\n"
    )


def test_show_file_and_root(workdir, capsys):
    (workdir / "other.txt").write_text('5 "x"\n6 "y"\n#\n6 5\n')
    main(["show", "other.txt", "--root", "6"])
    out = capsys.readouterr().out
    assert out.splitlines()[0::3] == ["Node id: 6", "Node id: 5"]


def test_show_uses_config(workdir, capsys):
    (workdir / "other.txt").write_text('5 "x"\n6 "y"\n#\n6 5\n')
    (workdir / "tgf.yml").write_text("graph_file: other.txt\nroot: 5\n")
    main(["show"])
    assert capsys.readouterr().out == (
        "Node id: 5\nAdjacent nodes ids: []\nData: x\n"
    )


def test_dump(workdir, capsys):
    main(["dump"])
    assert capsys.readouterr().out == EXAMPLE


def test_check(workdir, capsys):
    (workdir / "gr.txt").write_text('0 "a"\n1 "b"\n2 "c"\n#\n0 1\n')
    main(["check", "-v"])
    captured = capsys.readouterr()
    assert captured.out == "3 nodes, 1 edges, 2 reachable from 0\n"
    assert "1 nodes unreachable from 0" in captured.err


def test_missing_file_is_fatal(workdir, capsys):
    with pytest.raises(SystemExit) as info:
        main(["show", "missing.txt"])
    assert info.value.code == 1
    assert "FATAL: cannot load graph: missing.txt" in capsys.readouterr().err


def test_bad_format_is_fatal(workdir, capsys):
    (workdir / "gr.txt").write_text('0 "a"\n0 "b"\n#\n')
    with pytest.raises(SystemExit):
        main(["dump"])
    assert "gr.txt:2: duplicate node id 0" in capsys.readouterr().err


def test_missing_root_is_fatal(workdir, capsys):
    with pytest.raises(SystemExit):
        main(["show", "-r", "9"])
    assert "node 9 does not exist" in capsys.readouterr().err


def test_help(capsys):
    main(["help", "show"])
    assert "usage: tgf show" in capsys.readouterr().out


def test_bad_config_value_is_an_error(workdir, capsys):
    (workdir / "tgf.yml").write_text("graph_file: 5\n")
    with pytest.raises(SystemExit):
        main(["dump"])
    assert "ERROR: " in capsys.readouterr().err


def test_bad_config_value_with_keep_going(workdir, capsys):
    (workdir / "tgf.yml").write_text("graph_file: 5\n")
    main(["dump", "-k"])
    captured = capsys.readouterr()
    assert captured.out == EXAMPLE
    assert "graph_file should be str, not 5" in captured.err
