import io

from dsworkshop.graphcut.cli import main, read_edges, welcome_text


def _run(monkeypatch, capsys, tmp_path, stdin):
    output = tmp_path / "graph.txt"
    monkeypatch.setattr("sys.stdin", io.StringIO(stdin))
    code = main(["--output", str(output)])
    return code, capsys.readouterr().out, output


def test_welcome_text_mentions_green():
    assert "colored in green" in welcome_text()


def test_read_edges_builds_graph():
    matrix = read_edges(["0 1\n", "1 2\n", "-1 -1\n", "0 2\n"], 3)
    assert matrix.edges() == [(0, 1), (1, 2)]


def test_read_edges_reports_errors(capsys):
    matrix = read_edges(["1 1\n", "0 5\n", "a b\n", "0 1\n"], 2)
    out = capsys.readouterr().out
    assert matrix.edges() == [(0, 1)]
    assert out.count("ERROR: incorrect edge. Try again:") == 2
    assert "ERROR: loops are not allowed. Try again:" in out


def test_path_graph_cut(monkeypatch, capsys, tmp_path):
    code, out, output = _run(monkeypatch, capsys, tmp_path, "3\n0 1\n1 2\n-1 -1\n")
    assert code == 0
    assert "SUCCESS! Need to delete at least 1 edges" in out
    text = output.read_text()
    assert "0 -- 1[color=green,penwidth=3.0];" in text
    assert "1 -- 2;" in text


def test_single_vertex(monkeypatch, capsys, tmp_path):
    code, out, output = _run(monkeypatch, capsys, tmp_path, "1\n")
    assert code == 0
    assert "It can't be disjoint" in out
    assert not output.exists()


def test_already_disjoint(monkeypatch, capsys, tmp_path):
    code, out, output = _run(monkeypatch, capsys, tmp_path, "3\n0 1\n-1 -1\n")
    assert code == 0
    assert "Graph is already disjoint" in out
    assert "green" not in output.read_text()


def test_invalid_size_reprompts(monkeypatch, capsys, tmp_path):
    code, out, output = _run(monkeypatch, capsys, tmp_path, "0\nx\n2\n0 1\n-1 -1\n")
    assert code == 0
    assert out.count("ERROR: incorrect amount of vertices. Try again: ") == 2
    assert output.read_text().startswith("graph {\n")