from graphroutes.bellman import bellman_ford, shortest_path
from graphroutes.cli import format_edge, main
from graphroutes.edgelist import read_edges, sample_edges, write_edges
from graphroutes.graph import Edge
from graphroutes.tsp import traveling


def test_format_edge():
    assert format_edge(Edge(65, 66, 4)) == "A -> B, weight: 4"


def _sample_file(tmp_path):
    path = tmp_path / "EdgeList.txt"
    write_edges(path, sample_edges())
    return path


def test_bf_mode_prints_report(tmp_path, capsys):
    path = _sample_file(tmp_path)
    assert main(["--load", "--file", str(path), "--mode", "bf"]) == 0
    out = capsys.readouterr().out
    assert "Graph loaded with 5 edges:" in out
    assert "Edge 0: A -> B (weight: 4)" in out
    assert bellman_ford(sample_edges(), 65).report() in out


def test_path_mode(tmp_path, capsys):
    path = _sample_file(tmp_path)
    assert main(["--load", "--file", str(path), "--mode", "path"]) == 0
    out = capsys.readouterr().out
    expected = shortest_path(sample_edges(), 65, 67)
    assert f"Shortest path from A to C: {expected}" in out
    assert "From: A To: C" in out


def test_tsp_mode(tmp_path, capsys):
    path = _sample_file(tmp_path)
    assert main(["--load", "--file", str(path), "--mode", "tsp"]) == 0
    out = capsys.readouterr().out
    assert "Starting from vertex: A" in out
    assert traveling(sample_edges(), 65).describe() in out


def test_missing_file_falls_back_to_sample(tmp_path, capsys):
    missing = tmp_path / "absent.txt"
    assert main(["--load", "--file", str(missing)]) == 0
    out = capsys.readouterr().out
    assert "Generating sample edges instead..." in out
    assert "Graph loaded with 5 edges:" in out


def test_generation_writes_file(tmp_path, capsys):
    path = tmp_path / "EdgeList.txt"
    code = main(["--file", str(path), "--edges", "12", "--vertices", "6", "--seed", "4"])
    assert code == 0
    written = read_edges(path)
    assert len(written) == 12
    out = capsys.readouterr().out
    assert "Graph loaded with 12 edges:" in out
    assert f"Edge 0: {chr(written[0].source)} -> {chr(written[0].target)}" in out


def test_generation_error(tmp_path, capsys):
    path = tmp_path / "EdgeList.txt"
    assert main(["--file", str(path), "--edges", "100", "--vertices", "5"]) == 1
    assert "cannot create simple graph" in capsys.readouterr().out
    assert not path.exists()


def test_negative_cycle_reported(tmp_path, capsys):
    path = tmp_path / "edges.txt"
    write_edges(path, [Edge(65, 66, -1), Edge(66, 67, 2)])
    assert main(["--load", "--file", str(path)]) == 0
    assert "Negative cycle detected!" in capsys.readouterr().out