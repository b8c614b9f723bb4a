import pytest

from iDiGraph.Graph import EdgeList, IncidenceListBuilder
from iDiGraph.Main import main
from iDiGraph.Traversal import DepthFirstSearch
from iDiGraph.Utils.DotGraph import DotGraph
from iDiGraph.Utils.EdgeListReader import EdgeFileError, EdgeListReader
from iDiGraph.Utils.Helper import Helper
from iDiGraph.Utils.Logger import Logger


def test_reader_skips_comments(tmp_path):
    f = tmp_path / "g.txt"
    f.write_text("c comment\n# another\n\n1 2\n2 3\n")
    reader = EdgeListReader(str(f))
    edgeList = reader.read()
    assert edgeList.tail == [0, 1, 2]
    assert edgeList.head == [0, 2, 3]
    assert reader.getVertexNum() == 3


def test_reader_dimacs_header(tmp_path):
    f = tmp_path / "g.gr"
    f.write_text("p sp 5 1\na 1 4 7\n")
    reader = EdgeListReader(str(f))
    edgeList = reader.read()
    assert edgeList.getPairs() == [[1, 4]]
    assert reader.getVertexNum() == 5


def test_edge_list_helpers():
    edgeList = EdgeList.fromPairs([[3, 1], [2, 7]])
    assert edgeList.getEdgeNum() == 2
    assert edgeList.getMaxVertex() == 7
    assert edgeList.getEdge(2) == (2, 7)
    assert EdgeList([0], [0]).getMaxVertex() == 0


def test_dot_source_labels():
    edgeList = EdgeList.fromPairs([[1, 2], [3, 1]])
    graph = IncidenceListBuilder(edgeList, 3, 2).build()
    time = DepthFirstSearch(edgeList, graph, 3).dfs(1)
    source = DotGraph(edgeList, 3, time).buildDigraph().source
    assert "1 -> 2 [label=1]" in source
    assert "3 -> 1 [label=2]" in source
    assert "fillcolor" in source


def test_helper_text():
    h = Helper()
    assert "--process-detail" in h.getHelpInfo()
    assert h.getVersion().endswith(h.version)


def test_main_example(capsys):
    assert main(["Main.py", "-pd"]) == 0
    out = capsys.readouterr().out
    assert "edge_first: [0, 1, 8, 7, 5, 6, 3]" in out
    assert "pre_label: [1, 2, 3, 6, 5, 4]" in out
    assert "PROCESS DETAIL" in out


def test_main_rejects_bad_start(capsys):
    assert main(["Main.py", "-s", "x"]) == -1
    assert main(["Main.py", "-s"]) == -1


def writeEdgeFile(tmp_path, text: str):
    f = tmp_path / "g.txt"
    f.write_text(text)
    return str(f)


def test_reader_short_p_line(tmp_path):
    reader = EdgeListReader(writeEdgeFile(tmp_path, "p 3\n1 2\n"))
    with pytest.raises(EdgeFileError) as info:
        reader.read()
    assert info.value.lineNo == 1


def test_reader_one_token_line(tmp_path):
    reader = EdgeListReader(writeEdgeFile(tmp_path, "1 2\n3\n"))
    with pytest.raises(EdgeFileError) as info:
        reader.read()
    assert info.value.lineNo == 2


def test_reader_non_integer_vertex(tmp_path):
    with pytest.raises(EdgeFileError):
        EdgeListReader(writeEdgeFile(tmp_path, "c x\n1 x\n")).read()


def test_logger_fail_exits():
    with pytest.raises(SystemExit) as info:
        Logger().fail("broken")
    assert info.value.code == -1


def test_dfs_time_output_default_logger(capsys):
    edgeList = EdgeList.fromPairs([[1, 2]])
    graph = IncidenceListBuilder(edgeList, 2, 1).build()
    DepthFirstSearch(edgeList, graph, 2).dfs(1).output()
    out = capsys.readouterr().out
    assert "pre_label: [1, 2]" in out
    assert "post_label: [2, 1]" in out


def test_main_edge_file_with_start(tmp_path, capsys):
    edgeFile = writeEdgeFile(tmp_path, "1 2\n2 3\n3 1\n4 1\n")
    assert main(["Main.py", edgeFile, "-s", "2"]) == 0
    out = capsys.readouterr().out
    assert "pre_label: [3, 1, 2, 0]" in out
    assert "post_label: [1, 3, 2, 0]" in out
    assert "WARNING" not in out


def test_main_warns_on_isolated_declared_vertices(tmp_path, capsys):
    edgeFile = writeEdgeFile(tmp_path, "p 5 1\n1 2\n")
    assert main(["Main.py", edgeFile]) == 0
    out = capsys.readouterr().out
    assert "WARNING" in out
    assert "pre_label: [1, 2, 0, 0, 0]" in out


def test_main_vertex_out_of_range_fails(tmp_path, capsys):
    edgeFile = writeEdgeFile(tmp_path, "p 3 2\n1 2\n2 5\n")
    with pytest.raises(SystemExit) as info:
        main(["Main.py", edgeFile])
    assert info.value.code == -1
    assert "FAILURE" in capsys.readouterr().out


def test_main_start_out_of_range_fails(tmp_path):
    edgeFile = writeEdgeFile(tmp_path, "1 2\n")
    with pytest.raises(SystemExit):
        main(["Main.py", edgeFile, "-s", "9"])


@pytest.mark.parametrize("text", ["p 3\n1 2\n", "1 2\n3\n"])
def test_main_malformed_edge_file_fails(tmp_path, capsys, text):
    edgeFile = writeEdgeFile(tmp_path, text)
    with pytest.raises(SystemExit) as info:
        main(["Main.py", edgeFile])
    assert info.value.code == -1
    assert "malformed line" in capsys.readouterr().out


def test_main_missing_edge_file_fails(tmp_path, capsys):
    with pytest.raises(SystemExit):
        main(["Main.py", str(tmp_path / "missing.txt")])
    assert "does not exist" in capsys.readouterr().out


def test_main_missing_output_path_fails(tmp_path):
    with pytest.raises(SystemExit):
        main(["Main.py", "-H", str(tmp_path / "missing")])


def test_main_html_renders(tmp_path, monkeypatch, capsys):
    rendered = {}

    def fakeRender(self, *args, **kwargs):
        rendered.update(kwargs)
        rendered["source"] = self.source

    monkeypatch.setattr("iDiGraph.Utils.DotGraph.Digraph.render", fakeRender)
    edgeFile = writeEdgeFile(tmp_path, "1 2\n")
    assert main(["Main.py", edgeFile, "-H", str(tmp_path)]) == 0
    assert rendered["outfile"] == str(tmp_path) + "/g.txt_graph.png"
    assert rendered["format"] == "png"
    assert "1 -> 2 [label=1]" in rendered["source"]
    assert "graph rendered" in capsys.readouterr().out


@pytest.mark.parametrize("flag", ["-h", "--help", "-v", "--version"])
def test_main_help_and_version(flag, capsys):
    assert main(["Main.py", flag]) == 0
    out = capsys.readouterr().out
    assert "iDiGraph" in out
    assert "pre_label" not in out
