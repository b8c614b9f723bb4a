from graphviz import Digraph

from iDiGraph.Graph.EdgeList import EdgeList
from iDiGraph.Traversal.DfsTime import DfsTime


class DotGraph:
    def __init__(self, edgeList: EdgeList, n: int, time: DfsTime = None):
        self.edgeList = edgeList
        self.n = n
        self.time = time  # 有dfs结果时，点上标注先序/后序编号

    def buildDigraph(self):
        dot = Digraph()
        for v in range(1, self.n + 1):
            if self.time is not None and self.time.isReached(v):
                dot.node(str(v), label="{}\\l{}/{}\\l".format(v, self.time.preLabel[v], self.time.postLabel[v]),
                         style='filled', fillcolor="#4aef7b")
            else:
                dot.node(str(v), label=str(v))
        for a in range(1, self.edgeList.getEdgeNum() + 1):
            _from, _to = self.edgeList.getEdge(a)
            dot.edge(str(_from), str(_to), label=str(a))
        return dot

    def genDotGraph(self, outputPath: str, outName: str):
        dot = self.buildDigraph()
        dot.render(filename=outputPath + outName + "_graph.gv",
                   outfile=outputPath + outName + "_graph.png", format='png')
