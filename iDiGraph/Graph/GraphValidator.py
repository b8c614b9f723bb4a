from iDiGraph.Graph.DirectedGraph import DirectedGraph
from iDiGraph.Graph.EdgeList import EdgeList


class GraphError(Exception):
    pass


class InvalidVertexId(GraphError):
    def __init__(self, vertex: int, n: int, edge: int = 0):
        self.vertex = vertex
        self.n = n
        self.edge = edge  # 0表示不是边上的点，例如dfs的起点
        if edge == 0:
            msg = "vertex {} is out of range 1..{}".format(vertex, n)
        else:
            msg = "edge {} refers to vertex {}, out of range 1..{}".format(edge, vertex, n)
        super().__init__(msg)


class LengthMismatch(GraphError):
    def __init__(self, tailLen: int, headLen: int, m: int):
        self.tailLen = tailLen
        self.headLen = headLen
        self.m = m
        super().__init__("len(tail)={}, len(head)={}, expected m+1={}".format(tailLen, headLen, m + 1))


class GraphSizeMismatch(GraphError):
    def __init__(self, graphN: int, graphM: int, n: int, m: int):
        self.graphN = graphN
        self.graphM = graphM
        self.n = n
        self.m = m
        super().__init__("graph has n={}, m={}, expected n={}, m={}".format(graphN, graphM, n, m))


class GraphValidator:
    """ 检查边表是否满足构造关联表的前置条件：
    tail和head长度都是m+1，且所有点的编号都在1~n之间
    """

    def __init__(self, n: int, m: int):
        self.n = n
        self.m = m

    def checkEdgeList(self, edgeList: EdgeList):
        tailLen, headLen = len(edgeList.tail), len(edgeList.head)
        if tailLen != headLen or tailLen != self.m + 1:
            raise LengthMismatch(tailLen, headLen, self.m)
        for a in range(1, self.m + 1):
            for v in edgeList.getEdge(a):
                if not 1 <= v <= self.n:
                    raise InvalidVertexId(v, self.n, a)

    def checkGraph(self, graph: DirectedGraph):
        """ 关联表的点数、边数必须与n、m一致
        """
        if graph.getVertexNum() != self.n or graph.getEdgeNum() != self.m:
            raise GraphSizeMismatch(graph.getVertexNum(), graph.getEdgeNum(), self.n, self.m)

    def checkVertex(self, v: int):
        if not 1 <= v <= self.n:
            raise InvalidVertexId(v, self.n)
