from iDiGraph.Graph.DirectedGraph import DirectedGraph
from iDiGraph.Graph.EdgeList import EdgeList
from iDiGraph.Graph.GraphValidator import GraphValidator


class IncidenceListBuilder:
    """ 由边表构造关联表
    edgeFirst和edgeNext把同一起点的边号串成链表：

    edgeFirst[1]
        ↓
    [边2] ->[边5] -> 0

    加入从点1出发的新边7时，先令edgeNext[7] = edgeFirst[1]，再令edgeFirst[1] = 7：

    edgeFirst[1]
        ↓
    [边7] ->[边2] ->[边5] -> 0

    插入总在链表头部，会把插入顺序倒过来，因此边号从m到1倒序插入，
    最终每条链表里的边号与输入顺序一致
    """

    def __init__(self, edgeList: EdgeList, n: int, m: int, validate: bool = False):
        """
        :param edgeList: 边表，下标从1开始
        :param n: 点数
        :param m: 边数
        :param validate: 是否在构造前检查边表，默认不检查
        """
        self.edgeList = edgeList
        self.n = n
        self.m = m
        self.validate = validate

    def build(self):
        if self.validate:
            GraphValidator(self.n, self.m).checkEdgeList(self.edgeList)

        edgeFirst = [0 for _ in range(self.n + 1)]
        edgeNext = [0 for _ in range(self.m + 1)]
        revEdgeFirst = [0 for _ in range(self.n + 1)]
        revEdgeNext = [0 for _ in range(self.m + 1)]

        for a in range(self.m, 0, -1):
            v = self.edgeList.tail[a]
            edgeNext[a] = edgeFirst[v]  # 新边指向原来的首条边
            edgeFirst[v] = a  # 新边成为首条边

            w = self.edgeList.head[a]
            revEdgeNext[a] = revEdgeFirst[w]
            revEdgeFirst[w] = a

        return DirectedGraph(edgeFirst, edgeNext, revEdgeFirst, revEdgeNext)


def dicompIncidenceListConstruct(edgeList: EdgeList, n: int, m: int):
    return IncidenceListBuilder(edgeList, n, m).build()
