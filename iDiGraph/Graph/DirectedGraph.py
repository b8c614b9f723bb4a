from iDiGraph.Graph.EdgeList import EdgeList
from iDiGraph.Utils.Logger import Logger


class DirectedGraph:
    """ 用数组实现的关联表(incidence list)，正向链表按起点串起出边，反向链表按终点串起入边
    所有数组下标从1开始，0表示"没有边"
    """

    def __init__(self, edgeFirst: list, edgeNext: list, revEdgeFirst: list, revEdgeNext: list):
        self.edgeFirst = edgeFirst  # edgeFirst[v]: 以v为起点的第一条边，长度n+1
        self.edgeNext = edgeNext  # edgeNext[a]: 与边a起点相同的下一条边，长度m+1
        self.revEdgeFirst = revEdgeFirst  # revEdgeFirst[v]: 以v为终点的第一条边
        self.revEdgeNext = revEdgeNext  # revEdgeNext[a]: 与边a终点相同的下一条边

    def getVertexNum(self):
        return len(self.edgeFirst) - 1

    def getEdgeNum(self):
        return len(self.edgeNext) - 1

    def __walk(self, first: int, nxt: list):
        chain = []
        a = first
        while a != 0:
            chain.append(a)
            a = nxt[a]
        return chain

    def outEdges(self, v: int):
        """ 按链表顺序返回v的所有出边编号
        """
        return self.__walk(self.edgeFirst[v], self.edgeNext)

    def inEdges(self, v: int):
        return self.__walk(self.revEdgeFirst[v], self.revEdgeNext)

    def successors(self, v: int, edgeList: EdgeList):
        return [edgeList.head[a] for a in self.outEdges(v)]

    def predecessors(self, v: int, edgeList: EdgeList):
        return [edgeList.tail[a] for a in self.inEdges(v)]

    def output(self, log: Logger = None):
        if log is None:
            log = Logger()
        log.info("edge_first: {}".format(self.edgeFirst))
        log.info("edge_next: {}".format(self.edgeNext))
        log.info("rev_edge_first: {}".format(self.revEdgeFirst))
        log.info("rev_edge_next: {}".format(self.revEdgeNext))
