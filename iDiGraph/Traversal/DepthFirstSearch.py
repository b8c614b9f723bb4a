from iDiGraph.Graph.DirectedGraph import DirectedGraph
from iDiGraph.Graph.EdgeList import EdgeList
from iDiGraph.Graph.GraphValidator import GraphValidator
from iDiGraph.Traversal.DfsTime import DfsTime


class DepthFirstSearch:
    """ 从单个起点出发的深度优先搜索，记录每个点的先序、后序编号
    出边按关联表中链表的顺序访问，即输入顺序，因此结果是确定的
    """

    def __init__(self, edgeList: EdgeList, graph: DirectedGraph, n: int, validate: bool = False):
        self.edgeList = edgeList
        self.graph = graph
        self.n = n
        self.validate = validate

        self.k = 1  # 下一个先序编号
        self.j = 1  # 下一个后序编号
        self.time = DfsTime(n)
        self.parent = [0 for _ in range(n + 1)]  # dfs树上的父节点，根和未到达的点为0

    def __reset(self, v0: int):
        if self.validate:
            validator = GraphValidator(self.n, self.edgeList.getEdgeNum())
            validator.checkEdgeList(self.edgeList)
            validator.checkGraph(self.graph)
            validator.checkVertex(v0)
        self.k = 1
        self.j = 1
        self.time = DfsTime(self.n)
        self.parent = [0 for _ in range(self.n + 1)]

    def __visit(self, v: int):
        self.time.preLabel[v] = self.k
        self.k += 1
        a = self.graph.edgeFirst[v]
        while a != 0:
            w = self.edgeList.head[a]
            if self.time.preLabel[w] == 0:
                self.parent[w] = v
                self.__visit(w)
            a = self.graph.edgeNext[a]
        self.time.postLabel[v] = self.j
        self.j += 1

    def dfs(self, v0: int):
        """ 递归实现，深度受解释器递归深度限制
        :param v0: 起点，1~n
        """
        self.__reset(v0)
        self.__visit(v0)
        return self.time

    def dfsIterative(self, v0: int):
        """ 用显式栈代替递归，栈中每项为[点, 下一条待处理的出边]，结果与dfs相同
        :param v0: 起点，1~n
        """
        self.__reset(v0)
        pre, post = self.time.preLabel, self.time.postLabel
        head, edgeFirst, edgeNext = self.edgeList.head, self.graph.edgeFirst, self.graph.edgeNext

        pre[v0] = self.k
        self.k += 1
        stack = [[v0, edgeFirst[v0]]]
        while stack:
            top = stack[-1]
            v, a = top
            if a == 0:
                stack.pop()
                post[v] = self.j
                self.j += 1
                continue
            top[1] = edgeNext[a]
            w = head[a]
            if pre[w] == 0:
                self.parent[w] = v
                pre[w] = self.k
                self.k += 1
                stack.append([w, edgeFirst[w]])
        return self.time

    def getDfsTime(self):
        return self.time

    def getParent(self):
        return self.parent


def dfs(edgeList: EdgeList, graph: DirectedGraph, n: int, v0: int):
    return DepthFirstSearch(edgeList, graph, n).dfsIterative(v0)
