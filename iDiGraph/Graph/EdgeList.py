class EdgeList:
    """有向图的边表，起点和终点分别存放在两个数组中
    数组下标从1开始，下标0是不使用的哑元，因此两个数组的长度都是m+1
    """

    def __init__(self, tail: list, head: list):
        self.tail = list(tail)  # tail[a]: 边a的起点
        self.head = list(head)  # head[a]: 边a的终点

    @classmethod
    def fromPairs(cls, edges: list):
        """ 由边对构造边表
        :param edges: 图的边，格式为[[n1,n2],[n3,n4]......]，第i对边的编号为i+1
        """
        tail = [0]
        head = [0]
        for x, y in edges:
            tail.append(x)
            head.append(y)
        return cls(tail, head)

    def getEdgeNum(self):
        return len(self.tail) - 1

    def getMaxVertex(self):
        # 跳过下标0的哑元
        return max(self.tail[1:] + self.head[1:], default=0)

    def getEdge(self, a: int):
        return self.tail[a], self.head[a]

    def getPairs(self):
        return [[self.tail[a], self.head[a]] for a in range(1, self.getEdgeNum() + 1)]
