from iDiGraph.Graph.EdgeList import EdgeList
from iDiGraph.Graph.GraphValidator import GraphError


class EdgeFileError(GraphError):
    def __init__(self, filename: str, lineNo: int, line: str):
        self.filename = filename
        self.lineNo = lineNo
        self.line = line
        super().__init__("{}:{}: malformed line: {}".format(filename, lineNo, line))


class EdgeListReader:
    """ 从文本文件读取边表，每行一条边"tail head"
    以'c'或'#'开头的行、空行会被跳过，可选的"p <n> <m>"行指定点数
    """

    def __init__(self, filename: str):
        self.filename = filename
        self.n = 0
        self.declaredN = 0  # p行给出的点数，没有p行时为0
        self.pairs = []

    def __toInts(self, tokens: list, lineNo: int, line: str):
        if not all(t.isdigit() for t in tokens):
            raise EdgeFileError(self.filename, lineNo, line)
        return [int(t) for t in tokens]

    def read(self):
        self.declaredN = 0
        self.pairs = []
        with open(self.filename) as f:
            for lineNo, line in enumerate(f, 1):
                line = line.strip()
                parts = line.split()
                if not parts or parts[0] == 'c' or parts[0].startswith('#'):
                    continue
                if parts[0] == 'p':
                    # p <n> <m> 或 DIMACS的 p sp <n> <m>
                    if len(parts) < 3:
                        raise EdgeFileError(self.filename, lineNo, line)
                    self.declaredN = self.__toInts(parts[-2:], lineNo, line)[0]
                    continue
                if parts[0] == 'a':  # DIMACS弧行: a tail head [weight]
                    parts = parts[1:]
                if len(parts) < 2:
                    raise EdgeFileError(self.filename, lineNo, line)
                self.pairs.append(self.__toInts(parts[:2], lineNo, line))
        edgeList = EdgeList.fromPairs(self.pairs)
        self.n = self.declaredN if self.declaredN != 0 else edgeList.getMaxVertex()
        return edgeList

    def getVertexNum(self):
        return self.n

    def getDeclaredVertexNum(self):
        return self.declaredN
