from iDiGraph.Utils.Logger import Logger


class DfsTime:
    def __init__(self, n: int):
        self.preLabel = [0 for _ in range(n + 1)]  # preLabel[v]: v被发现的次序，0表示未到达
        self.postLabel = [0 for _ in range(n + 1)]  # postLabel[v]: v的出边全部处理完的次序

    def isReached(self, v: int):
        return self.preLabel[v] != 0

    def getReached(self):
        """ 返回所有到达过的点，按先序排列
        """
        reached = [v for v in range(1, len(self.preLabel)) if self.preLabel[v] != 0]
        reached.sort(key=lambda v: self.preLabel[v])
        return reached

    def output(self, log: Logger = None):
        if log is None:
            log = Logger()
        log.info("pre_label: {}".format(self.preLabel[1:]))
        log.info("post_label: {}".format(self.postLabel[1:]))
