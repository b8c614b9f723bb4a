import os
import sys

from iDiGraph.Graph import EdgeList, GraphError, IncidenceListBuilder
from iDiGraph.Traversal import DepthFirstSearch
from iDiGraph.Utils.DotGraph import DotGraph
from iDiGraph.Utils.EdgeListReader import EdgeListReader
from iDiGraph.Utils.Helper import Helper
from iDiGraph.Utils.Logger import Logger


def exampleGraph():
    # 下标0是哑元
    edgeList = EdgeList(tail=[0, 1, 1, 6, 6, 4, 5, 3, 2, 4],
                        head=[0, 2, 5, 2, 5, 1, 4, 6, 3, 3])
    return edgeList, 6


def main(argv: list):
    """
    argv参数：
    argv[1]: 可选，边表文件
    其余为可选参数，见Helper
    """
    h = Helper()
    edgeFile = None
    start = 1
    printProcessInfo = False
    outputPath = None

    i = 1
    while i < len(argv):
        arg = argv[i]
        if arg in ['-h', "--help"]:
            print(h.getHelpInfo())
            return 0
        elif arg in ['-v', "--version"]:
            print(h.getVersion())
            return 0
        elif arg in ['-pd', '--process-detail']:
            printProcessInfo = True
        elif arg in ['-s', '--start', '-H', '--html']:
            if i + 1 >= len(argv):
                print("missing value for {}".format(arg))
                return -1
            if arg in ['-s', '--start']:
                if not argv[i + 1].isdigit():
                    print("start vertex must be a positive integer: {}".format(argv[i + 1]))
                    return -1
                start = int(argv[i + 1])
            else:
                outputPath = argv[i + 1]
            i += 1
        elif arg.startswith('-') or edgeFile is not None:
            print("wrong argument: {}".format(arg))
            return -1
        else:
            edgeFile = arg
        i += 1

    log = Logger(printProcessInfo)
    if edgeFile is not None and not os.path.isfile(edgeFile):
        log.fail("edge file {} does not exist".format(edgeFile))
    if outputPath is not None and not os.path.isdir(outputPath):
        log.fail("output path {} does not exist".format(outputPath))

    if edgeFile is None:
        edgeList, n = exampleGraph()
        outName = "example"
    else:
        reader = EdgeListReader(edgeFile)
        try:
            edgeList = reader.read()
        except GraphError as e:
            log.fail(str(e))
        n = reader.getVertexNum()
        if n > edgeList.getMaxVertex():
            log.warning("{} declares {} vertices but edges only reach {}".format(edgeFile, n, edgeList.getMaxVertex()))
        outName = os.path.basename(edgeFile)
    m = edgeList.getEdgeNum()
    log.processing("graph loaded, n={}, m={}".format(n, m))

    try:
        graph = IncidenceListBuilder(edgeList, n, m, validate=True).build()
        log.processing("incidence list built")
        graph.output(log)
        dfsAlg = DepthFirstSearch(edgeList, graph, n, validate=True)
        time = dfsAlg.dfsIterative(start)
    except GraphError as e:
        log.fail(str(e))
    log.processing("dfs from {} reached {} of {} vertices".format(start, len(time.getReached()), n))
    time.output(log)

    if outputPath is not None:
        if not outputPath.endswith("/"):
            outputPath += "/"
        DotGraph(edgeList, n, time).genDotGraph(outputPath, outName)
        log.info("graph rendered to {}{}_graph.png".format(outputPath, outName))
    return 0


def run():
    sys.exit(main(sys.argv))


if __name__ == '__main__':
    run()
