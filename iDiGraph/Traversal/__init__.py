from iDiGraph.Traversal.DfsTime import DfsTime
from iDiGraph.Traversal.DepthFirstSearch import DepthFirstSearch, dfs
