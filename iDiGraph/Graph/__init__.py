from iDiGraph.Graph.EdgeList import EdgeList
from iDiGraph.Graph.DirectedGraph import DirectedGraph
from iDiGraph.Graph.GraphValidator import GraphValidator, GraphError, GraphSizeMismatch, InvalidVertexId, LengthMismatch
from iDiGraph.Graph.IncidenceListBuilder import IncidenceListBuilder, dicompIncidenceListConstruct
