from iDiGraph.Utils.Logger import Logger
