class HelpInfo:
    '''
    一条帮助信息
    '''

    def __init__(self, abbreviation: str, fullName: str, usage: str, alternative: bool = True):
        '''
        :param abbreviation: 缩写，如-v
        :param fullName: 全称，如--version
        :param usage: 作用
        :param alternative: 是否是可选参数
        '''
        self.abbreviation = abbreviation
        self.fullName = fullName
        self.usage = usage
        self.alternative = alternative


class Helper:
    '''
    存储帮助信息
    '''

    def __init__(self):
        self.introduce = "iDiGraph, build an array-based incidence list of a directed graph and label it by DFS"
        self.requiredArgslist = ["[<edgeFile>]"]
        self.version = "1.0"

        self.HelpInfos = []
        self.HelpInfos.append(HelpInfo("", "<edgeFile>",
                                       "File with one 'tail head' edge per line. The built-in example graph is used if omitted.",
                                       False))
        self.HelpInfos.append(HelpInfo("-h", "--help", "Show this help message and exit."))
        self.HelpInfos.append(HelpInfo("-s", "--start", "Start vertex of the DFS, 1 by default."))
        self.HelpInfos.append(HelpInfo("-pd", "--process-detail", "Print detailed information while building."))
        self.HelpInfos.append(HelpInfo("-H", "--html",
                                       "Render the graph with DFS labels into the given output path. Graphviz is required!"))
        self.HelpInfos.append(HelpInfo("-v", "--version", "Print version information and exit."))

    def getHelpInfo(self):
        lines = [self.introduce, "", "usage: iDiGraph " + " ".join(self.requiredArgslist) + " [options]", ""]
        for info in self.HelpInfos:
            if info.alternative:
                name = "{}, {}".format(info.abbreviation, info.fullName)
            else:
                name = info.fullName
            lines.append("  {:<24}{}".format(name, info.usage))
        return "\n".join(lines)

    def getVersion(self):
        return "iDiGraph version " + self.version
