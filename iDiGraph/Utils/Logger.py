import time


class Logger:
    def __init__(self, outputProcessInfo: bool = False):
        self.outputProcessInfo = outputProcessInfo  # only print PROCESS DETAIL lines when set

    def info(self, strInfo: str):
        print(time.strftime('%Y-%m-%d %H:%M:%S - INFO : ', time.localtime()) + strInfo)

    def warning(self, strInfo: str):
        print("\033[31m{}\033[0m".format(time.strftime('%Y-%m-%d %H:%M:%S - WARNING : ', time.localtime()) + strInfo))

    def fail(self, strInfo: str):
        print("\033[31m{}\033[0m".format(time.strftime('%Y-%m-%d %H:%M:%S - FAILURE : ', time.localtime()) + strInfo))
        raise SystemExit(-1)

    def processing(self, strInfo: str):
        if not self.outputProcessInfo:
            return
        print(time.strftime('%Y-%m-%d %H:%M:%S - PROCESS DETAIL : ', time.localtime()) + strInfo)
