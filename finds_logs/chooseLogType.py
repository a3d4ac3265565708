from finds_logs.stdout import StdoutLogger
from finds_logs.file import FileLogger
from finds_logs.json import JSONLogger
from finds_logs.composite import CompositeLogger

def get_logger(mode="dev", log_type="engine", level="INFO"):
    if mode == "prod":
        return CompositeLogger(
            FileLogger(log_type=log_type, level=level),
            JSONLogger(log_type=log_type, level=level)
        )
    return StdoutLogger(log_type=log_type, level=level)
