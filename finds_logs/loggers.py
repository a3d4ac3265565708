from finds_logs.chooseLogType import get_logger
import os

env = os.getenv("ENV", "dev")
# DEBUG shows a finds_detected record for every deck
level = os.getenv("FINDS_LOG_LEVEL", "INFO").upper()

engine_logger = get_logger(mode=env, log_type="engine", level=level)
client_logger = get_logger(mode=env, log_type="client", level=level)
