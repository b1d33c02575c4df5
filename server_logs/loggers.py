from server_logs.chooseLogType import get_logger
import os

env = os.getenv("ENV", "dev")
log_dir = os.getenv("LOG_DIR", "logs")

server_logger = get_logger(mode=env, log_type="server", base_path=log_dir)
auth_logger = get_logger(mode=env, log_type="auth", base_path=log_dir)
collection_logger = get_logger(mode=env, log_type="collection", base_path=log_dir)
