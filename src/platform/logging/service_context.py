"""
Service context for log lines.

Identifies which process (CLI run, worker, test session) emitted a log line.
"""

import os
from functools import lru_cache
import socket


@lru_cache(maxsize=1)
def get_service_context() -> str:
    service_name = os.getenv('SERVICE_NAME', 'venue-map-inventory')
    deploy_env = os.getenv('DEPLOY_ENV', 'local_dev')
    host = os.getenv('HOSTNAME') or socket.gethostname().split('.')[0]
    return f'{service_name}@{deploy_env}:{host}:{os.getpid()}'
