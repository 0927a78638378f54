"""
Service context extraction for logging.

Identifies the running process in log lines so output from several
workers (uvicorn --workers, container replicas) can be told apart.
"""

import os
import socket
from functools import lru_cache


@lru_cache(maxsize=1)
def get_service_context() -> str:
    service_name = os.getenv('SERVICE_NAME', 'venue-booking')
    deploy_env = os.getenv('DEPLOY_ENV', 'local_dev')

    # Container hostname when running under docker/k8s, PID otherwise
    if os.getenv('KUBERNETES_SERVICE_HOST') or os.path.exists('/.dockerenv'):
        instance = socket.gethostname()[:12]
    else:
        instance = str(os.getpid())

    return f'{service_name}@{deploy_env}:{instance}'
