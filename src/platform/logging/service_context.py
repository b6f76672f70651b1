"""
Service context used to tag every log line.

Combines service name, deployment environment and a process identifier so
that logs from several replicas can be told apart.
"""

import os
from functools import lru_cache


@lru_cache(maxsize=1)
def get_service_context() -> str:
    service_name = os.getenv('SERVICE_NAME', 'desk-booker')
    deploy_env = os.getenv('DEPLOY_ENV', 'local_dev')

    # Containers usually expose their hostname as an instance id
    instance_id = os.getenv('HOSTNAME', '')[:12] or str(os.getpid())

    return f'{service_name}@{deploy_env}:{instance_id}'
