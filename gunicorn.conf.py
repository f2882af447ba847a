"""
Gunicorn configuration for the inventory catalog API.

Every setting can be overridden through the environment so one file serves
local, staging and production deployments.

Environment Variables:
    GUNICORN_BIND - Bind address (default: 0.0.0.0:8000)
    GUNICORN_WORKERS - Number of worker processes (default: CPU * 2 + 1)
    GUNICORN_WORKER_CLASS - Worker class (default: sync)
    GUNICORN_TIMEOUT - Worker timeout in seconds (default: 30)
    GUNICORN_GRACEFUL_TIMEOUT - Graceful shutdown timeout (default: 30)
    GUNICORN_KEEPALIVE - Keep-alive timeout (default: 5)
    GUNICORN_MAX_REQUESTS - Max requests per worker before restart (default: 1000)
    GUNICORN_MAX_REQUESTS_JITTER - Random jitter for max_requests (default: 50)
    GUNICORN_LOG_LEVEL - Logging level (default: info)
"""

import multiprocessing
import os


def get_env_int(key: str, default: int) -> int:
    """Get integer from environment variable with fallback."""
    try:
        return int(os.getenv(key, default))
    except (ValueError, TypeError):
        return default


def get_env_str(key: str, default: str) -> str:
    return os.getenv(key, default)


def get_env_bool(key: str, default: str) -> bool:
    return get_env_str(key, default).lower() in ('true', '1', 'yes')


# =============================================================================
# Application
# =============================================================================

wsgi_app = get_env_str('GUNICORN_WSGI_APP', 'catalog_backend.wsgi:application')

# Container platforms hand the port over in $PORT
bind = get_env_str('GUNICORN_BIND', f"0.0.0.0:{os.getenv('PORT', '8000')}")

# =============================================================================
# Workers
# =============================================================================

workers = get_env_int('GUNICORN_WORKERS', multiprocessing.cpu_count() * 2 + 1)
worker_class = get_env_str('GUNICORN_WORKER_CLASS', 'sync')
threads = get_env_int('GUNICORN_THREADS', 1)

# The API does no long-running work; anything slower than this is stuck
timeout = get_env_int('GUNICORN_TIMEOUT', 30)
graceful_timeout = get_env_int('GUNICORN_GRACEFUL_TIMEOUT', 30)
keepalive = get_env_int('GUNICORN_KEEPALIVE', 5)

max_requests = get_env_int('GUNICORN_MAX_REQUESTS', 1000)
max_requests_jitter = get_env_int('GUNICORN_MAX_REQUESTS_JITTER', 50)

preload_app = get_env_bool('GUNICORN_PRELOAD_APP', 'false')

# =============================================================================
# Logging
# =============================================================================

# '-' means stdout/stderr
accesslog = get_env_str('GUNICORN_ACCESS_LOG', '-')
errorlog = get_env_str('GUNICORN_ERROR_LOG', '-')
loglevel = get_env_str('GUNICORN_LOG_LEVEL', 'info')

access_log_format = get_env_str(
    'GUNICORN_ACCESS_LOG_FORMAT',
    '%(h)s %(t)s "%(r)s" %(s)s %(b)s %(D)s'
)

proc_name = get_env_str('GUNICORN_PROC_NAME', 'inventory-catalog')

# =============================================================================
# Request limits
# =============================================================================

limit_request_line = get_env_int('GUNICORN_LIMIT_REQUEST_LINE', 4094)
limit_request_field_size = get_env_int('GUNICORN_LIMIT_REQUEST_FIELD_SIZE', 8190)
limit_request_fields = get_env_int('GUNICORN_LIMIT_REQUEST_FIELDS', 100)

# =============================================================================
# Server Hooks
# =============================================================================

def on_starting(server):
    server.log.info("Starting inventory catalog API")
    server.log.info(f"Workers: {workers}, Bind: {bind}, Timeout: {timeout}s")


def when_ready(server):
    server.log.info("Inventory catalog API is ready to accept connections")


def worker_abort(worker):
    """Called when a worker receives the SIGABRT signal."""
    worker.log.warning(f"Worker {worker.pid} aborted (timeout?)")


def on_exit(server):
    server.log.info("Shutting down inventory catalog API")
