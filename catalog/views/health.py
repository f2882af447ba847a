"""
Health check endpoints for monitoring and load balancer integration.

- liveness: the process answers
- readiness: the database answers
- health: database + cache with latency
- metrics: catalog counters
"""

import logging
import time
from typing import Any

from django.conf import settings
from django.core.cache import cache
from django.db import connection
from django.http import HttpRequest, JsonResponse
from django.utils import timezone
from django.views.decorators.cache import never_cache
from django.views.decorators.http import require_GET

logger = logging.getLogger(__name__)


@require_GET
@never_cache
def health_check(request: HttpRequest) -> JsonResponse:
    """
    Comprehensive health check endpoint.

    Returns:
        200 OK if all checks pass
        503 Service Unavailable if any check fails

    Response format:
        {
            "status": "healthy" | "unhealthy",
            "timestamp": "2025-01-02T10:30:00Z",
            "checks": {
                "database": {"status": "ok", "latency_ms": 5.2},
                "cache": {"status": "ok"}
            },
            "version": "1.0.0"
        }
    """
    checks = {
        'database': check_database(),
        'cache': check_cache(),
    }
    # A degraded cache does not take the service down
    all_healthy = checks['database']['status'] == 'ok' and checks['cache']['status'] != 'error'

    response_data = {
        'status': 'healthy' if all_healthy else 'unhealthy',
        'timestamp': timezone.now().isoformat(),
        'checks': checks,
        'version': getattr(settings, 'VERSION', '1.0.0'),
    }
    return JsonResponse(response_data, status=200 if all_healthy else 503)


@require_GET
@never_cache
def liveness_check(request: HttpRequest) -> JsonResponse:
    """Simple liveness check; also served at the site root."""
    return JsonResponse({
        'status': 'alive',
        'message': 'API is running!',
        'timestamp': timezone.now().isoformat(),
    })


@require_GET
@never_cache
def readiness_check(request: HttpRequest) -> JsonResponse:
    """
    Readiness check for container orchestration.

    Returns:
        200 OK if ready to serve traffic
        503 Service Unavailable if the database is unreachable
    """
    db = check_database()
    if db['status'] != 'ok':
        return JsonResponse({
            'status': 'not_ready',
            'timestamp': timezone.now().isoformat(),
            'reason': 'database_unavailable',
        }, status=503)

    return JsonResponse({
        'status': 'ready',
        'timestamp': timezone.now().isoformat(),
    })


def check_database() -> dict[str, Any]:
    """Run ``SELECT 1`` and report the round-trip latency."""
    start_time = time.time()

    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
            cursor.fetchone()

        latency_ms = (time.time() - start_time) * 1000
        if latency_ms > 100:
            logger.warning(f"Database latency is high: {latency_ms:.2f}ms")

        return {
            'status': 'ok',
            'latency_ms': round(latency_ms, 2),
        }

    except Exception as e:
        logger.error(f"Database health check failed: {str(e)}")
        return {
            'status': 'error',
            'error': str(e),
        }


def check_cache() -> dict[str, Any]:
    """Round-trip a throwaway key through the cache."""
    try:
        test_key = 'health_check_test'
        cache.set(test_key, 'ok', timeout=10)
        if cache.get(test_key) != 'ok':
            return {
                'status': 'error',
                'error': 'Cache set/get mismatch',
            }
        cache.delete(test_key)
        return {'status': 'ok'}

    except Exception as e:
        logger.warning(f"Cache health check failed: {str(e)}")
        return {
            'status': 'degraded',
            'error': str(e),
        }


@require_GET
@never_cache
def metrics(request: HttpRequest) -> JsonResponse:
    """Catalog counters for monitoring dashboards."""
    try:
        from ..models import Inventory, Item, User

        return JsonResponse({
            'users': User.objects.count(),
            'admins': User.objects.filter(is_admin=True).count(),
            'blocked_users': User.objects.filter(is_blocked=True).count(),
            'inventories': Inventory.objects.count(),
            'items': Item.objects.count(),
            'timestamp': timezone.now().isoformat(),
        })

    except Exception as e:
        logger.exception("Metrics endpoint failed")
        return JsonResponse({
            'error': 'Failed to collect metrics',
            'detail': str(e),
        }, status=500)
