# Prometheus 메트릭 - 요청 건수/지연 기록과 스크랩 엔드포인트
import os
import time

from flask import Response, g, request
from prometheus_client import (
    CONTENT_TYPE_LATEST,
    REGISTRY,
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
    multiprocess,
)

REQUEST_COUNT = Counter(
    'status_service_http_requests_total',
    'Total number of HTTP requests processed by the status service',
    ['method', 'endpoint', 'status']
)
REQUEST_LATENCY = Histogram(
    'status_service_http_request_latency_seconds',
    'Latency of HTTP requests processed by the status service',
    ['endpoint']
)


def start_timer():
    """요청 시작 시각을 기록하여 응답 지연을 산출"""
    if request.path == '/metrics':
        return
    g.request_start_time = time.time()


def record_request_metrics(response):
    """요청 건수 및 응답 시간을 Prometheus 메트릭으로 저장"""
    if request.path != '/metrics':
        elapsed = time.time() - getattr(g, 'request_start_time', time.time())
        endpoint = request.endpoint or 'unknown'
        REQUEST_LATENCY.labels(endpoint=endpoint).observe(elapsed)
        REQUEST_COUNT.labels(
            method=request.method,
            endpoint=endpoint,
            status=response.status_code
        ).inc()
    return response


def collect_registry():
    # gunicorn 다중 워커: PROMETHEUS_MULTIPROC_DIR 의 워커별 파일을 합산
    if os.environ.get('PROMETHEUS_MULTIPROC_DIR'):
        registry = CollectorRegistry()
        multiprocess.MultiProcessCollector(registry)
        return registry
    return REGISTRY


def metrics():
    """Prometheus가 스크랩할 메트릭 엔드포인트"""
    return Response(generate_latest(collect_registry()), mimetype=CONTENT_TYPE_LATEST)


def register_metrics(app):
    app.before_request(start_timer)
    app.after_request(record_request_metrics)
    app.add_url_rule('/metrics', view_func=metrics, methods=['GET'])
