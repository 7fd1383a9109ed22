from prometheus_client import Counter, Histogram, CollectorRegistry, generate_latest
from prometheus_client.multiprocess import MultiProcessCollector
import os


registry = CollectorRegistry()
if os.getenv('prometheus_multiproc_dir'):
    MultiProcessCollector(registry)


http_requests_total = Counter(
    'http_requests_total',
    'Total HTTP requests',
    ['method', 'endpoint', 'status'],
    registry=registry
)

http_request_duration_seconds = Histogram(
    'http_request_duration_seconds',
    'HTTP request duration in seconds',
    ['method', 'endpoint'],
    buckets=[0.005, 0.01, 0.025, 0.05, 0.075, 0.1, 0.25, 0.5, 0.75, 1.0, 2.5, 5.0, 7.5, 10.0],
    registry=registry
)

http_errors_total = Counter(
    'http_errors_total',
    'Total HTTP error responses',
    ['method', 'endpoint', 'status'],
    registry=registry
)


generated_sessions_total = Counter(
    'generated_sessions_total',
    'Total track sessions generated',
    ['track', 'status'],
    registry=registry
)

replaced_sessions_total = Counter(
    'replaced_sessions_total',
    'Sessions deleted because their coordinates were regenerated',
    ['track'],
    registry=registry
)

catalog_exercises_created_total = Counter(
    'catalog_exercises_created_total',
    'Exercises added to the shared catalog during generation',
    registry=registry
)

assignments_skipped_total = Counter(
    'assignments_skipped_total',
    'Exercise assignments dropped because the catalog entry could not be resolved',
    registry=registry
)

generation_duration_seconds = Histogram(
    'generation_duration_seconds',
    'Wall time of a generate() call in seconds',
    ['track'],
    buckets=[0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0],
    registry=registry
)


def track_http_request(method: str, endpoint: str, status: int, duration: float):
    http_requests_total.labels(method=method, endpoint=endpoint, status=status).inc()
    http_request_duration_seconds.labels(method=method, endpoint=endpoint).observe(duration)
    
    if status >= 400:
        http_errors_total.labels(method=method, endpoint=endpoint, status=status).inc()


def track_session_generated(track: str, status: str):
    generated_sessions_total.labels(track=track, status=status).inc()


def track_session_replaced(track: str):
    replaced_sessions_total.labels(track=track).inc()


def track_catalog_exercise_created():
    catalog_exercises_created_total.inc()


def track_assignment_skipped():
    assignments_skipped_total.inc()


def track_generation_duration(track: str, duration: float):
    generation_duration_seconds.labels(track=track).observe(duration)


def get_metrics() -> bytes:
    return generate_latest(registry)
