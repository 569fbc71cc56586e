from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST
from flask import Response, request
import time
import functools


REQUEST_COUNT = Counter(
    'movie_service_request_count',
    'Total Movie Service Request Count',
    ['method', 'endpoint', 'http_status']
)

REQUEST_DURATION = Histogram(
    'movie_service_request_duration_seconds',
    'Movie Service Request Duration',
    ['method', 'endpoint']
)


MOVIES_ADDED_COUNT = Counter(
    'movie_service_movies_added_total',
    'Total movies added at runtime'
)

INVALID_MOVIE_COUNT = Counter(
    'movie_service_invalid_movies_total',
    'Total rejected add-movie requests'
)


GENRE_QUERY_COUNT = Counter(
    'movie_service_genre_queries_total',
    'Total genre-filtered movie queries',
    ['result']
)


def track_request(f):
    @functools.wraps(f)
    def wrapper(*args, **kwargs):
        start_time = time.time()

        try:
            response = f(*args, **kwargs)
            status_code = response.status_code if hasattr(response, 'status_code') else 200

            REQUEST_COUNT.labels(
                method=request.method,
                endpoint=f.__name__,
                http_status=status_code
            ).inc()

            duration = time.time() - start_time
            REQUEST_DURATION.labels(
                method=request.method,
                endpoint=f.__name__
            ).observe(duration)

            return response

        except Exception:
            REQUEST_COUNT.labels(
                method=request.method,
                endpoint=f.__name__,
                http_status=500
            ).inc()
            raise

    return wrapper


def metrics_endpoint():
    return Response(generate_latest(), mimetype=CONTENT_TYPE_LATEST)
