from prometheus_client import Counter, Histogram, Gauge

REQUEST_COUNT = Counter(
    "http_requests_total",
    "Total HTTP requests",
    ["method", "path", "status"],
)
REQUEST_LATENCY = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "path"],
)
IN_PROGRESS = Gauge(
    "http_requests_in_progress",
    "HTTP requests in progress",
)
PROFILE_CACHE_REQUESTS = Counter(
    "engineer_profile_cache_total",
    "Engineer profile cache lookups",
    ["result"],
)
RESET_PIN_EVENTS = Counter(
    "password_reset_pin_events_total",
    "Password reset PIN lifecycle events",
    ["event"],
)


def get_route_name(scope: dict) -> str:
    route = scope.get("route")
    if route and hasattr(route, "path"):
        return route.path
    return scope.get("path", "unknown")
