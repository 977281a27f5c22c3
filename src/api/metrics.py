from prometheus_client import Counter, Histogram, REGISTRY


# Metrics may already be registered when the app module is re-imported (tests, hot reload).
def get_or_create_metric(name, documentation, metric_type, **kwargs):
    try:
        return metric_type(name, documentation, **kwargs)
    except ValueError:
        return REGISTRY._names_to_collectors[name]


REQUESTS_TOTAL = get_or_create_metric(
    "planner_requests_total",
    "Total requests",
    Counter,
    labelnames=["endpoint", "status"],
)

REQUEST_LATENCY_SECONDS = get_or_create_metric(
    "planner_request_latency_seconds",
    "Request latency",
    Histogram,
    labelnames=["endpoint"],
)

SCHEDULE_RUNS_TOTAL = get_or_create_metric(
    "planner_schedule_runs_total", "Schedule generations", Counter
)

TASKS_SCHEDULED_TOTAL = get_or_create_metric(
    "planner_tasks_scheduled_total", "Total tasks placed into a slot", Counter
)

TASKS_UNPLACED_TOTAL = get_or_create_metric(
    "planner_tasks_unplaced_total", "Total tasks left without a slot", Counter
)
