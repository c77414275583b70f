"""Application metrics using the Prometheus client library.

All metrics live here so there is a single inventory of what the service
measures.  Other modules import a metric and increment/observe it at the
point of action.

HTTP metrics are fed by MetricsMiddleware for every request.  Domain
metrics are incremented by the services, labelled by outcome where an
operation has more than one normal result (e.g. a login can succeed, miss
the user, or miss the password, and all three are HTTP 200).

Prometheus scrapes GET /metrics; see servicehub/api/metrics_endpoint.py.
"""

from __future__ import annotations

from prometheus_client import Counter, Gauge, Histogram

# ---------------------------------------------------------------------------
# HTTP metrics (populated by the MetricsMiddleware)
# ---------------------------------------------------------------------------

REQUEST_COUNT = Counter(
    "http_requests_total",
    "Total HTTP requests by method, endpoint, and status code",
    ["method", "endpoint", "status_code"],
)

REQUEST_DURATION = Histogram(
    "http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint"],
    # Password hashing dominates signup/login/forgot-password, so the
    # upper buckets matter more here than for plain CRUD.
    buckets=[0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)

ACTIVE_REQUESTS = Gauge(
    "http_active_requests",
    "Number of HTTP requests currently being processed",
)

# ---------------------------------------------------------------------------
# Domain metrics
# ---------------------------------------------------------------------------

USER_SIGNUPS = Counter(
    "user_signups_total",
    "Signup attempts by outcome",
    ["outcome"],  # created|email_exists
)

LOGIN_ATTEMPTS = Counter(
    "login_attempts_total",
    "Login attempts by outcome",
    ["outcome"],  # success|user_not_found|invalid_password
)

PASSWORD_RESETS = Counter(
    "password_resets_total",
    "Forgot-password requests by outcome",
    ["outcome"],  # updated|user_not_found
)

ORGANIZATIONS_CREATED = Counter(
    "organizations_created_total",
    "Organizations created (each with one admin membership)",
)

INVITATIONS_CREATED = Counter(
    "invitations_created_total",
    "Pending invitations written",
)
