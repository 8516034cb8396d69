"""
Security Module - Client IP detection and rate limiting for public forms
"""

import time
from flask import request, current_app


# Rate Limiting
RATE_LIMIT_REQUESTS = {}  # {ip: [(timestamp, endpoint), ...]}
RATE_LIMIT_MAX_REQUESTS = 10  # Max 10 requests
RATE_LIMIT_WINDOW = 60  # Per 60 seconds


def get_client_ip():
    """
    Get the client IP address.

    X-Forwarded-For is only honoured through ProxyFix (PROXY_FIX_X_FOR),
    which rewrites remote_addr from the trusted proxy hops.
    """
    return request.remote_addr or 'unknown'


def _prune_rate_limit_table(current_time):
    """Drop timestamps outside the window and IPs left without any."""
    for ip in list(RATE_LIMIT_REQUESTS):
        recent = [
            (ts, ep) for ts, ep in RATE_LIMIT_REQUESTS[ip]
            if current_time - ts < RATE_LIMIT_WINDOW
        ]
        if recent:
            RATE_LIMIT_REQUESTS[ip] = recent
        else:
            del RATE_LIMIT_REQUESTS[ip]


def check_rate_limit(endpoint='contact'):
    """Check if IP is within rate limit"""
    client_ip = get_client_ip()
    current_time = time.time()

    # Clean old requests outside the window
    _prune_rate_limit_table(current_time)

    # Check if limit exceeded
    endpoint_requests = [
        ep for ts, ep in RATE_LIMIT_REQUESTS.get(client_ip, []) if ep == endpoint
    ]
    if len(endpoint_requests) >= RATE_LIMIT_MAX_REQUESTS:
        current_app.logger.warning(f"Rate limit exceeded for {client_ip} on {endpoint}")
        return False

    # Add current request
    RATE_LIMIT_REQUESTS.setdefault(client_ip, []).append((current_time, endpoint))
    return True
