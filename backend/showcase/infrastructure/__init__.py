"""Infrastructure Layer — database session manager and third-party API clients.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Every outbound call maps failures to an ExternalServiceError subclass (core/errors.py)

Design Decisions:
    - One thin httpx wrapper per provider: routes and services never build raw requests
    - No retry, no backoff: errors are reported, not recovered
"""
