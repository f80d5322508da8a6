"""Root conftest — shared test configuration."""

import os

# Ensure tests don't accidentally use real provider keys
os.environ.setdefault("LYGOS_API_KEY", "lygos-test-fake-key")
os.environ.setdefault("RESEND_API_KEY", "re-test-fake-key")
os.environ.setdefault("AUTH_API_KEY", "auth-test-fake-key")
os.environ.setdefault("PUBLIC_SITE_URL", "https://oredytech.test")
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)
