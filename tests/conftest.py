"""Root conftest — shared test configuration."""

import os

# Settings are read at import of company_api.main; keep tests off real databases
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_FORMAT", "text")
