"""Test environment: in-memory SQLite, a fixed signing secret and cheap bcrypt rounds.

Set before any inputly module is imported, since settings are read once at import.
"""

import os

os.environ["APP_ENV"] = "dev"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET"] = "test-secret-not-for-production-use-only"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["LOG_LEVEL"] = "WARNING"
