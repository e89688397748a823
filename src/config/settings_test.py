"""Settings for the test suite.

Provides deterministic secrets and swaps the MongoDB client for the
in-memory ``mongomock`` implementation.
"""

import os

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("JWT_SECRET", "test-jwt-secret")
os.environ.setdefault("MONGO_URI", "mongodb://localhost:27017")

from config.settings import *  # noqa: E402,F401,F403

MONGO_DB_NAME = "ecommerce_test"
MONGO_CLIENT_CLASS = "mongomock.MongoClient"
JWT_EXPIRATION_SECONDS = 3600
