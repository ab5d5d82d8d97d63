import os

# The app builds its engine from settings at import time.
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("API_TOKENS", "test-token")
os.environ.setdefault("LOG_LEVEL", "WARNING")
