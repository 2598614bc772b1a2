import os

# Keep imports of ems_api.core.database off any real server.
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("APP_ENV", "dev")
os.environ.setdefault("JWT_SECRET", "test-jwt-secret-strong-value-123456")
