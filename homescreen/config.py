"""
Home screen CMS configuration: all environment variables in one place.

Read from environment at runtime. Never hardcode secrets.
"""

from __future__ import annotations

import os


class Settings:
    """Application settings from environment variables."""

    # MongoDB
    MONGODB_URI: str = os.environ.get("MONGODB_URI", "mongodb://localhost:27017")
    MONGODB_DATABASE: str = os.environ.get("MONGODB_DATABASE", "homescreen")

    # S3 Storage
    S3_ENDPOINT: str = os.environ.get("S3_ENDPOINT", "http://localhost:4568")
    S3_ACCESS_KEY: str = os.environ.get("S3_ACCESS_KEY", "S3RVER")
    S3_SECRET_KEY: str = os.environ.get("S3_SECRET_KEY", "S3RVER")
    S3_REGION: str = os.environ.get("S3_REGION", "us-east-1")
    S3_BUCKET: str = os.environ.get("S3_BUCKET", "holywater-bucket")
    S3_PRESIGN_EXPIRY_SECONDS: int = int(os.environ.get("S3_PRESIGN_EXPIRY_SECONDS", "3600"))

    # Uploads
    MAX_UPLOAD_BYTES: int = int(os.environ.get("MAX_UPLOAD_BYTES", str(50 * 1024 * 1024)))

    # Application
    LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO")
    HOST: str = os.environ.get("HOST", "0.0.0.0")  # nosec B104
    PORT: int = int(os.environ.get("PORT", "3001"))

    @property
    def S3_PUBLIC_URL(self) -> str:
        url = os.environ.get("S3_PUBLIC_URL")
        if url:
            return url.rstrip("/")
        return f"{self.S3_ENDPOINT.rstrip('/')}/{self.S3_BUCKET}"


# Singleton instance
settings = Settings()
