"""S3-compatible blob storage service."""

from __future__ import annotations

import logging

import aioboto3
from botocore.exceptions import ClientError

from homescreen.config import settings

logger = logging.getLogger(__name__)

_MISSING_BUCKET_CODES = {"404", "NoSuchBucket", "NotFound"}


class StorageService:
    """File storage for posters and section design images using the S3 API."""

    def __init__(
        self,
        bucket: str | None = None,
        endpoint: str | None = None,
        public_url: str | None = None,
    ) -> None:
        """Initialize the storage service with credentials from settings."""
        self.session = aioboto3.Session()
        self.bucket = bucket or settings.S3_BUCKET
        self.endpoint = endpoint or settings.S3_ENDPOINT
        self.public_url = public_url or settings.S3_PUBLIC_URL
        self.access_key = settings.S3_ACCESS_KEY
        self.secret_key = settings.S3_SECRET_KEY
        self.region = settings.S3_REGION

    def _client(self):
        return self.session.client(
            "s3",
            endpoint_url=self.endpoint,
            aws_access_key_id=self.access_key,
            aws_secret_access_key=self.secret_key,
            region_name=self.region,
        )

    async def upload_file(self, key: str, body: bytes, content_type: str) -> str:
        """
        Upload a file.

        Args:
            key: Object key (usually content-addressed, see utils.hash)
            body: File bytes
            content_type: MIME type stored with the object

        Returns:
            Public URL of the uploaded object
        """
        async with self._client() as s3:
            await s3.put_object(
                Bucket=self.bucket,
                Key=key,
                Body=body,
                ContentType=content_type,
            )
        return f"{self.public_url}/{key}"

    async def generate_presigned_download_url(self, key: str, expires_in: int | None = None) -> str:
        """
        Generate a pre-signed URL for downloading a file.

        Args:
            key: Object key
            expires_in: Seconds until the URL expires (default from settings)
        """
        async with self._client() as s3:
            return await s3.generate_presigned_url(
                "get_object",
                Params={"Bucket": self.bucket, "Key": key},
                ExpiresIn=expires_in or settings.S3_PRESIGN_EXPIRY_SECONDS,
            )

    async def generate_presigned_upload_url(self, key: str, expires_in: int | None = None) -> str:
        """Generate a pre-signed URL clients can PUT a file to directly."""
        async with self._client() as s3:
            return await s3.generate_presigned_url(
                "put_object",
                Params={"Bucket": self.bucket, "Key": key},
                ExpiresIn=expires_in or settings.S3_PRESIGN_EXPIRY_SECONDS,
            )

    async def delete_file(self, key: str) -> None:
        """Delete a file. Deleting a missing key is not an error."""
        async with self._client() as s3:
            await s3.delete_object(Bucket=self.bucket, Key=key)

    async def ensure_bucket(self) -> None:
        """Create the bucket if it does not exist yet. Called at startup."""
        async with self._client() as s3:
            try:
                await s3.head_bucket(Bucket=self.bucket)
                logger.info("Bucket '%s' already exists, skipping creation", self.bucket)
                return
            except ClientError as e:
                if e.response.get("Error", {}).get("Code", "") not in _MISSING_BUCKET_CODES:
                    raise

            await s3.create_bucket(Bucket=self.bucket)
            logger.info("Bucket '%s' created", self.bucket)
