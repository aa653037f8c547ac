"""S3 source file reader implementing IFileSource."""

from __future__ import annotations

import boto3
from botocore.exceptions import ClientError

from bulkentry.core.exceptions import SourceError


class S3FileSource:
    """IFileSource that reads uploaded files from one S3 bucket."""

    def __init__(self, bucket: str, region: str = "us-east-1",
                 endpoint_url: str | None = None) -> None:
        self._bucket = bucket
        kwargs: dict = {"region_name": region}
        if endpoint_url:
            kwargs["endpoint_url"] = endpoint_url
        self._client = boto3.client("s3", **kwargs)

    @property
    def bucket(self) -> str:
        return self._bucket

    def read(self, location: str) -> bytes:
        try:
            resp = self._client.get_object(Bucket=self._bucket, Key=location)
            return resp["Body"].read()
        except ClientError as exc:
            raise SourceError(f"S3 read failed for s3://{self._bucket}/{location}: {exc}") from exc
