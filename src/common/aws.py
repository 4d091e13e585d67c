import json
import logging
import os
from datetime import datetime
from typing import Any, Mapping

import boto3
from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)


def get_s3_client():
    """Create S3 client."""
    return boto3.client("s3")


def get_bucket_name() -> str:
    """Return the configured bucket from S3_BUCKET_NAME."""
    bucket = os.environ.get("S3_BUCKET_NAME")
    if not bucket:
        raise ValueError("S3_BUCKET_NAME environment variable is not set")
    return bucket


def build_s3_key(prefix: str, timestamp: datetime, filename: str) -> str:
    """Build a partitioned S3 key path."""
    return (
        f"{prefix}/"
        f"year={timestamp.year:04d}/"
        f"month={timestamp.month:02d}/"
        f"day={timestamp.day:02d}/"
        f"{filename}"
    )


def upload_json_to_s3(document: Mapping[str, Any], bucket: str, key: str) -> None:
    """Upload an in-memory JSON document to S3."""
    body = json.dumps(document, ensure_ascii=False, indent=2, default=str)

    s3 = get_s3_client()
    s3.put_object(
        Bucket=bucket,
        Key=key,
        Body=body.encode("utf-8"),
        ContentType="application/json",
    )
    logger.info("Uploaded JSON document to s3://%s/%s", bucket, key)


def read_json_from_s3(bucket: str, key: str) -> Any:
    """Read and decode a JSON document from S3."""
    s3 = get_s3_client()
    response = s3.get_object(Bucket=bucket, Key=key)
    content = response["Body"].read()
    return json.loads(content.decode("utf-8"))
