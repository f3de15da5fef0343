"""Object-storage MapStore implementation on top of boto3."""

from __future__ import annotations

import asyncio
from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from cartographer.common import create_logger
from cartographer.utils.functools.models import Result, fail, succeed

from .models import InternalFailure, NotFoundFailure, S3Credentials, internal_failure, not_found

logger = create_logger("storage.s3")

_MISSING_CODES = frozenset({"NoSuchKey", "404", "NotFound"})


class S3MapStore:
    """One object per key in a single bucket; values are UTF-8 text."""

    def __init__(self, client: Any, bucket_name: str) -> None:  # noqa: ANN401
        self._client = client
        self._bucket = bucket_name

    async def list(self) -> Result[list[str], InternalFailure]:
        try:
            keys = await asyncio.to_thread(self._list_keys)
        except (BotoCoreError, ClientError) as exc:
            logger.error("Bucket listing failed", bucket=self._bucket, error=str(exc))
            return fail(internal_failure(f"Failed to list bucket '{self._bucket}'", exc))
        return succeed(keys)

    async def read(self, key: str) -> Result[str, NotFoundFailure | InternalFailure]:
        try:
            content = await asyncio.to_thread(self._get_text, key)
        except ClientError as exc:
            if _is_missing(exc):
                return fail(not_found(key))
            logger.error("Object read failed", bucket=self._bucket, key=key, error=str(exc))
            return fail(internal_failure(f"Failed to read '{key}'", exc))
        except (BotoCoreError, UnicodeDecodeError) as exc:
            logger.error("Object read failed", bucket=self._bucket, key=key, error=str(exc))
            return fail(internal_failure(f"Failed to read '{key}'", exc))
        return succeed(content)

    async def write(self, key: str, value: str) -> Result[None, InternalFailure]:
        try:
            await asyncio.to_thread(
                self._client.put_object,
                Bucket=self._bucket,
                Key=key,
                Body=value.encode("utf-8"),
                ContentType="application/json; charset=utf-8",
            )
        except (BotoCoreError, ClientError) as exc:
            logger.error("Object write failed", bucket=self._bucket, key=key, error=str(exc))
            return fail(internal_failure(f"Failed to write '{key}'", exc))
        return succeed()

    async def destroy(self, key: str) -> Result[None, NotFoundFailure | InternalFailure]:
        # delete_object succeeds on missing keys, so check existence first
        try:
            await asyncio.to_thread(self._client.head_object, Bucket=self._bucket, Key=key)
            await asyncio.to_thread(self._client.delete_object, Bucket=self._bucket, Key=key)
        except ClientError as exc:
            if _is_missing(exc):
                return fail(not_found(key))
            logger.error("Object removal failed", bucket=self._bucket, key=key, error=str(exc))
            return fail(internal_failure(f"Failed to destroy '{key}'", exc))
        except BotoCoreError as exc:
            logger.error("Object removal failed", bucket=self._bucket, key=key, error=str(exc))
            return fail(internal_failure(f"Failed to destroy '{key}'", exc))
        return succeed()

    def _list_keys(self) -> list[str]:
        paginator = self._client.get_paginator("list_objects_v2")
        keys: list[str] = []
        for page in paginator.paginate(Bucket=self._bucket):
            keys.extend(entry["Key"] for entry in page.get("Contents", []))
        return keys

    def _get_text(self, key: str) -> str:
        response = self._client.get_object(Bucket=self._bucket, Key=key)
        return response["Body"].read().decode("utf-8")


def _is_missing(error: ClientError) -> bool:
    return str(error.response.get("Error", {}).get("Code")) in _MISSING_CODES


def _create_client(creds: S3Credentials) -> Any:  # noqa: ANN401
    return boto3.client(
        "s3",
        aws_access_key_id=creds.access_key_id,
        aws_secret_access_key=creds.secret_access_key.get_secret_value(),
        region_name=creds.region,
        endpoint_url=creds.endpoint_url,
    )


async def create_s3_map_store(
    creds: S3Credentials,
    bucket_name: str,
    client: Any | None = None,  # noqa: ANN401
) -> S3MapStore:
    if client is None:
        client = await asyncio.to_thread(_create_client, creds)
    logger.debug("S3 store ready", bucket=bucket_name, endpoint=creds.endpoint_url)
    return S3MapStore(client, bucket_name)
