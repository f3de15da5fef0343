"""Shared fixtures for storage tests."""

from __future__ import annotations

import io
from typing import Any

import pytest
from botocore.exceptions import ClientError


def _missing(operation: str, key: str) -> ClientError:
    code = "404" if operation == "HeadObject" else "NoSuchKey"
    return ClientError({"Error": {"Code": code, "Message": f"{key} does not exist"}}, operation)


class FakePaginator:
    def __init__(self, objects: dict[str, bytes], page_size: int) -> None:
        self._objects = objects
        self._page_size = page_size

    def paginate(self, Bucket: str) -> list[dict[str, Any]]:  # noqa: N803
        keys = sorted(self._objects)
        pages = [keys[i : i + self._page_size] for i in range(0, len(keys), self._page_size)] or [[]]
        return [{"Contents": [{"Key": key} for key in page]} if page else {} for page in pages]


class FakeS3Client:
    def __init__(self, page_size: int = 2) -> None:
        self.objects: dict[str, bytes] = {}
        self.calls: list[str] = []
        self.error: ClientError | None = None
        self._page_size = page_size

    def _record(self, name: str) -> None:
        self.calls.append(name)
        if self.error is not None:
            raise self.error

    def get_paginator(self, name: str) -> FakePaginator:
        assert name == "list_objects_v2"
        self._record("list_objects_v2")
        return FakePaginator(self.objects, self._page_size)

    def get_object(self, Bucket: str, Key: str) -> dict[str, Any]:  # noqa: N803
        self._record("get_object")
        if Key not in self.objects:
            raise _missing("GetObject", Key)
        return {"Body": io.BytesIO(self.objects[Key])}

    def put_object(self, Bucket: str, Key: str, Body: bytes, **_: Any) -> dict[str, Any]:  # noqa: N803
        self._record("put_object")
        self.objects[Key] = Body
        return {}

    def head_object(self, Bucket: str, Key: str) -> dict[str, Any]:  # noqa: N803
        self._record("head_object")
        if Key not in self.objects:
            raise _missing("HeadObject", Key)
        return {}

    def delete_object(self, Bucket: str, Key: str) -> dict[str, Any]:  # noqa: N803
        self._record("delete_object")
        self.objects.pop(Key, None)
        return {}


@pytest.fixture
def fake_s3_client() -> FakeS3Client:
    """In-process stand-in for a boto3 S3 client."""
    return FakeS3Client()
