"""Redis-backed record store. Records are written once with SET NX and never expire."""

import base64
import json
from typing import Any, Dict, Optional

from book_archive.domain.exceptions import AlreadyExistsInArchiveError
from book_archive.domain.fingerprint import Fingerprint
from book_archive.domain.models.record import BookRecord
from book_archive.infrastructure.cache.redis_client import RedisClient

RECORD_STORE_PREFIX = "archive:book:"
_BYTES_FIELDS = ("title", "author", "content_ref")


def _b64(value: bytes) -> str:
    return base64.b64encode(value).decode("ascii")


def _serialize(record: BookRecord) -> str:
    payload: Dict[str, Any] = record.to_dict()
    for field in _BYTES_FIELDS:
        payload[field] = _b64(payload[field])
    return json.dumps(payload)


def _deserialize(raw: str) -> BookRecord:
    data = json.loads(raw)
    return BookRecord(
        title=base64.b64decode(data["title"]),
        author=base64.b64decode(data["author"]),
        content_ref=base64.b64decode(data["content_ref"]),
        submitter=data["submitter"],
        created_at=int(data["created_at"]),
    )


class RedisRecordStore:
    """Implements RecordStore protocol on Redis. SET NX gives atomic insert-if-absent across processes."""

    def __init__(self, redis_client: RedisClient, key_prefix: str = RECORD_STORE_PREFIX) -> None:
        self._redis = redis_client
        self._prefix = key_prefix

    def _key(self, fp: Fingerprint) -> str:
        return f"{self._prefix}{fp.hex}"

    async def insert(self, fp: Fingerprint, record: BookRecord) -> None:
        stored = await self._redis.set_nx(self._key(fp), _serialize(record))
        if not stored:
            raise AlreadyExistsInArchiveError(f"Book already exists in archive: {fp.hex}")

    async def get(self, fp: Fingerprint) -> Optional[BookRecord]:
        raw = await self._redis.get(self._key(fp))
        if not raw:
            return None
        return _deserialize(raw)

    async def exists(self, fp: Fingerprint) -> bool:
        return await self._redis.exists(self._key(fp))
