"""Custom SQLAlchemy types used by the persistence layer."""
from __future__ import annotations

import json
from datetime import UTC, datetime
from typing import Iterable, List, Optional

from sqlalchemy.dialects import postgresql
from sqlalchemy.types import JSON, DateTime, Text, TypeDecorator


class StringArray(TypeDecorator[List[str]]):
    """Store a list of strings as a native ``TEXT[]`` on PostgreSQL.

    Falls back to JSON storage on dialects without array support
    (e.g. SQLite during unit tests).
    """

    cache_ok = True
    impl = JSON

    def load_dialect_impl(self, dialect):  # type: ignore[override]
        if dialect.name == "postgresql":
            return dialect.type_descriptor(postgresql.ARRAY(Text()))
        return dialect.type_descriptor(JSON(none_as_null=True))

    def process_bind_param(self, value, dialect):  # type: ignore[override]
        if value is None:
            return None
        if isinstance(value, str) or not isinstance(value, Iterable):
            raise TypeError(
                f"StringArray expects an iterable of strings, got {type(value)!r}"
            )
        return [str(v) for v in value]

    def process_result_value(self, value, dialect):  # type: ignore[override]
        if value is None:
            return None
        if isinstance(value, str):
            try:
                parsed = json.loads(value)
            except json.JSONDecodeError:
                # Postgres array literal "{a,b}"
                stripped = value.strip("{}")
                if not stripped:
                    return []
                return [part.strip('"') for part in stripped.split(",")]
            if isinstance(parsed, list):
                return [str(v) for v in parsed]
            return [str(parsed)]
        return [str(v) for v in value]


class UTCDateTime(TypeDecorator[datetime]):
    """Timezone-aware timestamp that always round-trips as UTC.

    SQLite drops tzinfo on storage; values read back are re-tagged as UTC so
    comparisons against ``now_utc()`` never mix naive and aware datetimes.
    """

    cache_ok = True
    impl = DateTime(timezone=True)

    def process_bind_param(self, value: Optional[datetime], dialect):  # type: ignore[override]
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value.astimezone(UTC)

    def process_result_value(self, value: Optional[datetime], dialect):  # type: ignore[override]
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value.astimezone(UTC)
