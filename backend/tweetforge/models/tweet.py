"""SQLAlchemy model for generated tweets."""
from __future__ import annotations

import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, String, Text
from sqlalchemy.dialects import mysql

from tweetforge.core.db import Base

DEFAULT_STYLE = "default"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Tweet(Base):
    __tablename__ = "tweets"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    topic = Column(Text, nullable=False)
    content = Column(Text, nullable=False)
    style = Column(Text, default=DEFAULT_STYLE)
    # plain MySQL DATETIME drops sub-second precision
    created_at = Column(
        DateTime(timezone=True).with_variant(mysql.DATETIME(fsp=6), "mysql"),
        nullable=False,
        default=_utcnow,
        index=True,
    )
