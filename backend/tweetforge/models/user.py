"""SQLAlchemy model for application users."""
from __future__ import annotations

import uuid

from sqlalchemy import Column, String, Text

from tweetforge.core.db import Base


class User(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    username = Column(String(255), unique=True, nullable=False, index=True)
    # stored as supplied, no hashing is applied anywhere
    password = Column(Text, nullable=False)
