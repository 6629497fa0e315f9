"""Repository for generated tweet rows."""
from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy.orm import Session

from tweetforge.models.tweet import Tweet

LOGGER = logging.getLogger(__name__)


class TweetRepository:
    def create_tweet(self, db: Session, topic: str, content: str, style: Optional[str] = None) -> Tweet:
        tweet = Tweet(topic=topic, content=content)
        if style is not None:
            tweet.style = style
        try:
            db.add(tweet)
            db.commit()
            db.refresh(tweet)
            return tweet
        except Exception as exc:  # noqa: BLE001
            db.rollback()
            LOGGER.error("DB insert failed for topic=%r (len=%s): %s", topic[:40], len(content), exc)
            raise

    def list_recent(self, db: Session, limit: int) -> list[Tweet]:
        return db.query(Tweet).order_by(Tweet.created_at.desc()).limit(limit).all()

    def get_by_id(self, db: Session, tweet_id: str) -> Tweet | None:
        return db.query(Tweet).filter(Tweet.id == tweet_id).one_or_none()

    def delete_by_id(self, db: Session, tweet_id: str) -> bool:
        try:
            removed = db.query(Tweet).filter(Tweet.id == tweet_id).delete(synchronize_session=False)
            db.commit()
        except Exception as exc:  # noqa: BLE001
            db.rollback()
            LOGGER.error("DB delete failed for tweet=%s: %s", tweet_id, exc)
            raise
        return removed > 0
