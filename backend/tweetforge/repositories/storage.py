"""Storage façade: the only way the rest of the app touches the database."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from sqlalchemy.orm import sessionmaker

from tweetforge.repositories.tweet_repository import TweetRepository
from tweetforge.repositories.user_repository import UserRepository
from tweetforge.schemas.auth import UserCreate, UserOut
from tweetforge.schemas.tweet import TweetOut

DEFAULT_LIMIT = 50


class Storage(ABC):
    """Capability set for tweets and users."""

    @abstractmethod
    def get_user(self, user_id: str) -> Optional[UserOut]: ...

    @abstractmethod
    def get_user_by_username(self, username: str) -> Optional[UserOut]: ...

    @abstractmethod
    def create_user(self, user: UserCreate) -> UserOut: ...

    @abstractmethod
    def create_tweet(self, topic: str, content: str, style: Optional[str] = None) -> TweetOut: ...

    @abstractmethod
    def get_tweets(self, limit: int = DEFAULT_LIMIT) -> list[TweetOut]: ...

    @abstractmethod
    def get_tweet(self, tweet_id: str) -> Optional[TweetOut]: ...

    @abstractmethod
    def delete_tweet(self, tweet_id: str) -> bool: ...


class DatabaseStorage(Storage):
    """SQLAlchemy-backed storage. Each call runs in its own short-lived session."""

    def __init__(self, session_factory: sessionmaker) -> None:
        self.session_factory = session_factory
        self.tweet_repo = TweetRepository()
        self.user_repo = UserRepository()

    def get_user(self, user_id: str) -> Optional[UserOut]:
        with self.session_factory() as db:
            user = self.user_repo.get_by_id(db, user_id)
            return UserOut.model_validate(user) if user else None

    def get_user_by_username(self, username: str) -> Optional[UserOut]:
        with self.session_factory() as db:
            user = self.user_repo.get_by_username(db, username)
            return UserOut.model_validate(user) if user else None

    def create_user(self, user: UserCreate) -> UserOut:
        with self.session_factory() as db:
            return UserOut.model_validate(self.user_repo.create_user(db, user))

    def create_tweet(self, topic: str, content: str, style: Optional[str] = None) -> TweetOut:
        with self.session_factory() as db:
            return TweetOut.model_validate(self.tweet_repo.create_tweet(db, topic, content, style))

    def get_tweets(self, limit: int = DEFAULT_LIMIT) -> list[TweetOut]:
        with self.session_factory() as db:
            return [TweetOut.model_validate(t) for t in self.tweet_repo.list_recent(db, limit)]

    def get_tweet(self, tweet_id: str) -> Optional[TweetOut]:
        with self.session_factory() as db:
            tweet = self.tweet_repo.get_by_id(db, tweet_id)
            return TweetOut.model_validate(tweet) if tweet else None

    def delete_tweet(self, tweet_id: str) -> bool:
        with self.session_factory() as db:
            return self.tweet_repo.delete_by_id(db, tweet_id)
