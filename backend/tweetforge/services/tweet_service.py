"""Domain service orchestrating tweet generation, listing and deletion."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from tweetforge.core.errors import ConfigurationError, TweetNotFoundError, UpstreamError
from tweetforge.repositories.storage import DEFAULT_LIMIT, Storage
from tweetforge.schemas.tweet import TweetOut
from tweetforge.services.inference_client import InferenceClient
from tweetforge.services.tweet_text import normalize_response

LOGGER = logging.getLogger(__name__)

MAX_LIMIT = 1000


@dataclass(frozen=True)
class GeneratedTweet:
    id: str
    text: str


def parse_limit(raw: Optional[str], default: int = DEFAULT_LIMIT) -> int:
    """Parse the ``limit`` query value.

    Only ASCII digits are accepted; anything else, and zero, falls back to
    ``default``. Values above MAX_LIMIT are capped.
    """
    if raw is None:
        return default
    raw = raw.strip()
    if not (raw.isascii() and raw.isdigit()):
        return default
    limit = int(raw)
    if limit == 0:
        return default
    return min(limit, MAX_LIMIT)


class TweetService:
    def __init__(
        self,
        storage: Storage,
        inference_client: Optional[InferenceClient],
        default_style: str = "default",
        default_limit: int = DEFAULT_LIMIT,
    ) -> None:
        self.storage = storage
        self.inference_client = inference_client
        self.default_style = default_style
        self.default_limit = default_limit

    def generate(self, message: str, style: Optional[str] = None) -> GeneratedTweet:
        if self.inference_client is None:
            LOGGER.error("Missing inference API configuration")
            raise ConfigurationError("inference client was not configured at startup")

        LOGGER.info("📥 Generating tweet for topic=%r", message[:80])
        body = self.inference_client.complete(self.inference_client.build_prompt(message))
        text = normalize_response(body)
        if not text:
            raise UpstreamError("inference response contained no text")

        # persisted only once the upstream call fully succeeded
        saved = self.storage.create_tweet(topic=message, content=text, style=style or self.default_style)
        LOGGER.info("✅ Stored tweet id=%s (%d chars)", saved.id, len(text))
        return GeneratedTweet(id=saved.id, text=text)

    def list_tweets(self, limit: Optional[int] = None) -> list[TweetOut]:
        return self.storage.get_tweets(limit or self.default_limit)

    def get_tweet(self, tweet_id: str) -> TweetOut:
        tweet = self.storage.get_tweet(tweet_id)
        if tweet is None:
            raise TweetNotFoundError(f"tweet {tweet_id} does not exist")
        return tweet

    def delete_tweet(self, tweet_id: str) -> None:
        if not self.storage.delete_tweet(tweet_id):
            raise TweetNotFoundError(f"tweet {tweet_id} does not exist")
        LOGGER.info("🗑️ Deleted tweet id=%s", tweet_id)
