"""Tweet generation, history and deletion routes."""
from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Request

from tweetforge.core.errors import ServiceError, TweetForgeError
from tweetforge.schemas.common import ErrorResponse, SuccessResponse
from tweetforge.schemas.tweet import (
    GenerateRequest,
    GenerateResponse,
    TweetDetailResponse,
    TweetListResponse,
)
from tweetforge.services.tweet_service import TweetService, parse_limit

LOGGER = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api",
    tags=["tweets"],
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)


def get_tweet_service(request: Request) -> TweetService:
    return request.app.state.tweet_service


@router.post("/generate", response_model=GenerateResponse)
def generate_tweet(
    payload: GenerateRequest,
    tweet_service: TweetService = Depends(get_tweet_service),
) -> GenerateResponse:
    try:
        generated = tweet_service.generate(payload.message, payload.style)
    except TweetForgeError:
        raise
    except Exception as exc:  # noqa: BLE001
        LOGGER.exception("Error generating tweet")
        raise ServiceError(str(exc)) from exc
    return GenerateResponse(tweet=generated.text, id=generated.id)


@router.get("/tweets", response_model=TweetListResponse)
def list_tweets(
    limit: Optional[str] = None,
    tweet_service: TweetService = Depends(get_tweet_service),
) -> TweetListResponse:
    try:
        tweets = tweet_service.list_tweets(parse_limit(limit, tweet_service.default_limit))
    except Exception as exc:  # noqa: BLE001
        LOGGER.exception("Error fetching tweets")
        raise ServiceError(str(exc), public_message="Failed to fetch tweet history.") from exc
    return TweetListResponse(tweets=tweets)


@router.get("/tweets/{tweet_id}", response_model=TweetDetailResponse)
def get_tweet(
    tweet_id: str,
    tweet_service: TweetService = Depends(get_tweet_service),
) -> TweetDetailResponse:
    try:
        tweet = tweet_service.get_tweet(tweet_id)
    except TweetForgeError:
        raise
    except Exception as exc:  # noqa: BLE001
        LOGGER.exception("Error fetching tweet %s", tweet_id)
        raise ServiceError(str(exc), public_message="Failed to fetch tweet.") from exc
    return TweetDetailResponse(tweet=tweet)


@router.delete("/tweets/{tweet_id}", response_model=SuccessResponse)
def delete_tweet(
    tweet_id: str,
    tweet_service: TweetService = Depends(get_tweet_service),
) -> SuccessResponse:
    try:
        tweet_service.delete_tweet(tweet_id)
    except TweetForgeError:
        raise
    except Exception as exc:  # noqa: BLE001
        LOGGER.exception("Error deleting tweet %s", tweet_id)
        raise ServiceError(str(exc), public_message="Failed to delete tweet.") from exc
    return SuccessResponse()
