"""Pydantic schemas for tweet generation, listing and deletion."""
from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, StrictStr


class GenerateRequest(BaseModel):
    message: StrictStr = Field(..., min_length=1, description="Topic the tweet should be about")
    style: Optional[StrictStr] = Field(default=None, description="Stored with the tweet, does not affect the prompt")


class TweetOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    topic: str
    content: str
    style: Optional[str] = None
    created_at: datetime = Field(
        ...,
        validation_alias=AliasChoices("created_at", "createdAt"),
        serialization_alias="createdAt",
    )


class GenerateResponse(BaseModel):
    success: bool = True
    tweet: str
    id: str


class TweetListResponse(BaseModel):
    success: bool = True
    tweets: List[TweetOut]


class TweetDetailResponse(BaseModel):
    success: bool = True
    tweet: TweetOut
