"""Data models for podcasts, episodes and feed options."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

LockedFlag = Literal["yes", "no"]


class Category(BaseModel):
    """An iTunes category, optionally with a single sub-category."""

    model_config = ConfigDict(frozen=True)

    text: str
    subtext: str | None = None


class Podcast(BaseModel):
    """Channel-level metadata for a podcast feed."""

    model_config = ConfigDict(frozen=True)

    id: str  # Emitted verbatim as podcast:guid
    title: str
    description: str | None = None
    podcast_slug: str
    image_url: str | None = None
    language: str | None = "en-us"
    created_at: datetime
    updated_at: datetime | None = None
    owner: str | None = None
    explicit: bool = False
    itunes_owner_name: str | None = None
    itunes_owner_email: str | None = None
    locked: LockedFlag | None = "no"
    itunes_category: list[Category] = Field(default_factory=list)

    @property
    def last_modified(self) -> datetime:
        """Most recent modification time (updated_at, else created_at)."""
        return self.updated_at or self.created_at


class Episode(BaseModel):
    """A single podcast episode rendered as an RSS <item>."""

    model_config = ConfigDict(frozen=True)

    guid: str  # Opaque permanent identifier, emitted verbatim
    title: str
    description: str | None = None
    publication_date: datetime
    episode_slug: str
    audio_url: str
    audio_length: int  # File size in bytes
    image_url: str | None = None  # Overrides the podcast image


class FeedOptions(BaseModel):
    """Options controlling how canonical feed links are built."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    site_url: str = Field(alias="siteUrl", description="Base URL of the site hosting the podcast")
