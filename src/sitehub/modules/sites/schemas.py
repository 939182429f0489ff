"""Pydantic schemas for site resolution."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from sitehub.core.constants import MAX_SLUG_LENGTH


class NavLink(BaseModel):
    """A single navigation bar entry."""

    href: str
    label: str


class FooterSettings(BaseModel):
    """Footer view-model after merging site and global settings."""

    site_name: str
    about_text: str
    logo_path: str | None = None
    instagram_url: str | None = None
    linkedin_url: str | None = None
    facebook_url: str | None = None
    twitter_url: str | None = None
    youtube_url: str | None = None


class SiteContext(BaseModel):
    """Everything a site page needs to render its chrome.

    Built per request by SiteResolver and never persisted.
    """

    site_id: UUID
    slug: str
    name: str
    primary_color: str
    logo_path: str | None = None
    navigation: list[NavLink]
    footer: FooterSettings


class SiteSummary(BaseModel):
    """Minimal site listing entry."""

    id: UUID
    slug: str
    name: str

    model_config = ConfigDict(from_attributes=True)


class SiteListResponse(BaseModel):
    """Schema for listing sites."""

    items: list[SiteSummary]


class CurrentSiteRequest(BaseModel):
    """Schema for switching the current site."""

    slug: str = Field(..., min_length=1, max_length=MAX_SLUG_LENGTH, pattern=r"^[^/\s]+$")


class CurrentSiteResponse(BaseModel):
    """The site remembered for this browser session."""

    site_id: str
    slug: str
