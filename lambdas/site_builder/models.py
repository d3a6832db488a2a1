# lambdas/site_builder/models.py
"""
Settings and data models for the site builder.
"""
from dataclasses import dataclass, field
from datetime import datetime
from functools import lru_cache
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Key conventions in the original media bucket
SOURCE_PREFIX = "pics/original/"
METADATA_FILENAME = "metadata.yml"
THUMBNAIL_PREFIX = "/pics/resized/360x225/"


class SiteBuilderSettings(BaseSettings):
    """
    Reads the builder's configuration from environment variables
    (or a local .env file when running outside Lambda).
    """
    model_config = SettingsConfigDict(env_file='.env', env_file_encoding='utf-8', extra='ignore')

    site_bucket: str = Field(..., alias='SITE_BUCKET')
    original_bucket: str = Field(..., alias='ORIGINAL_BUCKET')
    cloudfront_distribution_domain: str = Field(..., alias='CLOUDFRONT_DISTRIBUTION_DOMAIN')
    # Upper bound on simultaneous S3 requests during fan-out
    max_concurrency: int = Field(16, alias='MAX_CONCURRENCY', ge=1)


@lru_cache(maxsize=1)
def get_settings() -> SiteBuilderSettings:
    return SiteBuilderSettings()


@dataclass(frozen=True)
class RemoteObject:
    """A single entry from the original bucket listing."""
    key: str
    last_modified: datetime


@dataclass
class AlbumListing:
    """
    Albums in newest-first order and, at the same index, each album's
    .jpg keys (prefix stripped) in newest-first order.
    """
    albums: List[str] = field(default_factory=list)
    pictures: List[List[str]] = field(default_factory=list)


class AlbumMetadata(BaseModel):
    """
    Contents of an album's metadata.yml. Only the title is used when
    rendering; any other keys are kept as-is.
    """
    model_config = ConfigDict(extra='allow', coerce_numbers_to_str=True)

    title: Optional[str] = None


@dataclass
class UploadReport:
    """Outcome of one site upload batch."""
    uploaded: List[str] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)
    # remote key -> error message
    failed: Dict[str, str] = field(default_factory=dict)
