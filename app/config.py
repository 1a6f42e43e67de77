"""Runtime settings, read from ``DRAFTLY_*`` environment variables or ``.env``."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="DRAFTLY_", env_file=".env", extra="ignore")

    log_level: str = "INFO"

    # Largest draft accepted by the HTTP surface (characters, not bytes)
    max_content_chars: int = Field(default=200_000, ge=1)

    # Where the post-creation form lives; returned to the client after hand-off
    editor_path: str = "/admin/blog/new"

    # Browsers cap session storage at roughly 5 MB per origin
    outbox_quota_bytes: int = Field(default=5 * 1024 * 1024, ge=1)

    # Reviews left open are dropped oldest-first beyond this many
    max_open_reviews: int = Field(default=1000, ge=1)

    words_per_minute: int = Field(default=200, ge=1)
    featured_image_base_url: str = "https://source.unsplash.com/1200x630/"

    preview_rate_limit: str = "30/minute"
    review_rate_limit: str = "20/minute"


settings = Settings()
