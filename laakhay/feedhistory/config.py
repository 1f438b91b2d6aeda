"""Feed history settings loaded from environment variables."""

from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from .core.enums import FeedFormat
from .paging.urls import ArchiveParams


class FeedHistorySettings(BaseSettings):
    """Settings for RFC5005 metadata generation.

    ``page_size`` mirrors the host's items-per-feed setting. It is not
    validated here: a non-positive value disables history metadata for each
    render instead of failing at startup.
    """

    page_size: int = 10
    default_format: FeedFormat = FeedFormat.RSS2
    canonical_origin: Optional[str] = None  # e.g. "https://example.org"
    boundary_timeout: Optional[float] = 5.0  # seconds, None or 0 disables
    fingerprint_strategy: Literal["hash", "version"] = "hash"

    # Archive URL contract
    order_param: str = "order"
    orderby_param: str = "orderby"
    page_param: str = "paged"
    token_param: str = "modified"

    model_config = SettingsConfigDict(env_prefix="FEEDHISTORY_", extra="ignore")

    def archive_params(self) -> ArchiveParams:
        return ArchiveParams(
            order=self.order_param,
            orderby=self.orderby_param,
            page=self.page_param,
            token=self.token_param,
        )
