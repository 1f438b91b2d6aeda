"""Query context data model."""

from pydantic import BaseModel, ConfigDict, Field

from ..core.enums import Ordering


class QueryContext(BaseModel):
    """Parameters of one feed-rendering request.

    Built explicitly per render (see ``paging.urls.parse_archive_request``)
    so that no component reads ambient request state.

    ``page_size`` is deliberately unconstrained here; the classifier rejects
    non-positive values with ``InvalidConfiguration``.
    """

    ordering: Ordering = Ordering.DEFAULT
    requested_page: int = Field(default=0, ge=0)  # 0 means unspecified
    page_size: int
    total_visible_count: int = Field(..., ge=0)
    base_url: str = Field(..., min_length=1)

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    @property
    def is_archive_request(self) -> bool:
        """Whether the request asked for a stable, ascending archive page."""
        return self.ordering == Ordering.ASC_MODIFIED

    @property
    def effective_page(self) -> int:
        """1-based page number, treating an unspecified page as page 1."""
        return self.requested_page or 1
