"""Archive query-parameter contract.

This module owns the mapping between archive requests and URLs: which
query parameters mark a request as an archive page, how the canonical
current-feed URL is derived from a request URL, and how those parameters
are written back. Parsing an emitted prev-archive URL must classify it as
an archive request again.
"""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from ..core.enums import Ordering


@dataclass(frozen=True)
class ArchiveParams:
    """Query-parameter names and values of the archive URL contract.

    Attributes:
        order: Sort-direction parameter name
        orderby: Sort-field parameter name
        page: Page-number parameter name (omitted for page 1)
        token: Cache-busting token parameter name
        order_value: Sort direction marking an archive request
        orderby_value: Sort field marking an archive request
    """

    order: str = "order"
    orderby: str = "orderby"
    page: str = "paged"
    token: str = "modified"
    order_value: str = "ASC"
    orderby_value: str = "modified"

    @property
    def names(self) -> frozenset[str]:
        return frozenset((self.order, self.orderby, self.page, self.token))


@dataclass(frozen=True)
class ArchiveRequest:
    """Archive-relevant parts of a request URL.

    Attributes:
        ordering: ASC_MODIFIED only if both ordering flags are present
        requested_page: Page number, 0 if unspecified or malformed
        token: Token carried by the URL, if any
        base_url: Canonical feed URL without archive parameters
    """

    ordering: Ordering
    requested_page: int
    token: str | None
    base_url: str


def _parse_page(value: str | None) -> int:
    if value is None:
        return 0
    try:
        page = int(value.strip())
    except ValueError:
        return 0
    return page if page > 0 else 0


def canonical_feed_url(
    url: str,
    params: ArchiveParams | None = None,
    canonical_origin: str | None = None,
) -> str:
    """Strip archive parameters from a feed URL.

    Other query parameters are kept in their original order. If
    ``canonical_origin`` is given, its scheme and host replace the URL's.
    """
    params = params or ArchiveParams()
    parts = urlsplit(url)
    scheme, netloc = parts.scheme, parts.netloc
    if canonical_origin:
        origin = urlsplit(canonical_origin)
        scheme, netloc = origin.scheme or scheme, origin.netloc or netloc

    kept = [
        (key, value)
        for key, value in parse_qsl(parts.query, keep_blank_values=True)
        if key not in params.names
    ]
    return urlunsplit((scheme, netloc, parts.path, urlencode(kept), parts.fragment))


def parse_archive_request(
    url: str,
    params: ArchiveParams | None = None,
    canonical_origin: str | None = None,
) -> ArchiveRequest:
    """Extract the archive request carried by a feed URL."""
    params = params or ArchiveParams()
    query = dict(parse_qsl(urlsplit(url).query, keep_blank_values=True))

    is_archive = (
        query.get(params.order, "").upper() == params.order_value.upper()
        and query.get(params.orderby, "") == params.orderby_value
    )
    return ArchiveRequest(
        ordering=Ordering.ASC_MODIFIED if is_archive else Ordering.DEFAULT,
        requested_page=_parse_page(query.get(params.page)),
        token=query.get(params.token) or None,
        base_url=canonical_feed_url(url, params, canonical_origin),
    )


def with_query_args(url: str, args: list[tuple[str, str]]) -> str:
    """Add or replace query arguments, appending new ones in the given order."""
    parts = urlsplit(url)
    names = {key for key, _ in args}
    pairs = [
        (key, value)
        for key, value in parse_qsl(parts.query, keep_blank_values=True)
        if key not in names
    ]
    pairs.extend(args)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, urlencode(pairs), parts.fragment))
