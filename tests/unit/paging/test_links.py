"""Unit tests for archive link assembly."""

from __future__ import annotations

from laakhay.feedhistory.core import Classification, LinkRelation, Ordering
from laakhay.feedhistory.paging import (
    ArchiveLinkBuilder,
    ArchiveParams,
    PageDecision,
    parse_archive_request,
)

BASE = "http://example.org/feed/"


class TestPrevArchiveUrl:
    """Test prev-archive URL construction."""

    def test_page_number_included_after_page_one(self):
        url = ArchiveLinkBuilder().prev_archive_url(BASE, 3, "tok")
        assert url == "http://example.org/feed/?order=ASC&orderby=modified&modified=tok&paged=3"

    def test_page_one_has_no_page_number(self):
        url = ArchiveLinkBuilder().prev_archive_url(BASE, 1, "tok")
        assert url == "http://example.org/feed/?order=ASC&orderby=modified&modified=tok"
        assert "paged" not in url

    def test_existing_query_preserved(self):
        url = ArchiveLinkBuilder().prev_archive_url(BASE + "?cat=5", 2, "tok")
        assert url == (
            "http://example.org/feed/?cat=5&order=ASC&orderby=modified&modified=tok&paged=2"
        )

    def test_custom_params(self):
        builder = ArchiveLinkBuilder(ArchiveParams(page="p", token="v"))
        url = builder.prev_archive_url(BASE, 2, "tok")
        assert url == "http://example.org/feed/?order=ASC&orderby=modified&v=tok&p=2"

    def test_round_trip_is_archive_request(self):
        builder = ArchiveLinkBuilder()
        for page in (1, 2, 9):
            request = parse_archive_request(builder.prev_archive_url(BASE, page, "tok"))
            assert request.ordering == Ordering.ASC_MODIFIED
            assert request.token == "tok"
            assert request.base_url == BASE
            assert (request.requested_page or 1) == page


class TestBuild:
    """Test the link set for each classification."""

    def test_complete_has_no_links(self):
        links = ArchiveLinkBuilder().build(PageDecision(Classification.COMPLETE), BASE, "tok")
        assert links == ()

    def test_current_has_prev_archive_only(self):
        links = ArchiveLinkBuilder().build(
            PageDecision(Classification.CURRENT, prev_page_number=3), BASE, "tok"
        )
        assert [link.relation for link in links] == [LinkRelation.PREV_ARCHIVE]
        assert links[0].target_url.endswith("modified=tok&paged=3")

    def test_archived_has_current_and_prev_archive(self):
        links = ArchiveLinkBuilder().build(
            PageDecision(Classification.ARCHIVED, prev_page_number=1), BASE, "tok"
        )
        assert [link.relation for link in links] == [
            LinkRelation.CURRENT,
            LinkRelation.PREV_ARCHIVE,
        ]
        assert links[0].target_url == BASE
        assert "paged" not in links[1].target_url

    def test_first_archive_page_links_only_to_current(self):
        links = ArchiveLinkBuilder().build(
            PageDecision(Classification.ARCHIVED, prev_page_number=0), BASE, "tok"
        )
        assert [link.relation for link in links] == [LinkRelation.CURRENT]

    def test_missing_fingerprint_omits_prev_archive(self):
        links = ArchiveLinkBuilder().build(
            PageDecision(Classification.ARCHIVED, prev_page_number=2), BASE, None
        )
        assert [link.relation for link in links] == [LinkRelation.CURRENT]

    def test_idempotent(self):
        builder = ArchiveLinkBuilder()
        decision = PageDecision(Classification.ARCHIVED, prev_page_number=4)
        assert builder.build(decision, BASE, "tok") == builder.build(decision, BASE, "tok")
        assert [link.target_url for link in builder.build(decision, BASE, "tok")] == [
            link.target_url for link in ArchiveLinkBuilder().build(decision, BASE, "tok")
        ]
