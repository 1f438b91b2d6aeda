"""Unit tests for page classification."""

from __future__ import annotations

import pytest

from laakhay.feedhistory.core import Classification, InvalidConfiguration, Ordering
from laakhay.feedhistory.models import QueryContext
from laakhay.feedhistory.paging import PageClassifier, page_count


def context(
    total: int,
    page_size: int = 10,
    ordering: Ordering = Ordering.DEFAULT,
    page: int = 0,
) -> QueryContext:
    return QueryContext(
        ordering=ordering,
        requested_page=page,
        page_size=page_size,
        total_visible_count=total,
        base_url="http://example.org/feed/",
    )


class TestPageClassifier:
    """Test PageClassifier decisions."""

    def test_single_page_is_complete(self):
        decision = PageClassifier().classify(context(8))

        assert decision.classification == Classification.COMPLETE
        assert decision.prev_page_number is None
        assert not decision.has_prev_archive

    def test_exactly_one_page_is_complete(self):
        assert PageClassifier().classify(context(10)).classification == Classification.COMPLETE

    def test_complete_wins_over_archive_request(self):
        decision = PageClassifier().classify(context(5, ordering=Ordering.ASC_MODIFIED, page=2))
        assert decision.classification == Classification.COMPLETE

    def test_current_points_at_newest_page(self):
        decision = PageClassifier().classify(context(25))

        assert decision.classification == Classification.CURRENT
        assert decision.prev_page_number == 3
        assert decision.has_prev_archive

    def test_current_with_exact_multiple(self):
        assert PageClassifier().classify(context(30)).prev_page_number == 3

    def test_archive_page_links_to_previous(self):
        decision = PageClassifier().classify(context(25, ordering=Ordering.ASC_MODIFIED, page=2))

        assert decision.classification == Classification.ARCHIVED
        assert decision.prev_page_number == 1

    def test_first_archive_page_has_no_predecessor(self):
        for page in (0, 1):
            decision = PageClassifier().classify(
                context(25, ordering=Ordering.ASC_MODIFIED, page=page)
            )
            assert decision.classification == Classification.ARCHIVED
            assert decision.prev_page_number == 0
            assert not decision.has_prev_archive

    def test_default_ordering_ignores_page(self):
        decision = PageClassifier().classify(context(25, page=2))
        assert decision.classification == Classification.CURRENT
        assert decision.prev_page_number == 3

    @pytest.mark.parametrize("page_size", [0, -5])
    def test_non_positive_page_size_fails_fast(self, page_size):
        with pytest.raises(InvalidConfiguration, match="page_size must be positive"):
            PageClassifier().classify(context(25, page_size=page_size))

    def test_multi_page_is_archived_or_current(self):
        classifier = PageClassifier()
        for total in range(11, 61):
            for ordering in Ordering:
                for page in (0, 1, 2, 7):
                    decision = classifier.classify(context(total, ordering=ordering, page=page))
                    assert decision.classification in (
                        Classification.ARCHIVED,
                        Classification.CURRENT,
                    )
                    expected = (
                        Classification.ARCHIVED
                        if ordering == Ordering.ASC_MODIFIED
                        else Classification.CURRENT
                    )
                    assert decision.classification == expected


def test_page_count():
    assert page_count(25, 10) == 3
    assert page_count(30, 10) == 3
    assert page_count(31, 10) == 4
    assert page_count(1, 10) == 1
