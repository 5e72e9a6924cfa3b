"""Unit tests for listing and pagination primitives.

Tests cover:
- PageRequest validation (page >= 0, limit > 0)
- resolve_page_request choosing between full and paged listings
- PagedListing page arithmetic (total_pages, has_next, has_previous)
- paginate slicing, including pages past the end
- fetch_listing dispatch to store-side offset/limit
"""

import pytest

from src.core.enums import ErrorCode
from src.core.errors import ValidationError
from src.core.pagination import (
    FullListing,
    PagedListing,
    PageRequest,
    fetch_listing,
    paginate,
    resolve_page_request,
)
from src.core.result import Failure, Success


@pytest.mark.unit
class TestPageRequest:
    """Test PageRequest.create validation."""

    def test_valid_request_computes_offset(self):
        result = PageRequest.create(page=3, limit=4)

        assert isinstance(result, Success)
        assert result.value.offset == 12

    def test_first_page_has_zero_offset(self):
        result = PageRequest.create(page=0, limit=20)

        assert isinstance(result, Success)
        assert result.value.offset == 0

    def test_negative_page_rejected(self):
        result = PageRequest.create(page=-1, limit=10)

        assert isinstance(result, Failure)
        assert isinstance(result.error, ValidationError)
        assert result.error.code == ErrorCode.INVALID_PAGINATION
        assert result.error.field == "page"

    @pytest.mark.parametrize("limit", [0, -5])
    def test_non_positive_limit_rejected(self, limit):
        result = PageRequest.create(page=0, limit=limit)

        assert isinstance(result, Failure)
        assert result.error.field == "limit"


@pytest.mark.unit
class TestResolvePageRequest:
    """Test the choice between a full listing and a page."""

    def test_no_parameters_selects_full_listing(self):
        assert resolve_page_request(None, None) == Success(value=None)

    def test_page_only_uses_default_limit(self):
        result = resolve_page_request(2, None, default_limit=7)

        assert result == Success(value=PageRequest(page=2, limit=7))

    def test_limit_only_starts_at_first_page(self):
        result = resolve_page_request(None, 5)

        assert result == Success(value=PageRequest(page=0, limit=5))

    def test_invalid_limit_propagates_failure(self):
        result = resolve_page_request(0, 0)

        assert isinstance(result, Failure)
        assert result.error.field == "limit"


@pytest.mark.unit
class TestPagedListing:
    """Test page arithmetic."""

    @pytest.mark.parametrize(
        ("total", "limit", "expected_pages"),
        [(0, 10, 0), (1, 10, 1), (10, 10, 1), (11, 10, 2), (45, 20, 3)],
    )
    def test_total_pages_is_ceiling(self, total, limit, expected_pages):
        listing = PagedListing(items=[], page=0, limit=limit, total_elements=total)

        assert listing.total_pages == expected_pages

    def test_navigation_flags_in_middle_page(self):
        listing = PagedListing(items=[1], page=1, limit=1, total_elements=3)

        assert listing.has_next is True
        assert listing.has_previous is True

    def test_navigation_flags_on_last_page(self):
        listing = PagedListing(items=[3], page=2, limit=1, total_elements=3)

        assert listing.has_next is False
        assert listing.has_previous is True

    def test_map_keeps_page_metadata(self):
        listing = PagedListing(items=[1, 2], page=0, limit=2, total_elements=5)

        mapped = listing.map(str)

        assert mapped.items == ["1", "2"]
        assert (mapped.page, mapped.limit, mapped.total_elements) == (0, 2, 5)

    def test_full_listing_map(self):
        assert FullListing(items=[1, 2]).map(lambda x: x * 10).items == [10, 20]


@pytest.mark.unit
class TestPaginate:
    """Test in-memory slicing."""

    @pytest.mark.parametrize(
        ("page", "limit", "expected"),
        [
            (0, 2, ["a", "b"]),
            (1, 2, ["c", "d"]),
            (2, 2, ["e"]),
            (3, 2, []),
            (0, 10, ["a", "b", "c", "d", "e"]),
        ],
    )
    def test_page_size_is_clipped_to_collection(self, page, limit, expected):
        items = ["a", "b", "c", "d", "e"]

        listing = paginate(items, PageRequest(page=page, limit=limit))

        assert listing.items == expected
        assert listing.total_elements == 5


@pytest.mark.unit
class TestFetchListing:
    """Test dispatch to store listing and count coroutines."""

    @pytest.mark.asyncio
    async def test_full_listing_fetches_without_window(self):
        calls = []

        async def fetch(**kwargs):
            calls.append(kwargs)
            return ["x", "y"]

        async def count():
            raise AssertionError("count must not be called for full listings")

        listing = await fetch_listing(None, fetch, count)

        assert isinstance(listing, FullListing)
        assert listing.items == ["x", "y"]
        assert calls == [{}]

    @pytest.mark.asyncio
    async def test_paged_listing_passes_offset_and_limit(self):
        calls = []

        async def fetch(**kwargs):
            calls.append(kwargs)
            return ["c"]

        async def count():
            return 5

        listing = await fetch_listing(PageRequest(page=2, limit=1), fetch, count)

        assert isinstance(listing, PagedListing)
        assert calls == [{"offset": 2, "limit": 1}]
        assert listing.items == ["c"]
        assert listing.total_elements == 5

    @pytest.mark.asyncio
    async def test_page_past_end_skips_store_fetch(self):
        async def fetch(**kwargs):
            raise AssertionError("fetch must not run for a page past the end")

        async def count():
            return 7

        listing = await fetch_listing(
            PageRequest(page=10**18, limit=100), fetch, count
        )

        assert listing.items == []
        assert listing.total_elements == 7
        assert listing.page == 10**18
        assert listing.has_next is False
        assert listing.has_previous is True

    @pytest.mark.asyncio
    async def test_oversized_limit_is_clamped_to_remaining_rows(self):
        calls = []

        async def fetch(**kwargs):
            calls.append(kwargs)
            return ["a", "b", "c"]

        async def count():
            return 3

        listing = await fetch_listing(PageRequest(page=0, limit=10**19), fetch, count)

        assert calls == [{"offset": 0, "limit": 3}]
        assert listing.limit == 10**19
        assert listing.total_pages == 1
