"""
Tests for pagination metadata helpers.
"""

from types import SimpleNamespace

import pytest

from jobboard.utils.pagination import build_pagination_meta, build_search_pagination


@pytest.mark.unit
class TestBuildPaginationMeta:
    """Test build_pagination_meta."""

    def test_first_page(self):
        meta = build_pagination_meta(total=95, page=1, limit=10)

        assert meta.total_pages == 10
        assert meta.has_next is True
        assert meta.has_previous is False
        assert meta.next_page == 2
        assert meta.previous_page is None

    def test_last_page(self):
        meta = build_pagination_meta(total=95, page=10, limit=10)

        assert meta.total_pages == 10
        assert meta.has_next is False
        assert meta.has_previous is True
        assert meta.next_page is None
        assert meta.previous_page == 9

    def test_middle_page(self):
        meta = build_pagination_meta(total=30, page=2, limit=10)

        assert meta.next_page == 3
        assert meta.previous_page == 1

    def test_exact_multiple(self):
        meta = build_pagination_meta(total=100, page=10, limit=10)

        assert meta.total_pages == 10
        assert meta.has_next is False

    def test_empty_result(self):
        meta = build_pagination_meta(total=0, page=1, limit=10)

        assert meta.total_pages == 0
        assert meta.has_next is False
        assert meta.has_previous is False

    def test_serializes_camel_case(self):
        payload = build_pagination_meta(total=95, page=1, limit=10).model_dump(by_alias=True)

        assert payload == {
            "total": 95,
            "page": 1,
            "limit": 10,
            "totalPages": 10,
            "hasNext": True,
            "hasPrevious": False,
            "nextPage": 2,
            "previousPage": None,
        }


@pytest.mark.unit
class TestBuildSearchPagination:
    """Test build_search_pagination."""

    def test_reads_found_and_page_from_mapping(self):
        meta = build_search_pagination({"found": 42, "page": 3, "hits": []}, limit=10)

        assert meta.total == 42
        assert meta.page == 3
        assert meta.total_pages == 5
        assert meta.previous_page == 2

    def test_reads_attributes(self):
        meta = build_search_pagination(SimpleNamespace(found=5, page=1), limit=10)

        assert meta.total_pages == 1
        assert meta.has_next is False
