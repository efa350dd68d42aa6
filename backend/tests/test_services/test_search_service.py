"""
Tests for Typesense-backed job search.
"""

from unittest.mock import MagicMock

import pytest
from typesense.exceptions import ObjectNotFound, ServiceUnavailable

from jobboard.core.exceptions import SearchServiceException
from jobboard.schemas.search import JobSearchParams
from jobboard.services.search_service import QUERY_BY, JobSearchService, TypesenseService


def _search_mock(client: MagicMock) -> MagicMock:
    return client.collections.__getitem__.return_value.documents.search


@pytest.mark.unit
class TestTypesenseService:

    def test_search_parameters(self, mock_typesense_client):
        service = TypesenseService(mock_typesense_client, collection="jobs")

        service.search_jobs_collection(
            q="engineer",
            filters="city:Austin",
            sort_by="createdAt",
            sort_direction="asc",
            page=2,
            limit=20,
        )

        mock_typesense_client.collections.__getitem__.assert_called_with("jobs")
        _search_mock(mock_typesense_client).assert_called_once_with({
            "q": "engineer",
            "query_by": QUERY_BY,
            "sort_by": "createdAt:asc",
            "page": 2,
            "per_page": 20,
            "filter_by": "city:Austin",
        })

    def test_no_filter_by_without_filters(self, mock_typesense_client):
        TypesenseService(mock_typesense_client, collection="jobs").search_jobs_collection()

        params = _search_mock(mock_typesense_client).call_args.args[0]
        assert "filter_by" not in params
        assert params["q"] == "*"
        assert params["sort_by"] == "title:desc"

    @pytest.mark.parametrize("error", [
        ServiceUnavailable("typesense down"),
        ObjectNotFound("no such collection"),
    ])
    def test_client_errors_become_search_errors(self, mock_typesense_client, error):
        _search_mock(mock_typesense_client).side_effect = error
        service = TypesenseService(mock_typesense_client, collection="jobs")

        with pytest.raises(SearchServiceException) as exc_info:
            service.search_jobs_collection()

        assert exc_info.value.user_message == "Failed to search jobs"
        assert exc_info.value.http_status == 503


@pytest.mark.unit
class TestJobSearchService:

    def test_build_filters(self):
        params = JobSearchParams(
            city="Austin",
            include_remote=True,
            skills=["python", "sql"],
            job_type=["full-time", "contract"],
            status="open",
            is_active=True,
        )

        filters = JobSearchService.build_filters(params)

        assert filters == (
            "(city:Austin) || isRemote:true && skills:python && skills:sql"
            " && jobType:[full-time, contract] && status:open && isActive:true"
        )

    def test_blank_query_matches_everything(self):
        assert JobSearchParams(q="   ").q == "*"

    async def test_search_jobs(self, mock_typesense_client):
        _search_mock(mock_typesense_client).return_value = {
            "found": 25,
            "page": 2,
            "hits": [
                {"document": {"id": "1", "title": "Analyst"}},
                {"document": {"id": "2", "title": "Engineer"}},
            ],
        }
        service = JobSearchService(TypesenseService(mock_typesense_client, collection="jobs"))

        result = await service.search_jobs(JobSearchParams(q="analyst", page=2, limit=10))

        assert [item["title"] for item in result["items"]] == ["Analyst", "Engineer"]
        pagination = result["pagination"]
        assert pagination.total == 25
        assert pagination.page == 2
        assert pagination.total_pages == 3
        assert pagination.next_page == 3
        assert pagination.previous_page == 1
