"""
Job Search Service

Full-text job search backed by a Typesense collection.
"""

from typing import Any, Dict, Optional

import requests
import typesense
from typesense.exceptions import TypesenseClientError
from starlette.concurrency import run_in_threadpool

from jobboard.core.config import Settings, get_settings
from jobboard.core.exceptions import SearchServiceException
from jobboard.schemas.search import JobSearchParams
from jobboard.utils.logger import get_logger
from jobboard.utils.pagination import build_search_pagination
from jobboard.utils.search_query import TypesenseQueryBuilder

logger = get_logger(__name__)

QUERY_BY = "title, skills, jobType, description, city, state, country"


def create_typesense_client(settings: Optional[Settings] = None) -> typesense.Client:
    settings = settings or get_settings()
    return typesense.Client({
        "nodes": [{
            "host": settings.TYPESENSE_HOST,
            "port": settings.TYPESENSE_PORT,
            "protocol": settings.TYPESENSE_PROTOCOL,
        }],
        "api_key": settings.TYPESENSE_API_KEY,
        "connection_timeout_seconds": settings.TYPESENSE_CONNECTION_TIMEOUT_SECONDS,
    })


class TypesenseService:
    """Thin wrapper over the jobs collection."""

    def __init__(self, client, collection: Optional[str] = None):
        self.client = client
        self.collection = collection or get_settings().TYPESENSE_JOBS_COLLECTION

    def search_jobs_collection(
        self,
        q: str = "*",
        filters: Optional[str] = None,
        sort_by: str = "title",
        sort_direction: str = "desc",
        page: int = 1,
        limit: int = 10,
    ) -> Dict[str, Any]:
        """
        Run a search against the jobs collection.

        Returns:
            Dict[str, Any]: The raw Typesense search response

        Raises:
            SearchServiceException: If Typesense is unreachable or rejects the query
        """
        search_parameters = {
            "q": q,
            "query_by": QUERY_BY,
            "sort_by": f"{sort_by}:{sort_direction}",
            "page": page,
            "per_page": limit,
        }
        if filters:
            search_parameters["filter_by"] = filters

        try:
            return self.client.collections[self.collection].documents.search(search_parameters)
        except (TypesenseClientError, requests.exceptions.RequestException) as e:
            logger.error(f"Typesense search failed: {e}", collection=self.collection)
            raise SearchServiceException() from e


class JobSearchService:
    """Service layer for job search."""

    def __init__(self, typesense_service: TypesenseService):
        self.typesense_service = typesense_service

    @staticmethod
    def build_filters(params: JobSearchParams) -> str:
        return (
            TypesenseQueryBuilder()
            .add_location_filters(
                {
                    "city": params.city,
                    "state": params.state,
                    "country": params.country,
                    "zipcode": params.zipcode,
                },
                params.include_remote,
            )
            .add_skill_filters(params.skills, True)
            .add_array_filter("jobType", params.job_type, True)
            .add_single_filter("status", params.status)
            .add_single_filter("isActive", params.is_active)
            .add_single_filter("experience", params.experience)
            .build()
        )

    async def search_jobs(self, params: JobSearchParams) -> Dict[str, Any]:
        """Search jobs and return `{items, pagination}`."""
        filters = self.build_filters(params)
        response = await run_in_threadpool(
            self.typesense_service.search_jobs_collection,
            q=params.q,
            filters=filters or None,
            sort_by=params.sort_by,
            sort_direction=params.order,
            page=params.page,
            limit=params.limit,
        )

        items = [hit["document"] for hit in response.get("hits", [])]
        logger.info(
            "Job search completed",
            q=params.q,
            filters=filters,
            found=response.get("found", 0),
        )
        return {
            "items": items,
            "pagination": build_search_pagination(response, params.limit),
        }
