"""Default pagination for list endpoints."""

from __future__ import annotations

from rest_framework.pagination import PageNumberPagination  # type: ignore


class CappedPageNumberPagination(PageNumberPagination):
    """``?page=<n>&size=<m>``; ``size`` is clamped to ``max_page_size``."""

    page_size_query_param = "size"
    max_page_size = 100
