"""Base resource class for BookStack API resources."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar

from bookstack_api.models import Entity
from bookstack_api.parsing import parse_multiple, parse_single

if TYPE_CHECKING:
    from bookstack_api.client import BookStackClient

ListT = TypeVar("ListT", bound=Entity)
ItemT = TypeVar("ItemT", bound=Entity)


def listing_params(
    count: int | None = None,
    offset: int | None = None,
    sort: str | None = None,
    filters: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Build query parameters for a listing endpoint.

    Args:
        count: Number of items to return (max 500)
        offset: Number of items to skip
        sort: Field to sort by (prefix with + or - for direction)
        filters: Filter criteria (e.g., {"name:like": "%test%"})
    """
    params: dict[str, Any] = {}
    if count is not None:
        params["count"] = count
    if offset is not None:
        params["offset"] = offset
    if sort is not None:
        params["sort"] = sort
    if filters:
        for key, value in filters.items():
            params[f"filter[{key}]"] = value
    return params


def drop_none(data: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in data.items() if value is not None}


class BaseResource(Generic[ListT, ItemT]):
    """Base class for BookStack API resources.

    Subclasses set ``ENDPOINT`` plus the shapes returned by the listing
    endpoint (``LIST_SHAPE``) and by read/create/update (``ITEM_SHAPE``).
    """

    ENDPOINT: ClassVar[str] = ""
    LIST_SHAPE: ClassVar[type[Entity]]
    ITEM_SHAPE: ClassVar[type[Entity]]

    def __init__(self, client: BookStackClient):
        """Initialize the resource.

        Args:
            client: BookStack API client instance
        """
        self.client = client

    def _get_endpoint(self, *parts: str | int) -> str:
        """Build endpoint path from parts."""
        endpoint = self.ENDPOINT
        for part in parts:
            endpoint = f"{endpoint}/{part}"
        return endpoint

    def list(
        self,
        count: int | None = None,
        offset: int | None = None,
        sort: str | None = None,
        filters: dict[str, Any] | None = None,
    ) -> list[ListT]:
        """List one page of items.

        Returns:
            Items in the order returned by the API
        """
        raw = self.client.request("GET", self.ENDPOINT, params=listing_params(count, offset, sort, filters))
        return parse_multiple(self.LIST_SHAPE, raw)

    def list_all(
        self,
        sort: str | None = None,
        filters: dict[str, Any] | None = None,
    ) -> list[ListT]:
        """List all items, following pagination."""
        return self.client.list_all(self.ENDPOINT, self.LIST_SHAPE, params=listing_params(sort=sort, filters=filters))

    def read(self, item_id: int) -> ItemT:
        """Read a single item by ID."""
        raw = self.client.request("GET", self._get_endpoint(item_id))
        return parse_single(self.ITEM_SHAPE, raw)

    def _write(self, method: str, endpoint: str, data: dict[str, Any]) -> ItemT:
        raw = self.client.request(method, endpoint, data=json.dumps(data))
        return parse_single(self.ITEM_SHAPE, raw)

    def delete(self, item_id: int) -> None:
        """Delete an item.

        Args:
            item_id: Item ID
        """
        self.client.request("DELETE", self._get_endpoint(item_id))
