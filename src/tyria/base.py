"""
Base classes for typed endpoint clients.

Every remote operation is declared as a ``Route``: the endpoint template,
the type its body deserializes into, and the status codes that count as
success or as a documented failure. All calls go through
``BaseEndpointClient._call``; endpoint methods only pick the route and
encode the parameter.
"""

from abc import ABC
from dataclasses import dataclass
from typing import Any, FrozenSet, Generic, List, Optional, Sequence, Type, TypeVar

from pydantic import BaseModel

from tyria.dispatch import parse_response
from tyria.http import AsyncHTTPClient
from tyria.params import number_to_param, numbers_to_param, string_to_param, strings_to_param
from tyria.paths import Endpoint, resolve
from tyria.result import Result

TItem = TypeVar("TItem", bound=BaseModel)
TId = TypeVar("TId", int, str)

# Status classification sets
OK = frozenset({200})
OK_PARTIAL = frozenset({200, 206})
NOT_FOUND = frozenset({404})
FORBIDDEN = frozenset({403})
FORBIDDEN_OR_NOT_FOUND = frozenset({403, 404})
BAD_REQUEST_OR_NOT_FOUND = frozenset({400, 404})
CHARACTER_ERRORS = frozenset({400, 403, 404})


@dataclass(frozen=True)
class Route:
    """Static declaration of one remote operation."""

    endpoint: Endpoint
    model: Any
    valid: FrozenSet[int] = OK
    invalid: FrozenSet[int] = NOT_FOUND
    authenticated: bool = False


def authenticated(endpoint: Endpoint, model: Any, invalid: FrozenSet[int] = FORBIDDEN) -> Route:
    """Route for an endpoint that needs the API key."""
    return Route(endpoint, model, invalid=invalid, authenticated=True)


class BaseEndpointClient(ABC):
    """
    Abstract base class for all endpoint clients.

    Provides the single request/dispatch path shared by every endpoint.
    """

    def __init__(self, http_client: AsyncHTTPClient):
        self._http = http_client

    async def _call(self, route: Route, param: Optional[str] = None) -> Result:
        """
        Perform the GET for ``route`` and classify the response.

        Args:
            route: Operation to perform
            param: Encoded query fragment or raw path identifier

        Returns:
            ``Ok`` with the deserialized body or ``Err`` with the API error
        """
        path = resolve(route.endpoint, param)
        response = await self._http.get(path, authenticated=route.authenticated)
        return parse_response(response, route.model, route.valid, route.invalid)


class BulkEndpointClient(BaseEndpointClient, Generic[TItem, TId]):
    """
    Base class for resources with the bulk layout.

    Such resources expose an index of IDs at ``index`` and single or batched
    lookups at ``lookup`` through ``?id=`` and ``?ids=``. Subclasses only set
    the class attributes. Batched lookups accept 206 Partial Content, which
    the API returns when some of the requested IDs do not exist.
    """

    index: Endpoint
    lookup: Endpoint
    model: Type[TItem]
    id_type: type = int

    def __init__(self, http_client: AsyncHTTPClient):
        super().__init__(http_client)
        self._ids_route = Route(self.index, List[self.id_type])
        self._one_route = Route(self.lookup, self.model)
        self._many_route = Route(self.lookup, List[self.model], valid=OK_PARTIAL)

    def _encode_id(self, id: TId) -> str:
        if self.id_type is str:
            return string_to_param("id", id)
        return number_to_param("id", id)

    def _encode_ids(self, ids: Sequence[TId]) -> str:
        if self.id_type is str:
            return strings_to_param("ids", ids)
        return numbers_to_param("ids", ids)

    async def ids(self) -> Result[List[TId]]:
        """List every ID of this resource."""
        return await self._call(self._ids_route)

    async def get(self, id: TId) -> Result[TItem]:
        """
        Get a single resource by ID.

        Returns:
            ``Ok`` with the resource, or ``Err`` (HTTP 404) if it does not exist
        """
        return await self._call(self._one_route, self._encode_id(id))

    async def get_many(self, ids: Sequence[TId]) -> Result[List[TItem]]:
        """
        Get several resources in one request.

        Unknown IDs are left out of the result; the call still succeeds as
        long as at least one ID matched.

        Raises:
            ValueError: If ``ids`` is empty
        """
        return await self._call(self._many_route, self._encode_ids(ids))
