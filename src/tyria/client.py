"""
Main API client.

This module provides the TyriaClient class, the primary entry point
for talking to the API. It holds the session (API key and locale),
the endpoint clients and the HTTP connection lifecycle.
"""

from typing import Any, Dict, Optional, Type, TypeVar
import logging

import httpx

from tyria.base import BaseEndpointClient, Route
from tyria.config import TyriaSettings, get_settings
from tyria.endpoints import (
    AccountClient,
    AchievementCategoriesClient,
    AchievementGroupsClient,
    AchievementsClient,
    CharactersClient,
    CommerceClient,
    LegendsClient,
    ListingsClient,
    MasteriesClient,
    OutfitsClient,
    PetsClient,
    PricesClient,
    ProfessionsClient,
    RacesClient,
    SkillsClient,
    SpecializationsClient,
    TraitsClient,
)
from tyria.http import AsyncHTTPClient, ClientSession
from tyria.result import Result

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseEndpointClient)


class TyriaClient:
    """
    Main client for the API.

    Example usage:
        ```python
        async with TyriaClient(token="my-api-key", lang="de") as client:
            result = await client.account.get()
            if result.is_ok():
                print(result.value.name)

            skills = (await client.skills.get_many([14375, 14381])).unwrap()
        ```

    Every endpoint method returns ``Ok``/``Err``; documented API failures
    never raise. Missing credentials, transport failures and response
    bodies that do not match their model do.
    """

    def __init__(
        self,
        *,
        token: Optional[str] = None,
        lang: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        headers: Optional[Dict[str, str]] = None,
        settings: Optional[TyriaSettings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the client.

        Arguments left as None fall back to ``settings`` (by default loaded
        from ``TYRIA_*`` environment variables).

        Args:
            token: API key for authenticated endpoints
            lang: Locale sent as Accept-Language (e.g. "en", "de", "fr")
            base_url: API origin
            timeout: Request timeout in seconds
            headers: Additional headers to include in all requests
            settings: Settings to fall back to
            transport: Custom httpx transport (mostly for tests)
        """
        if settings is None:
            settings = get_settings()

        self._session = ClientSession(
            lang=lang or settings.lang,
            token=token if token is not None else settings.token,
        )
        self._base_url = (base_url or settings.base_url).rstrip("/")
        self._timeout = timeout if timeout is not None else settings.timeout

        self._http = AsyncHTTPClient(
            base_url=self._base_url,
            session=self._session,
            timeout=self._timeout,
            headers=headers,
            transport=transport,
        )

        # Endpoint clients (lazy-loaded)
        self._endpoint_clients: Dict[str, Any] = {}

    @property
    def base_url(self) -> str:
        """Get the base URL for the API."""
        return self._base_url

    @property
    def session(self) -> ClientSession:
        return self._session

    @property
    def is_authenticated(self) -> bool:
        """Check if an API key is configured."""
        return self._session.is_authenticated()

    @property
    def http(self) -> AsyncHTTPClient:
        """Get the underlying HTTP client for custom requests."""
        return self._http

    # =========================================================================
    # Endpoint Clients
    # =========================================================================

    def _get_endpoint_client(self, client_class: Type[T]) -> T:
        """Get or create an endpoint client instance."""
        class_name = client_class.__name__
        if class_name not in self._endpoint_clients:
            self._endpoint_clients[class_name] = client_class(self._http)
        return self._endpoint_clients[class_name]

    @property
    def account(self) -> AccountClient:
        return self._get_endpoint_client(AccountClient)

    @property
    def achievements(self) -> AchievementsClient:
        return self._get_endpoint_client(AchievementsClient)

    @property
    def achievement_groups(self) -> AchievementGroupsClient:
        return self._get_endpoint_client(AchievementGroupsClient)

    @property
    def achievement_categories(self) -> AchievementCategoriesClient:
        return self._get_endpoint_client(AchievementCategoriesClient)

    @property
    def characters(self) -> CharactersClient:
        return self._get_endpoint_client(CharactersClient)

    @property
    def commerce(self) -> CommerceClient:
        return self._get_endpoint_client(CommerceClient)

    @property
    def listings(self) -> ListingsClient:
        return self._get_endpoint_client(ListingsClient)

    @property
    def prices(self) -> PricesClient:
        return self._get_endpoint_client(PricesClient)

    @property
    def masteries(self) -> MasteriesClient:
        return self._get_endpoint_client(MasteriesClient)

    @property
    def outfits(self) -> OutfitsClient:
        return self._get_endpoint_client(OutfitsClient)

    @property
    def pets(self) -> PetsClient:
        return self._get_endpoint_client(PetsClient)

    @property
    def professions(self) -> ProfessionsClient:
        return self._get_endpoint_client(ProfessionsClient)

    @property
    def races(self) -> RacesClient:
        return self._get_endpoint_client(RacesClient)

    @property
    def specializations(self) -> SpecializationsClient:
        return self._get_endpoint_client(SpecializationsClient)

    @property
    def skills(self) -> SkillsClient:
        return self._get_endpoint_client(SkillsClient)

    @property
    def traits(self) -> TraitsClient:
        return self._get_endpoint_client(TraitsClient)

    @property
    def legends(self) -> LegendsClient:
        return self._get_endpoint_client(LegendsClient)

    # =========================================================================
    # Custom Requests
    # =========================================================================

    async def fetch(self, route: Route, param: Optional[str] = None) -> Result:
        """
        Perform a request for a route that has no endpoint method.

        Args:
            route: Endpoint, model and status sets to use
            param: Encoded query fragment or raw path identifier

        Returns:
            ``Ok`` or ``Err`` as for any endpoint method
        """
        return await self._get_endpoint_client(BaseEndpointClient)._call(route, param)

    # =========================================================================
    # Lifecycle Management
    # =========================================================================

    async def close(self) -> None:
        """Close the client and release resources."""
        await self._http.close()
        self._endpoint_clients.clear()
        logger.debug("Client closed")

    async def __aenter__(self) -> "TyriaClient":
        """Enter async context manager."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit async context manager."""
        await self.close()

    def __repr__(self) -> str:
        auth_status = "authenticated" if self.is_authenticated else "not authenticated"
        return f"TyriaClient(base_url={self._base_url!r}, lang={self._session.lang!r}, {auth_status})"
