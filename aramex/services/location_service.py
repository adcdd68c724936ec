"""Location service: countries, states, cities, offices, address validation."""

from collections.abc import Mapping
from typing import Any

from aramex.services.base import BaseAramexService
from aramex.services.request_normalizer import normalize_address
from aramex.services.service_catalog import ServiceName


class LocationService(BaseAramexService):
    """Location lookups and address validation."""

    service = ServiceName.LOCATION

    async def fetch_countries(self, transaction: dict[str, Any] | None = None) -> dict[str, Any]:
        """Fetch all countries served by Aramex."""
        request = self._request(transaction)
        return await self._call("FetchCountries", request, "Failed to fetch countries")

    async def fetch_cities(
        self,
        country_code: str,
        state: str | None = None,
        name_starts_with: str | None = None,
        transaction: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Fetch cities of a country.

        Args:
            country_code: ISO country code.
            state: Optional state code filter.
            name_starts_with: Optional city-name prefix filter.
            transaction: Optional Transaction references.

        Returns:
            Response with Cities.
        """
        request = self._request(
            transaction,
            CountryCode=country_code,
            State=state,
            NameStartsWith=name_starts_with,
        )
        return await self._call("FetchCities", request, "Failed to fetch cities")

    async def fetch_states(
        self,
        country_code: str,
        transaction: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Fetch states/provinces of a country."""
        request = self._request(transaction, CountryCode=country_code)
        return await self._call("FetchStates", request, "Failed to fetch states")

    async def validate_address(
        self,
        address: Mapping[str, Any],
        transaction: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Validate an address; the address is put into schema order first.

        Returns:
            Response with IsValid and SuggestedAddresses.
        """
        request = self._request(transaction, Address=normalize_address(address))
        return await self._call("ValidateAddress", request, "Failed to validate address")

    async def fetch_offices(
        self,
        country_code: str,
        city: str | None = None,
        transaction: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Fetch Aramex offices in a country, optionally in one city."""
        request = self._request(transaction, CountryCode=country_code, City=city)
        return await self._call("FetchOffices", request, "Failed to fetch offices")
