"""Rate Calculator service."""

from collections.abc import Mapping
from typing import Any

from aramex.services.base import BaseAramexService
from aramex.services.request_normalizer import normalize_rate_request
from aramex.services.service_catalog import ServiceName


class RateService(BaseAramexService):
    """Rate calculation and quotes."""

    service = ServiceName.RATE

    async def calculate_rate(self, request: Mapping[str, Any]) -> dict[str, Any]:
        """Calculate the shipping rate for a shipment.

        Args:
            request: OriginAddress, DestinationAddress, ShipmentDetails and
                optional Transaction / PreferredCurrencyCode. ClientInfo is
                added here; the body is put into schema order.

        Returns:
            Response with TotalAmount and, when provided, RateDetails.

        Raises:
            AramexError: kind API if Aramex reports errors.
        """
        body = normalize_rate_request(request)
        full_request = self._request(body.pop("Transaction", None), **body)
        return await self._call("CalculateRate", full_request, "Failed to calculate rate")

    async def get_quote(self, request: Mapping[str, Any]) -> dict[str, Any]:
        """Alias for calculate_rate."""
        return await self.calculate_rate(request)
