"""Tracking service: shipments and pickups."""

from typing import Any

from aramex.services.base import BaseAramexService
from aramex.services.service_catalog import ServiceName


class TrackingService(BaseAramexService):
    """Shipment and pickup tracking."""

    service = ServiceName.TRACKING

    async def track_shipments(
        self,
        shipment_numbers: list[str],
        last_update_only: bool = False,
        transaction: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Track one or more shipments by waybill number.

        Args:
            shipment_numbers: Waybill numbers.
            last_update_only: Return only the latest update per waybill.
            transaction: Optional Transaction references.

        Returns:
            Response with TrackingResults and NonExistingWaybills.
        """
        request = self._request(
            transaction,
            Shipments={"string": list(shipment_numbers)},
            GetLastTrackingUpdateOnly=last_update_only,
        )
        return await self._call("TrackShipments", request, "Failed to track shipments")

    async def track_shipment(
        self,
        shipment_number: str,
        last_update_only: bool = False,
        transaction: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Track a single shipment."""
        return await self.track_shipments([shipment_number], last_update_only, transaction)

    async def track_pickup(
        self,
        reference: str,
        transaction: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Track a pickup by its reference."""
        request = self._request(transaction, Reference=reference)
        return await self._call("TrackPickup", request, "Failed to track pickup")
