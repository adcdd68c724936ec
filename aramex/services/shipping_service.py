"""Shipping service: shipments, labels, pickups and number ranges."""

from collections.abc import Mapping
from typing import Any

from aramex.errors import AramexError
from aramex.services.base import BaseAramexService
from aramex.services.request_normalizer import normalize_address
from aramex.services.service_catalog import ServiceName

DEFAULT_LABEL_INFO: dict[str, Any] = {"ReportID": 9201, "ReportType": "URL"}

MIN_RESERVE_COUNT = 1
MAX_RESERVE_COUNT = 5000


class ShippingService(BaseAramexService):
    """Shipment creation, label printing, pickups and shipment number ranges."""

    service = ServiceName.SHIPPING

    async def create_shipments(
        self,
        shipments: list[dict[str, Any]],
        label_info: dict[str, Any] | None = None,
        transaction: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Create one or more shipments.

        Args:
            shipments: Shipment dicts (see shipment_builder.build_shipment).
            label_info: Optional {"ReportID", "ReportType"}.
            transaction: Optional Transaction references.

        Returns:
            Response whose ``Shipments`` is a list of processed shipments.

        Raises:
            AramexError: kind API if Aramex reports errors.
        """
        request = self._request(
            transaction,
            Shipments={"Shipment": list(shipments)},
            LabelInfo=label_info,
        )
        return await self._call("CreateShipments", request, "Failed to create shipments")

    async def create_shipment(
        self,
        shipment: dict[str, Any],
        label_info: dict[str, Any] | None = None,
        transaction: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Create a single shipment."""
        return await self.create_shipments([shipment], label_info, transaction)

    async def print_label(
        self,
        shipment_number: str,
        product_group: str | None = None,
        origin_entity: str | None = None,
        label_info: dict[str, Any] | None = None,
        transaction: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Print the label of an existing shipment.

        Args:
            shipment_number: Waybill number.
            product_group: "EXP" or "DOM"; needed when numbers are duplicated.
            origin_entity: Origin entity; needed when numbers are duplicated.
            label_info: Label options, default report 9201 as URL.
            transaction: Optional Transaction references.

        Returns:
            Response with ShipmentNumber and ShipmentLabel.
        """
        request = self._request(
            transaction,
            ShipmentNumber=shipment_number,
            ProductGroup=product_group,
            OriginEntity=origin_entity,
            LabelInfo=label_info or dict(DEFAULT_LABEL_INFO),
        )
        return await self._call("PrintLabel", request, "Failed to print label")

    async def create_pickup(
        self,
        pickup: dict[str, Any],
        label_info: dict[str, Any] | None = None,
        transaction: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Create a pickup request.

        Returns:
            Response with ProcessedPickup (ID, GUID).
        """
        request = self._request(transaction, Pickup=pickup, LabelInfo=label_info)
        return await self._call("CreatePickup", request, "Failed to create pickup")

    async def cancel_pickup(
        self,
        pickup_guid: str,
        comments: str | None = None,
        transaction: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Cancel a pickup by the GUID returned from create_pickup."""
        request = self._request(transaction, PickupGUID=pickup_guid, Comments=comments)
        return await self._call("CancelPickup", request, "Failed to cancel pickup")

    async def reserve_shipment_number_range(
        self,
        entity: str,
        product_group: str,
        count: int,
        transaction: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Reserve a range of shipment numbers.

        Args:
            entity: Entity code.
            product_group: "EXP" or "DOM".
            count: How many numbers to reserve, 1 to 5000.
            transaction: Optional Transaction references.

        Returns:
            Response with ShipmentRangeFrom / ShipmentRangeTo.

        Raises:
            AramexError: kind VALIDATION for an out-of-range count (no
                remote call is made); kind API if Aramex reports errors.
        """
        if count < MIN_RESERVE_COUNT or count > MAX_RESERVE_COUNT:
            raise AramexError.validation(
                "count",
                f"Count must be between {MIN_RESERVE_COUNT} and {MAX_RESERVE_COUNT}",
            )
        request = self._request(
            transaction,
            Entity=entity,
            ProductGroup=product_group,
            Count=count,
        )
        return await self._call(
            "ReserveShipmentNumberRange", request, "Failed to reserve shipment number range",
        )

    async def get_last_shipments_numbers_range(
        self,
        entity: str,
        product_group: str,
        transaction: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Get the last reserved shipment number range."""
        request = self._request(transaction, Entity=entity, ProductGroup=product_group)
        return await self._call(
            "GetLastShipmentsNumbersRange", request, "Failed to get last shipment numbers range",
        )

    async def schedule_delivery(self, request: Mapping[str, Any]) -> dict[str, Any]:
        """Schedule delivery of a shipment at a given time and address.

        Args:
            request: ShipmentNumber, ProductGroup, Entity, Address,
                ConsigneePhone, ShipperNumber and optional references /
                Transaction. The Address is normalized.

        Returns:
            Response with the scheduled delivery ID.
        """
        body = dict(request)
        if body.get("Address"):
            body["Address"] = normalize_address(body["Address"])
        full_request = self._request(body.pop("Transaction", None), **body)
        return await self._call("ScheduleDelivery", full_request, "Failed to schedule delivery")
