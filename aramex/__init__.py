"""Async Python client for the Aramex SOAP shipping APIs.

Example:
    from aramex import AramexSDK

    async with AramexSDK({
        "username": "...", "password": "...",
        "account_number": "...", "account_pin": "...",
        "account_entity": "BAH", "account_country_code": "BH",
    }) as sdk:
        result = await sdk.tracking.track_shipment("44000000001")
"""

from aramex.config import AramexConfig, build_config, load_config
from aramex.errors import AramexError, ErrorKind, format_error, format_notifications
from aramex.sdk import AramexSDK
from aramex.services import (
    LocationService,
    RateService,
    ServiceName,
    ShippingService,
    SimpleAddress,
    SimpleContact,
    SimpleShipmentData,
    SoapMethodInvoker,
    SoapSessionManager,
    TrackingService,
    build_domestic_shipment,
    build_shipment,
    normalize_address,
    normalize_rate_request,
    normalize_shipment_for_rate,
)

__version__ = "0.1.0"

__all__ = [
    "AramexSDK",
    "AramexConfig",
    "build_config",
    "load_config",
    "AramexError",
    "ErrorKind",
    "format_error",
    "format_notifications",
    "ServiceName",
    "SoapSessionManager",
    "SoapMethodInvoker",
    "RateService",
    "ShippingService",
    "TrackingService",
    "LocationService",
    "normalize_address",
    "normalize_shipment_for_rate",
    "normalize_rate_request",
    "SimpleAddress",
    "SimpleContact",
    "SimpleShipmentData",
    "build_shipment",
    "build_domestic_shipment",
]
