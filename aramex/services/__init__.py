"""Service layer for the Aramex client.

Provides the SOAP session manager and method invoker, request
normalization, and the rate, shipping, tracking and location services.
"""

from aramex.services.location_service import LocationService
from aramex.services.rate_service import RateService
from aramex.services.request_normalizer import (
    normalize_address,
    normalize_rate_request,
    normalize_shipment_for_rate,
)
from aramex.services.service_catalog import SERVICE_CATALOG, ServiceDefinition, ServiceName
from aramex.services.shipment_builder import (
    SimpleAddress,
    SimpleContact,
    SimpleShipmentData,
    build_address,
    build_contact,
    build_domestic_shipment,
    build_shipment,
)
from aramex.services.shipping_service import ShippingService
from aramex.services.soap_client import SoapMethodInvoker, repair_response
from aramex.services.soap_session import ServiceBinding, SoapSessionManager
from aramex.services.tracking_service import TrackingService

__all__ = [
    "ServiceName",
    "ServiceDefinition",
    "SERVICE_CATALOG",
    "ServiceBinding",
    "SoapSessionManager",
    "SoapMethodInvoker",
    "repair_response",
    "normalize_address",
    "normalize_shipment_for_rate",
    "normalize_rate_request",
    "RateService",
    "ShippingService",
    "TrackingService",
    "LocationService",
    "SimpleAddress",
    "SimpleContact",
    "SimpleShipmentData",
    "build_address",
    "build_contact",
    "build_shipment",
    "build_domestic_shipment",
]
