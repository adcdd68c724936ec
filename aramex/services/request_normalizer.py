"""Schema-order normalization for Aramex requests.

The Aramex WSDLs validate element order, so a request whose keys are
out of sequence is rejected even when every value is correct. These
functions rebuild addresses and rate shipment details in the exact
order the schema declares, with the schema's defaulting rules:

- Address: every optional field present, empty string when absent.
- Rate shipment details: the leading block is always present (None or
  empty-string placeholders); the trailing monetary/service block is
  omitted when absent.

Values are never validated here. All functions are pure and idempotent.

Example:
    from aramex.services.request_normalizer import normalize_address

    normalize_address({"line1": "123 Street", "city": "Manama", "country": "BH"})
    # {"Line1": "123 Street", "Line2": "", "Line3": "", "City": "Manama",
    #  "StateOrProvinceCode": "", "PostCode": "", "CountryCode": "BH"}
"""

from collections.abc import Mapping
from typing import Any

# Wire key -> accepted input keys, in WSDL order.
ADDRESS_FIELDS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("Line1", ("Line1", "line1", "line_1")),
    ("Line2", ("Line2", "line2", "line_2")),
    ("Line3", ("Line3", "line3", "line_3")),
    ("City", ("City", "city")),
    ("StateOrProvinceCode", ("StateOrProvinceCode", "state", "state_or_province_code")),
    ("PostCode", ("PostCode", "postcode", "post_code", "postal_code")),
    ("CountryCode", ("CountryCode", "country", "country_code")),
)

# Required address fields pass through untouched, even when missing.
_ADDRESS_PASSTHROUGH = frozenset({"Line1", "CountryCode"})

_ADDRESS_COORDINATES: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("Longitude", ("Longitude", "longitude")),
    ("Latitude", ("Latitude", "latitude")),
)

# Trailing rate fields, appended in this order only when truthy.
RATE_OPTIONAL_FIELDS: tuple[str, ...] = (
    "CustomsValueAmount",
    "CashOnDeliveryAmount",
    "InsuranceAmount",
    "CashAdditionalAmount",
    "CollectAmount",
    "Services",
    "Items",
)


def _present(value: Any) -> bool:
    """A value counts as supplied unless it is None or an empty string."""
    return value is not None and value != ""


def _pick(source: Mapping[str, Any], keys: tuple[str, ...]) -> Any:
    """First supplied value among alias keys, else None."""
    for key in keys:
        value = source.get(key)
        if _present(value):
            return value
    return None


def normalize_address(address: Mapping[str, Any]) -> dict[str, Any]:
    """Rebuild an address in WSDL order.

    Order: Line1, Line2, Line3, City, StateOrProvinceCode, PostCode,
    CountryCode. Accepts the wire keys or snake_case/short aliases
    (``line1``, ``city``, ``state``, ``postcode``, ``country``).

    Args:
        address: Domain-shaped address.

    Returns:
        New dict with optional fields defaulted to "". Line1 and
        CountryCode pass through as given (None if missing). Longitude
        and Latitude are appended only when supplied.
    """
    normalized: dict[str, Any] = {}
    for wire_key, aliases in ADDRESS_FIELDS:
        value = _pick(address, aliases)
        if wire_key in _ADDRESS_PASSTHROUGH:
            normalized[wire_key] = value if value is not None else address.get(wire_key)
        else:
            normalized[wire_key] = value if value is not None else ""

    for wire_key, aliases in _ADDRESS_COORDINATES:
        value = _pick(address, aliases)
        if value is not None:
            normalized[wire_key] = value
    return normalized


def normalize_shipment_for_rate(details: Mapping[str, Any]) -> dict[str, Any]:
    """Rebuild rate shipment details in WSDL order.

    Leading block (always present): Dimensions, ActualWeight,
    ChargeableWeight, DescriptionOfGoods, GoodsOriginCountry,
    NumberOfPieces, ProductGroup, ProductType, PaymentType,
    PaymentOptions. Trailing block (only when supplied):
    CustomsValueAmount, CashOnDeliveryAmount, InsuranceAmount,
    CashAdditionalAmount, CollectAmount, Services, Items. Empty values
    ({}, [], 0, "") count as not supplied.

    Args:
        details: Domain-shaped ShipmentDetails for a rate request.

    Returns:
        New dict. ActualWeight, NumberOfPieces and ProductGroup pass
        through untouched; missing ones are not defaulted.
    """
    get = details.get
    normalized: dict[str, Any] = {
        "Dimensions": get("Dimensions") or None,
        "ActualWeight": get("ActualWeight"),
        "ChargeableWeight": get("ChargeableWeight") or None,
        "DescriptionOfGoods": get("DescriptionOfGoods") or "",
        "GoodsOriginCountry": get("GoodsOriginCountry") or "",
        "NumberOfPieces": get("NumberOfPieces"),
        "ProductGroup": get("ProductGroup"),
        "ProductType": get("ProductType") or None,
        "PaymentType": get("PaymentType") or None,
        "PaymentOptions": get("PaymentOptions") or None,
    }
    for key in RATE_OPTIONAL_FIELDS:
        value = get(key)
        if value:
            normalized[key] = value
    return normalized


def normalize_rate_request(request: Mapping[str, Any]) -> dict[str, Any]:
    """Order a full rate request body (ClientInfo excluded).

    Order: Transaction, OriginAddress, DestinationAddress,
    ShipmentDetails, PreferredCurrencyCode. Transaction and
    PreferredCurrencyCode are omitted when absent.

    Args:
        request: Rate request with OriginAddress, DestinationAddress and
            ShipmentDetails.

    Returns:
        New dict with addresses and shipment details normalized.
    """
    normalized: dict[str, Any] = {}
    if _present(request.get("Transaction")):
        normalized["Transaction"] = request["Transaction"]
    normalized["OriginAddress"] = normalize_address(request.get("OriginAddress") or {})
    normalized["DestinationAddress"] = normalize_address(request.get("DestinationAddress") or {})
    normalized["ShipmentDetails"] = normalize_shipment_for_rate(request.get("ShipmentDetails") or {})
    if _present(request.get("PreferredCurrencyCode")):
        normalized["PreferredCurrencyCode"] = request["PreferredCurrencyCode"]
    return normalized
