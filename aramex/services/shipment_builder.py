"""Shipment builder for CreateShipments requests.

Expands a handful of simple fields into the complete Shipment structure
Aramex expects, filling every element the schema requires (empty strings
where there is nothing to say).

Example:
    from aramex.services.shipment_builder import build_domestic_shipment

    shipment = build_domestic_shipment(
        reference="ORDER-1001",
        account_number=config.account_number,
        from_name="Store", from_address="Road 1", from_city="Manama",
        from_phone="+97317000000",
        to_name="Customer", to_address="Block 2", to_city="Riffa",
        to_phone="+97336000000",
        weight=1.5, description="Books",
    )
    result = await sdk.shipping.create_shipment(shipment)
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

DEFAULT_COUNTRY_CODE = "BH"
DEFAULT_COD_CURRENCY = "BHD"
WEIGHT_UNIT = "KG"
DIMENSION_UNIT = "CM"

DOMESTIC_PRODUCT_GROUP = "DOM"
DOMESTIC_PRODUCT_TYPE = "OND"
EXPRESS_PRODUCT_GROUP = "EXP"
EXPRESS_PRODUCT_TYPE = "PPX"

DEFAULT_PAYMENT_TYPE = "P"
DEFAULT_PAYMENT_OPTIONS = "CASH"


@dataclass
class SimpleAddress:
    line1: str
    city: str
    country: str
    line2: str | None = None
    postcode: str | None = None
    state: str | None = None


@dataclass
class SimpleContact:
    name: str
    phone: str
    company: str | None = None
    mobile: str | None = None
    email: str | None = None


@dataclass
class SimpleShipmentData:
    """Minimal description of a shipment.

    Attributes:
        reference: Merchant reference, sent as Reference1.
        shipper_address: Where the parcel is collected.
        shipper_contact: Who hands it over.
        shipper_account_number: Aramex account billed for the shipment.
        consignee_address: Delivery address.
        consignee_contact: Recipient.
        weight: Actual weight in KG; also used as chargeable weight.
        description: DescriptionOfGoods.
        number_of_pieces: Defaults to 1.
        dimensions: Optional (length, width, height) in CM.
        is_domestic: DOM/OND when True (default), EXP/PPX otherwise.
        cod_amount: Cash-on-delivery amount; no COD block when unset.
        currency: COD currency, BHD when unset.
    """

    reference: str
    shipper_address: SimpleAddress
    shipper_contact: SimpleContact
    shipper_account_number: str
    consignee_address: SimpleAddress
    consignee_contact: SimpleContact
    weight: float
    description: str
    number_of_pieces: int | None = None
    dimensions: tuple[float, float, float] | None = None
    is_domestic: bool = True
    cod_amount: float | None = None
    currency: str | None = None


def build_address(address: SimpleAddress) -> dict[str, Any]:
    """Build a complete Address in schema order."""
    return {
        "Line1": address.line1,
        "Line2": address.line2 or "",
        "Line3": "",
        "City": address.city,
        "StateOrProvinceCode": address.state or "",
        "PostCode": address.postcode or "",
        "CountryCode": address.country,
    }


def build_contact(contact: SimpleContact, contact_type: str) -> dict[str, Any]:
    """Build a complete Contact.

    Company name falls back to the person name and cell phone to the
    main phone.

    Args:
        contact: Simple contact.
        contact_type: "Supplier" for the shipper, "Recipient" for the consignee.

    Returns:
        Contact dict with every schema element present.
    """
    return {
        "Department": "",
        "PersonName": contact.name,
        "Title": "",
        "CompanyName": contact.company or contact.name,
        "PhoneNumber1": contact.phone,
        "PhoneNumber1Ext": "",
        "PhoneNumber2": "",
        "PhoneNumber2Ext": "",
        "FaxNumber": "",
        "CellPhone": contact.mobile or contact.phone,
        "EmailAddress": contact.email or "",
        "Type": contact_type,
    }


def _money(currency: str, value: float) -> dict[str, Any]:
    return {"CurrencyCode": currency, "Value": value}


def build_shipment(data: SimpleShipmentData) -> dict[str, Any]:
    """Build a complete Shipment from simplified data.

    Args:
        data: Simplified shipment description.

    Returns:
        Shipment dict ready for ShippingService.create_shipment().
    """
    if data.is_domestic:
        product_group, product_type = DOMESTIC_PRODUCT_GROUP, DOMESTIC_PRODUCT_TYPE
    else:
        product_group, product_type = EXPRESS_PRODUCT_GROUP, EXPRESS_PRODUCT_TYPE

    length, width, height = data.dimensions or (0, 0, 0)

    cod = None
    if data.cod_amount:
        cod = _money(data.currency or DEFAULT_COD_CURRENCY, data.cod_amount)

    return {
        "Reference1": data.reference,
        "Reference2": "",
        "Reference3": "",
        "Shipper": {
            "Reference1": "",
            "Reference2": "",
            "AccountNumber": data.shipper_account_number,
            "PartyAddress": build_address(data.shipper_address),
            "Contact": build_contact(data.shipper_contact, "Supplier"),
        },
        "Consignee": {
            "Reference1": "",
            "Reference2": "",
            "AccountNumber": "",
            "PartyAddress": build_address(data.consignee_address),
            "Contact": build_contact(data.consignee_contact, "Recipient"),
        },
        "ShippingDateTime": datetime.now(timezone.utc).isoformat(),
        "Details": {
            "Dimensions": {
                "Length": length,
                "Width": width,
                "Height": height,
                "Unit": DIMENSION_UNIT,
            },
            "ActualWeight": {"Unit": WEIGHT_UNIT, "Value": data.weight},
            "ChargeableWeight": {"Unit": WEIGHT_UNIT, "Value": data.weight},
            "DescriptionOfGoods": data.description,
            "GoodsOriginCountry": data.shipper_address.country,
            "NumberOfPieces": data.number_of_pieces or 1,
            "ProductGroup": product_group,
            "ProductType": product_type,
            "PaymentType": DEFAULT_PAYMENT_TYPE,
            "PaymentOptions": DEFAULT_PAYMENT_OPTIONS,
            "CashOnDeliveryAmount": cod,
        },
    }


def build_domestic_shipment(
    *,
    reference: str,
    account_number: str,
    from_name: str,
    from_address: str,
    from_city: str,
    from_phone: str,
    to_name: str,
    to_address: str,
    to_city: str,
    to_phone: str,
    weight: float,
    description: str,
    from_company: str | None = None,
    from_email: str | None = None,
    to_company: str | None = None,
    to_email: str | None = None,
    cod_amount: float | None = None,
    country: str = DEFAULT_COUNTRY_CODE,
) -> dict[str, Any]:
    """Quick builder for a domestic shipment within one country (BH by default)."""
    return build_shipment(
        SimpleShipmentData(
            reference=reference,
            shipper_account_number=account_number,
            shipper_address=SimpleAddress(line1=from_address, city=from_city, country=country),
            shipper_contact=SimpleContact(
                name=from_name, company=from_company, phone=from_phone, email=from_email,
            ),
            consignee_address=SimpleAddress(line1=to_address, city=to_city, country=country),
            consignee_contact=SimpleContact(
                name=to_name, company=to_company, phone=to_phone, email=to_email,
            ),
            weight=weight,
            description=description,
            is_domestic=True,
            cod_amount=cod_amount,
        )
    )
