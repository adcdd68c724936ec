"""Tests for schema-order normalization of addresses and rate requests."""

import pytest

from aramex.services.request_normalizer import (
    normalize_address,
    normalize_rate_request,
    normalize_shipment_for_rate,
)

ADDRESS_ORDER = [
    "Line1",
    "Line2",
    "Line3",
    "City",
    "StateOrProvinceCode",
    "PostCode",
    "CountryCode",
]

RATE_LEADING_ORDER = [
    "Dimensions",
    "ActualWeight",
    "ChargeableWeight",
    "DescriptionOfGoods",
    "GoodsOriginCountry",
    "NumberOfPieces",
    "ProductGroup",
    "ProductType",
    "PaymentType",
    "PaymentOptions",
]


class TestNormalizeAddress:
    """normalize_address() ordering and defaults."""

    def test_minimal_address_is_completed_in_order(self):
        """Line1/City/CountryCode in scrambled order come back complete."""
        result = normalize_address({"CountryCode": "BH", "City": "Manama", "Line1": "123 Street"})

        assert list(result) == ADDRESS_ORDER
        assert result == {
            "Line1": "123 Street",
            "Line2": "",
            "Line3": "",
            "City": "Manama",
            "StateOrProvinceCode": "",
            "PostCode": "",
            "CountryCode": "BH",
        }

    def test_snake_case_aliases(self):
        result = normalize_address({
            "line1": "Road 12",
            "line2": "Block 3",
            "city": "Riffa",
            "state": "S",
            "postcode": "1001",
            "country": "BH",
        })

        assert result == {
            "Line1": "Road 12",
            "Line2": "Block 3",
            "Line3": "",
            "City": "Riffa",
            "StateOrProvinceCode": "S",
            "PostCode": "1001",
            "CountryCode": "BH",
        }

    def test_required_fields_pass_through_when_missing(self):
        """No defaulting for Line1 and CountryCode."""
        result = normalize_address({"City": "Manama"})

        assert result["Line1"] is None
        assert result["CountryCode"] is None
        assert result["City"] == "Manama"

    def test_none_optional_becomes_empty_string(self):
        result = normalize_address({"Line1": "x", "Line2": None, "CountryCode": "BH"})

        assert result["Line2"] == ""

    def test_coordinates_appended_only_when_supplied(self):
        with_coords = normalize_address({
            "Line1": "x", "CountryCode": "BH", "Latitude": 26.2, "Longitude": 50.5,
        })
        without = normalize_address({"Line1": "x", "CountryCode": "BH"})

        assert list(with_coords) == ADDRESS_ORDER + ["Longitude", "Latitude"]
        assert with_coords["Latitude"] == 26.2
        assert list(without) == ADDRESS_ORDER

    def test_input_not_mutated(self):
        address = {"City": "Manama", "Line1": "x"}

        normalize_address(address)

        assert address == {"City": "Manama", "Line1": "x"}

    def test_idempotent(self):
        once = normalize_address({"country": "SA", "line1": "King Fahd Rd", "city": "Riyadh"})

        assert normalize_address(once) == once
        assert list(normalize_address(once)) == list(once)


class TestNormalizeShipmentForRate:
    """normalize_shipment_for_rate() leading/trailing blocks."""

    def test_leading_block_always_present(self):
        result = normalize_shipment_for_rate({
            "ProductGroup": "DOM",
            "NumberOfPieces": 1,
            "ActualWeight": {"Unit": "KG", "Value": 1.5},
        })

        assert list(result) == RATE_LEADING_ORDER
        assert result["Dimensions"] is None
        assert result["ChargeableWeight"] is None
        assert result["DescriptionOfGoods"] == ""
        assert result["GoodsOriginCountry"] == ""
        assert result["ProductType"] is None
        assert result["PaymentType"] is None
        assert result["PaymentOptions"] is None
        assert result["ActualWeight"] == {"Unit": "KG", "Value": 1.5}

    def test_required_fields_not_defaulted(self):
        result = normalize_shipment_for_rate({})

        assert result["ActualWeight"] is None
        assert result["NumberOfPieces"] is None
        assert result["ProductGroup"] is None

    def test_trailing_block_order_and_omission(self):
        cod = {"CurrencyCode": "BHD", "Value": 10}
        customs = {"CurrencyCode": "USD", "Value": 50}

        result = normalize_shipment_for_rate({
            "Services": "CODS",
            "CashOnDeliveryAmount": cod,
            "ProductGroup": "EXP",
            "CustomsValueAmount": customs,
            "NumberOfPieces": 2,
            "ActualWeight": {"Unit": "KG", "Value": 3},
        })

        assert list(result) == RATE_LEADING_ORDER + [
            "CustomsValueAmount",
            "CashOnDeliveryAmount",
            "Services",
        ]
        assert result["CashOnDeliveryAmount"] is cod
        assert "InsuranceAmount" not in result
        assert "Items" not in result

    def test_empty_trailing_values_omitted(self):
        result = normalize_shipment_for_rate({
            "Services": "",
            "InsuranceAmount": None,
            "CustomsValueAmount": {},
            "Items": [],
            "CollectAmount": 0,
        })

        assert list(result)[-1] == "PaymentOptions"
        for key in ("Services", "InsuranceAmount", "CustomsValueAmount", "Items", "CollectAmount"):
            assert key not in result

    def test_unknown_keys_dropped(self):
        result = normalize_shipment_for_rate({"ProductGroup": "DOM", "Foo": "bar"})

        assert "Foo" not in result

    @pytest.mark.parametrize("details", [
        {},
        {"ProductGroup": "DOM", "NumberOfPieces": 1, "ActualWeight": {"Unit": "KG", "Value": 1}},
        {
            "Dimensions": {"Length": 10, "Width": 10, "Height": 10, "Unit": "CM"},
            "ProductType": "PPX",
            "Items": [{"PackageType": "Box"}],
        },
    ])
    def test_idempotent(self, details):
        once = normalize_shipment_for_rate(details)

        twice = normalize_shipment_for_rate(once)

        assert twice == once
        assert list(twice) == list(once)


class TestNormalizeRateRequest:
    """normalize_rate_request() top-level ordering."""

    def _request(self, **extra):
        request = {
            "ShipmentDetails": {
                "ProductGroup": "DOM",
                "NumberOfPieces": 1,
                "ActualWeight": {"Unit": "KG", "Value": 1},
            },
            "DestinationAddress": {"city": "Riffa", "country": "BH", "line1": "B"},
            "OriginAddress": {"city": "Manama", "country": "BH", "line1": "A"},
        }
        request.update(extra)
        return request

    def test_order_without_optionals(self):
        result = normalize_rate_request(self._request())

        assert list(result) == ["OriginAddress", "DestinationAddress", "ShipmentDetails"]
        assert list(result["OriginAddress"]) == ADDRESS_ORDER
        assert result["DestinationAddress"]["City"] == "Riffa"
        assert list(result["ShipmentDetails"]) == RATE_LEADING_ORDER

    def test_order_with_optionals(self):
        result = normalize_rate_request(self._request(
            PreferredCurrencyCode="BHD",
            Transaction={"Reference1": "R1"},
        ))

        assert list(result) == [
            "Transaction",
            "OriginAddress",
            "DestinationAddress",
            "ShipmentDetails",
            "PreferredCurrencyCode",
        ]
        assert result["PreferredCurrencyCode"] == "BHD"

    def test_idempotent(self):
        once = normalize_rate_request(self._request(PreferredCurrencyCode="USD"))

        assert normalize_rate_request(once) == once
