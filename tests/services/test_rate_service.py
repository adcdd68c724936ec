"""Tests for RateService."""

import pytest

from aramex.errors import AramexError, ErrorKind
from aramex.services.rate_service import RateService
from tests.helpers import error_response, ok_response


@pytest.fixture
def rate_service(invoker):
    return RateService(invoker)


RATE_REQUEST = {
    "ShipmentDetails": {
        "ProductGroup": "DOM",
        "ProductType": "OND",
        "NumberOfPieces": 1,
        "ActualWeight": {"Value": 1, "Unit": "KG"},
    },
    "OriginAddress": {"City": "Manama", "CountryCode": "BH", "Line1": "Road 1"},
    "DestinationAddress": {"City": "Riffa", "CountryCode": "BH", "Line1": "Road 2"},
}


class TestCalculateRate:

    @pytest.mark.asyncio
    async def test_sends_client_info_first_and_normalized_body(self, rate_service, binding_factory):
        method = binding_factory.operation(
            "rate", "CalculateRate",
            ok_response(TotalAmount={"CurrencyCode": "BHD", "Value": 1.5}),
        )

        result = await rate_service.calculate_rate(RATE_REQUEST)

        assert result["TotalAmount"] == {"CurrencyCode": "BHD", "Value": 1.5}
        sent = method.await_args.kwargs
        assert list(sent) == [
            "ClientInfo",
            "Transaction",
            "OriginAddress",
            "DestinationAddress",
            "ShipmentDetails",
        ]
        assert sent["ClientInfo"]["UserName"] == "testingapi@aramex.com"
        assert sent["Transaction"] is None
        assert sent["OriginAddress"]["Line2"] == ""
        assert sent["ShipmentDetails"]["ChargeableWeight"] is None

    @pytest.mark.asyncio
    async def test_forwards_transaction_and_currency(self, rate_service, binding_factory):
        method = binding_factory.operation("rate", "CalculateRate", ok_response())

        await rate_service.calculate_rate({
            **RATE_REQUEST,
            "Transaction": {"Reference1": "Q-1"},
            "PreferredCurrencyCode": "USD",
        })

        sent = method.await_args.kwargs
        assert sent["Transaction"] == {"Reference1": "Q-1"}
        assert sent["PreferredCurrencyCode"] == "USD"
        assert list(sent)[-1] == "PreferredCurrencyCode"

    @pytest.mark.asyncio
    async def test_has_errors_raises_api_error(self, rate_service, binding_factory):
        binding_factory.operation(
            "rate", "CalculateRate", error_response(("ERR52", "Invalid destination")),
        )

        with pytest.raises(AramexError) as exc_info:
            await rate_service.calculate_rate(RATE_REQUEST)

        error = exc_info.value
        assert error.kind is ErrorKind.API
        assert error.message == "Failed to calculate rate"
        assert error.notifications == [{"Code": "ERR52", "Message": "Invalid destination"}]
        assert error.service == "rate"
        assert error.operation == "CalculateRate"

    @pytest.mark.asyncio
    async def test_get_quote_alias(self, rate_service, binding_factory):
        method = binding_factory.operation("rate", "CalculateRate", ok_response())

        await rate_service.get_quote(RATE_REQUEST)

        method.assert_awaited_once()
