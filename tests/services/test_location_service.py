"""Tests for LocationService."""

import pytest

from aramex.errors import AramexError, ErrorKind
from aramex.services.location_service import LocationService
from tests.helpers import error_response, ok_response


@pytest.fixture
def location(invoker):
    return LocationService(invoker)


class TestFetching:

    @pytest.mark.asyncio
    async def test_fetch_countries(self, location, binding_factory):
        method = binding_factory.operation(
            "location", "FetchCountries",
            ok_response(Countries={"Country": [{"Code": "BH", "Name": "Bahrain"}]}),
        )

        result = await location.fetch_countries()

        assert result["Countries"] == {"Country": [{"Code": "BH", "Name": "Bahrain"}]}
        assert list(method.await_args.kwargs) == ["ClientInfo", "Transaction"]

    @pytest.mark.asyncio
    async def test_fetch_cities_filters(self, location, binding_factory):
        method = binding_factory.operation("location", "FetchCities", ok_response())

        await location.fetch_cities("BH", name_starts_with="Man")

        sent = method.await_args.kwargs
        assert sent["CountryCode"] == "BH"
        assert sent["State"] is None
        assert sent["NameStartsWith"] == "Man"

    @pytest.mark.asyncio
    async def test_fetch_states(self, location, binding_factory):
        method = binding_factory.operation("location", "FetchStates", ok_response())

        await location.fetch_states("US")

        assert method.await_args.kwargs["CountryCode"] == "US"

    @pytest.mark.asyncio
    async def test_fetch_offices(self, location, binding_factory):
        method = binding_factory.operation("location", "FetchOffices", ok_response())

        await location.fetch_offices("BH", city="Manama")

        sent = method.await_args.kwargs
        assert sent["CountryCode"] == "BH"
        assert sent["City"] == "Manama"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("call,message", [
        (lambda svc: svc.fetch_countries(), "Failed to fetch countries"),
        (lambda svc: svc.fetch_cities("BH"), "Failed to fetch cities"),
        (lambda svc: svc.fetch_states("BH"), "Failed to fetch states"),
        (lambda svc: svc.fetch_offices("BH"), "Failed to fetch offices"),
    ])
    async def test_error_messages(self, location, binding_factory, call, message):
        for operation in ("FetchCountries", "FetchCities", "FetchStates", "FetchOffices"):
            binding_factory.operation("location", operation, error_response(("E", "x")))

        with pytest.raises(AramexError) as exc_info:
            await call(location)

        assert exc_info.value.kind is ErrorKind.API
        assert exc_info.value.message == message


class TestValidateAddress:

    @pytest.mark.asyncio
    async def test_address_normalized(self, location, binding_factory):
        method = binding_factory.operation(
            "location", "ValidateAddress", ok_response(IsValid=True, SuggestedAddresses=None),
        )

        result = await location.validate_address(
            {"country": "BH", "city": "Manama", "line1": "Road 1"}
        )

        assert result["IsValid"] is True
        assert list(method.await_args.kwargs["Address"]) == [
            "Line1",
            "Line2",
            "Line3",
            "City",
            "StateOrProvinceCode",
            "PostCode",
            "CountryCode",
        ]

    @pytest.mark.asyncio
    async def test_notifications_verbatim(self, location, binding_factory):
        binding_factory.operation(
            "location", "ValidateAddress",
            error_response(("ERR10", "City not found"), ("ERR11", "Bad post code")),
        )

        with pytest.raises(AramexError) as exc_info:
            await location.validate_address({"Line1": "x", "CountryCode": "BH"})

        assert exc_info.value.message == "Failed to validate address"
        assert exc_info.value.notifications == [
            {"Code": "ERR10", "Message": "City not found"},
            {"Code": "ERR11", "Message": "Bad post code"},
        ]
