"""Tests for the FastAPI lifespan and dependency."""

import pytest
from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient

from aramex import AramexSDK
from aramex.integrations.fastapi import STATE_KEY, aramex_lifespan, get_aramex
from tests.helpers import FakeBindingFactory, ok_response


def _app(lifespan=None) -> FastAPI:
    app = FastAPI(lifespan=lifespan)

    @app.get("/track/{number}")
    async def track(number: str, sdk: AramexSDK = Depends(get_aramex)):
        return await sdk.tracking.track_shipment(number)

    return app


class TestAramexLifespan:

    def test_dependency_serves_sdk(self, credentials):
        factory = FakeBindingFactory()
        track = factory.operation(
            "tracking", "TrackShipments",
            return_value=ok_response(NonExistingWaybills=None),
        )
        app = _app(aramex_lifespan(credentials, binding_factory=factory))

        with TestClient(app) as client:
            response = client.get("/track/44000000001")

        assert response.status_code == 200
        assert response.json()["HasErrors"] is False
        assert track.await_args.kwargs["Shipments"] == {"string": ["44000000001"]}

    def test_shutdown_closes_sdk(self, credentials):
        factory = FakeBindingFactory()
        factory.operation("tracking", "TrackShipments", return_value=ok_response())
        app = _app(aramex_lifespan(credentials, binding_factory=factory))

        with TestClient(app) as client:
            assert isinstance(getattr(app.state, STATE_KEY), AramexSDK)
            client.get("/track/1")

        assert getattr(app.state, STATE_KEY) is None
        factory.bindings[0].transport.aclose.assert_awaited_once()

    def test_missing_lifespan(self):
        with TestClient(_app()) as client:
            with pytest.raises(RuntimeError, match="aramex_lifespan"):
                client.get("/track/1")
