"""AramexSDK: one object wiring config, session, invoker and services.

Example:
    async with AramexSDK(config) as sdk:
        rate = await sdk.rate.calculate_rate(request)
        sdk.set_sandbox(False)
        tracking = await sdk.tracking.track_shipment("44000000001")
"""

import logging
from collections.abc import Mapping
from typing import Any

from aramex.config import AramexConfig, load_config
from aramex.services.location_service import LocationService
from aramex.services.rate_service import RateService
from aramex.services.shipping_service import ShippingService
from aramex.services.soap_client import SoapMethodInvoker
from aramex.services.soap_session import BindingFactory, SoapSessionManager
from aramex.services.tracking_service import TrackingService

logger = logging.getLogger(__name__)


class AramexSDK:
    """Facade over the four Aramex services sharing one session.

    Attributes:
        rate: RateService.
        shipping: ShippingService.
        tracking: TrackingService.
        location: LocationService.
    """

    def __init__(
        self,
        config: "AramexConfig | Mapping[str, Any]",
        binding_factory: BindingFactory | None = None,
    ) -> None:
        """Initialize the SDK.

        Args:
            config: AramexConfig or a mapping of config fields.
            binding_factory: Optional override passed to the session manager.

        Raises:
            AramexError: kind CONFIG for missing or invalid credentials.
        """
        self._session = SoapSessionManager(config, binding_factory=binding_factory)
        self._client = SoapMethodInvoker(self._session)

        self.rate = RateService(self._client)
        self.shipping = ShippingService(self._client)
        self.tracking = TrackingService(self._client)
        self.location = LocationService(self._client)

    @classmethod
    def from_config_file(
        cls,
        config_path: str | None = None,
        env: Mapping[str, str] | None = None,
    ) -> "AramexSDK":
        """Build an SDK from YAML/environment configuration (see load_config)."""
        return cls(load_config(config_path=config_path, env=env))

    async def __aenter__(self) -> "AramexSDK":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.aclose()

    @property
    def config(self) -> AramexConfig:
        return self._session.config

    @property
    def client(self) -> SoapMethodInvoker:
        """Invoker for operations not wrapped by a domain service."""
        return self._client

    @property
    def session(self) -> SoapSessionManager:
        return self._session

    def set_sandbox(self, sandbox: bool) -> None:
        """Switch between sandbox and production; cached bindings are dropped."""
        self._session.set_environment(sandbox)

    async def aclose(self) -> None:
        """Close every binding's HTTP client."""
        await self._session.aclose()
