"""FastAPI wiring: one AramexSDK per application.

Example:
    from fastapi import Depends, FastAPI
    from aramex.integrations.fastapi import aramex_lifespan, get_aramex

    app = FastAPI(lifespan=aramex_lifespan(config))

    @app.get("/track/{number}")
    async def track(number: str, sdk: AramexSDK = Depends(get_aramex)):
        return await sdk.tracking.track_shipment(number)
"""

import logging
from collections.abc import AsyncIterator, Callable, Mapping
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request

from aramex.config import AramexConfig, load_config
from aramex.sdk import AramexSDK

logger = logging.getLogger(__name__)

STATE_KEY = "aramex"


def aramex_lifespan(
    config: "AramexConfig | Mapping[str, Any] | None" = None,
    **sdk_kwargs: Any,
) -> Callable[[FastAPI], Any]:
    """Build a lifespan that owns an AramexSDK for the app's lifetime.

    Args:
        config: AramexConfig or mapping. When None, load_config() is used
            at startup.
        **sdk_kwargs: Extra AramexSDK arguments (e.g. binding_factory).

    Returns:
        Async context manager factory for ``FastAPI(lifespan=...)``.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Startup: create the SDK. Shutdown: close its bindings."""
        sdk = AramexSDK(config if config is not None else load_config(), **sdk_kwargs)
        setattr(app.state, STATE_KEY, sdk)
        logger.info("Aramex SDK ready (env=%s)", sdk.config.environment)
        try:
            yield
        finally:
            await sdk.aclose()
            setattr(app.state, STATE_KEY, None)

    return lifespan


def get_aramex(request: Request) -> AramexSDK:
    """FastAPI dependency returning the application's AramexSDK.

    Raises:
        RuntimeError: aramex_lifespan was not installed on the app.
    """
    sdk = getattr(request.app.state, STATE_KEY, None)
    if sdk is None:
        raise RuntimeError(
            "AramexSDK is not available; create the app with "
            "FastAPI(lifespan=aramex_lifespan(config))."
        )
    return sdk
