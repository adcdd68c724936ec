"""Per-session SOAP binding lifecycle for the Aramex services.

SoapSessionManager owns the configuration (credentials and environment
flag), resolves each logical service to its WSDL document and endpoint,
and lazily builds one zeep binding per service. Bindings are cached on
the manager instance, never process-wide, and are dropped whenever the
environment changes.

Example:
    async with SoapSessionManager(config) as session:
        binding = await session.resolve_binding("rate")
        result = await binding.operations["CalculateRate"](**request)
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

import httpx
from zeep import AsyncClient
from zeep.plugins import HistoryPlugin
from zeep.proxy import AsyncServiceProxy
from zeep.transports import AsyncTransport

from aramex.config import AramexConfig, build_config
from aramex.errors import AramexError
from aramex.services.service_catalog import (
    ServiceName,
    coerce_service,
    endpoint_url,
    get_definition,
    wsdl_path,
)

logger = logging.getLogger(__name__)

# httpx default when the config leaves timeout unset.
_DEFAULT_HTTP_TIMEOUT = 30.0


@dataclass(frozen=True)
class ServiceBinding:
    """A constructed, reusable handle to one service endpoint.

    Attributes:
        service: Logical service this binding serves.
        endpoint: Endpoint URL the binding posts to.
        operations: Operation registry, name -> awaitable callable taking
            the request parts as keyword arguments.
        history: Wire trace recorder when debug_wire is enabled.
        transport: Closeable transport owning the HTTP connection pool.
    """

    service: ServiceName
    endpoint: str
    operations: Mapping[str, Callable[..., Awaitable[Any]]] = field(default_factory=dict)
    history: Any = None
    transport: Any = None

    async def aclose(self) -> None:
        """Close the underlying HTTP client, if any."""
        if self.transport is not None:
            await self.transport.aclose()


BindingFactory = Callable[[ServiceName, str, AramexConfig], Awaitable[ServiceBinding]]


async def build_zeep_binding(
    service: ServiceName,
    endpoint: str,
    config: AramexConfig,
) -> ServiceBinding:
    """Build a zeep binding for a service bound to an endpoint.

    The WSDL is parsed in a worker thread since zeep loads and compiles
    schemas synchronously.

    Args:
        service: Logical service.
        endpoint: Endpoint URL for the current environment.
        config: Current configuration (timeout, debug_wire).

    Returns:
        ServiceBinding with an operation registry built from the WSDL binding.
    """
    definition = get_definition(service)
    timeout = config.timeout or _DEFAULT_HTTP_TIMEOUT
    http_client = httpx.AsyncClient(timeout=timeout)
    # Only used for remote WSDL imports; the packaged documents have none.
    wsdl_client = httpx.Client(timeout=timeout)
    transport = AsyncTransport(client=http_client, wsdl_client=wsdl_client)
    history = HistoryPlugin(maxlen=1) if config.debug_wire else None
    plugins = [history] if history is not None else []

    try:
        client = await asyncio.to_thread(
            AsyncClient,
            str(wsdl_path(service)),
            transport=transport,
            plugins=plugins,
        )
        wsdl_binding = client.wsdl.bindings[definition.binding_name]
        # create_service() always returns the synchronous proxy
        proxy = AsyncServiceProxy(client, wsdl_binding, address=endpoint)
        operations = {name: proxy[name] for name in wsdl_binding.all()}
    except BaseException:
        await http_client.aclose()
        raise
    finally:
        wsdl_client.close()

    return ServiceBinding(
        service=service,
        endpoint=endpoint,
        operations=operations,
        history=history,
        transport=transport,
    )


class SoapSessionManager:
    """Owns configuration and the per-service binding cache.

    At most one live binding exists per service. Concurrent callers that
    miss the cache for the same service wait on a per-service lock and
    share a single construction. A construction that overlaps an
    environment switch is discarded and repeated for the new environment.

    Attributes:
        _config: Current immutable configuration.
        _binding_factory: Coroutine building a ServiceBinding.
        _bindings: Live bindings keyed by service.
        _locks: Per-service construction locks.
        _retired: Dropped bindings awaiting aclose().
        _generation: Bumped on every environment switch.
    """

    def __init__(
        self,
        config: "AramexConfig | Mapping[str, Any]",
        binding_factory: BindingFactory | None = None,
    ) -> None:
        """Validate configuration and apply defaults.

        Args:
            config: AramexConfig or a mapping of config fields.
            binding_factory: Override for binding construction (tests,
                alternative transports). Defaults to build_zeep_binding.

        Raises:
            AramexError: kind CONFIG if a required credential is missing or empty.
        """
        self._config = build_config(config)
        self._binding_factory = binding_factory or build_zeep_binding
        self._bindings: dict[ServiceName, ServiceBinding] = {}
        self._locks: dict[ServiceName, asyncio.Lock] = {}
        self._retired: list[ServiceBinding] = []
        self._generation = 0

    async def __aenter__(self) -> "SoapSessionManager":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.aclose()

    @property
    def config(self) -> AramexConfig:
        """Current configuration (immutable)."""
        return self._config

    @property
    def sandbox(self) -> bool:
        """Whether the sandbox environment is selected."""
        return self._config.sandbox

    def get_client_info(self) -> dict[str, Any]:
        """Project the current configuration into the wire ClientInfo block.

        Returns:
            A fresh dict on every call, in WSDL element order.
        """
        config = self._config
        return {
            "UserName": config.username,
            "Password": config.password,
            "Version": config.version,
            "AccountNumber": config.account_number,
            "AccountPin": config.account_pin,
            "AccountEntity": config.account_entity,
            "AccountCountryCode": config.account_country_code,
            "Source": config.source,
        }

    def has_binding(self, service: "ServiceName | str") -> bool:
        """Whether a live binding is cached for a service."""
        return coerce_service(service) in self._bindings

    def cached_binding(self, service: "ServiceName | str") -> ServiceBinding | None:
        """Return the live binding for a service without building one."""
        return self._bindings.get(coerce_service(service))

    async def resolve_binding(self, service: "ServiceName | str") -> ServiceBinding:
        """Return the cached binding for a service, building it on a miss.

        Args:
            service: Logical service.

        Returns:
            The live ServiceBinding for the current environment.

        Raises:
            ValueError: Unknown service name.
            AramexError: kind BINDING_CONSTRUCTION if construction failed.
                Nothing is cached in that case; the next call retries.
        """
        name = coerce_service(service)
        binding = self._bindings.get(name)
        if binding is not None:
            logger.debug("Reusing cached %s binding", name.value)
            return binding

        lock = self._locks.setdefault(name, asyncio.Lock())
        async with lock:
            while True:
                binding = self._bindings.get(name)
                if binding is not None:
                    return binding

                generation = self._generation
                config = self._config
                endpoint = endpoint_url(name, config.sandbox)
                try:
                    binding = await self._binding_factory(name, endpoint, config)
                except AramexError:
                    raise
                except Exception as e:
                    logger.warning(
                        "Failed to build %s binding for %s: %s",
                        name.value, endpoint, e,
                    )
                    raise AramexError.binding_construction(name.value, e) from e

                if generation != self._generation:
                    logger.warning(
                        "Discarding %s binding built for %s: environment changed "
                        "during construction",
                        name.value, endpoint,
                    )
                    self._retired.append(binding)
                    continue

                self._bindings[name] = binding
                logger.info(
                    "Built %s binding (env=%s, endpoint=%s)",
                    name.value, config.environment, endpoint,
                )
                return binding

    def set_environment(self, sandbox: bool) -> None:
        """Switch environment and drop every cached binding.

        All four services are dropped even if only one was in use or the
        flag did not change.

        Args:
            sandbox: True for sandbox, False for production.
        """
        self._config = self._config.model_copy(update={"sandbox": bool(sandbox)})
        self._generation += 1
        self.clear_bindings()
        logger.info("Aramex environment set to %s", self._config.environment)

    def clear_bindings(self) -> None:
        """Drop all cached bindings without touching configuration."""
        if self._bindings:
            self._retired.extend(self._bindings.values())
        self._bindings = {}

    async def aclose(self) -> None:
        """Close live and retired bindings and empty the cache."""
        self.clear_bindings()
        retired, self._retired = self._retired, []
        for binding in retired:
            try:
                await binding.aclose()
            except Exception as e:
                logger.warning(
                    "Failed to close %s binding: %s", binding.service.value, e,
                )
