"""Generic Aramex SOAP method invoker.

Dispatches a named operation on a logical service and returns a
plain-dict result with the SOAP envelope wrapper stripped and the
known singleton/list serialization ambiguity repaired.

Example:
    invoker = SoapMethodInvoker(SoapSessionManager(config))
    result = await invoker.invoke("rate", "CalculateRate", request)
    if result["HasErrors"]:
        ...
"""

import asyncio
import logging
from typing import Any

from lxml import etree
from zeep.helpers import serialize_object

from aramex.errors import AramexError
from aramex.services.service_catalog import ServiceName, coerce_service
from aramex.services.soap_session import ServiceBinding, SoapSessionManager
from aramex.utils.redaction import redact_envelope, redact_for_logging

logger = logging.getLogger(__name__)

# Nested (wrapper, inner) positions that collapse to a bare object when
# the wire list holds exactly one element.
_LIST_REPAIRS: tuple[tuple[str, str], ...] = (
    ("Shipments", "ProcessedShipment"),
    ("Notifications", "Notification"),
)


def unwrap_envelope(operation: str, raw: Any) -> Any:
    """Strip the ``<operation>Result`` wrapper if present.

    Args:
        operation: Operation name the result belongs to.
        raw: Serialized operation result.

    Returns:
        The wrapped value, or ``raw`` unchanged for bare results.
    """
    key = f"{operation}Result"
    if isinstance(raw, dict) and key in raw:
        return raw[key]
    return raw


def repair_response(result: Any) -> Any:
    """Restore list shape for Shipments and Notifications.

    ``{"Shipments": {"ProcessedShipment": {...}}}`` becomes
    ``{"Shipments": [{...}]}``; a wrapper already holding a list is
    flattened the same way; a top-level value that is already a list is
    left as-is; an absent wrapper stays absent. A wrapper present with
    no inner element (zeep yields a None or missing inner value for an
    empty array) becomes an empty list. A null wrapper stays null. Nothing
    else is touched.

    Args:
        result: Unwrapped operation result.

    Returns:
        A shallow copy of ``result`` with the two positions repaired, or
        ``result`` itself when it is not a dict.
    """
    if not isinstance(result, dict):
        return result

    repaired = dict(result)
    for wrapper_key, inner_key in _LIST_REPAIRS:
        if wrapper_key not in repaired:
            continue
        wrapper = repaired[wrapper_key]
        if not isinstance(wrapper, dict):
            continue
        inner = wrapper.get(inner_key)
        if inner is None:
            repaired[wrapper_key] = []
        elif isinstance(inner, list):
            repaired[wrapper_key] = inner
        else:
            repaired[wrapper_key] = [inner]
    return repaired


class SoapMethodInvoker:
    """Invokes Aramex SOAP operations through a session's bindings.

    Attributes:
        _session: SoapSessionManager owning config and binding cache.
    """

    def __init__(self, session: SoapSessionManager) -> None:
        """Initialize invoker.

        Args:
            session: Session manager to resolve bindings from.
        """
        self._session = session

    @property
    def session(self) -> SoapSessionManager:
        """The underlying session manager."""
        return self._session

    def get_client_info(self) -> dict[str, Any]:
        """Fresh ClientInfo block for the current configuration."""
        return self._session.get_client_info()

    async def invoke(
        self,
        service: "ServiceName | str",
        operation: str,
        request: dict[str, Any],
    ) -> Any:
        """Call one remote operation and return the repaired result.

        Args:
            service: Logical service hosting the operation.
            operation: Exact, case-sensitive operation name.
            request: Normalized request; each key is a request part.

        Returns:
            Repaired result (usually a dict with HasErrors/Notifications),
            or None when the operation returned nothing.

        Raises:
            AramexError: BINDING_CONSTRUCTION propagated from the session;
                OPERATION_NOT_FOUND before any network call;
                TRANSPORT for faults, network errors and timeouts.
        """
        name = coerce_service(service)
        binding = await self._session.resolve_binding(name)

        method = binding.operations.get(operation)
        if method is None:
            raise AramexError.operation_not_found(name.value, operation)

        timeout = self._session.config.timeout
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Invoking %s.%s with %s",
                name.value, operation, redact_for_logging(request),
            )
        try:
            if timeout is not None:
                raw = await asyncio.wait_for(method(**request), timeout=timeout)
            else:
                raw = await method(**request)
        except Exception as e:
            logger.warning("SOAP call %s.%s failed: %s", name.value, operation, e)
            raise AramexError.transport(name.value, operation, e) from e
        finally:
            self._trace(binding, operation)

        result = unwrap_envelope(operation, serialize_object(raw, dict))
        return repair_response(result)

    def last_exchange(self, service: "ServiceName | str") -> tuple[str | None, str | None]:
        """Most recent raw request/response envelopes for a service.

        Only recorded when the config enables debug_wire. Credentials are
        redacted.

        Args:
            service: Logical service.

        Returns:
            (request_xml, response_xml); either may be None.
        """
        binding = self._session.cached_binding(service)
        if binding is None:
            return None, None
        return self._render_history(binding)

    def _trace(self, binding: ServiceBinding, operation: str) -> None:
        """Log the last wire exchange at DEBUG. Never raises."""
        if binding.history is None or not logger.isEnabledFor(logging.DEBUG):
            return
        try:
            sent, received = self._render_history(binding)
        except Exception as e:
            logger.debug("Could not render SOAP trace for %s: %s", operation, e)
            return
        logger.debug(
            "SOAP %s.%s request:\n%s\nresponse:\n%s",
            binding.service.value, operation, sent, received,
        )

    @staticmethod
    def _render_history(binding: ServiceBinding) -> tuple[str | None, str | None]:
        history = binding.history
        if history is None:
            return None, None
        try:
            last_sent, last_received = history.last_sent, history.last_received
        except IndexError:
            # nothing recorded yet
            return None, None

        def _render(entry: Any) -> str | None:
            if not entry or entry.get("envelope") is None:
                return None
            xml = etree.tostring(entry["envelope"], pretty_print=True, encoding="unicode")
            return redact_envelope(xml)

        return _render(last_sent), _render(last_received)
