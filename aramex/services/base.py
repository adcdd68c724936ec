"""Shared plumbing for the rate, shipping, tracking and location services.

Each domain service builds its request, hands it to the invoker with a
fresh ClientInfo block first, and turns ``HasErrors=true`` into an
AramexError of kind API carrying the notifications verbatim.
"""

import logging
from typing import Any

from aramex.errors import AramexError, format_notifications
from aramex.services.service_catalog import ServiceName
from aramex.services.soap_client import SoapMethodInvoker

logger = logging.getLogger(__name__)


class BaseAramexService:
    """Base class for domain services bound to one logical service.

    Attributes:
        service: Logical service the subclass talks to.
        _client: Invoker used for every call.
    """

    service: ServiceName

    def __init__(self, client: SoapMethodInvoker) -> None:
        """Initialize with the shared invoker.

        Args:
            client: SoapMethodInvoker owned by the SDK.
        """
        self._client = client

    def _request(self, transaction: dict[str, Any] | None = None, **parts: Any) -> dict[str, Any]:
        """Build a request body: ClientInfo, Transaction, then ``parts`` in order."""
        request: dict[str, Any] = {
            "ClientInfo": self._client.get_client_info(),
            "Transaction": transaction,
        }
        request.update(parts)
        return request

    async def _call(
        self,
        operation: str,
        request: dict[str, Any],
        failure_message: str,
    ) -> dict[str, Any]:
        """Invoke an operation and enforce the HasErrors contract.

        Args:
            operation: SOAP operation name.
            request: Full request including ClientInfo.
            failure_message: Message for the API error on HasErrors=true.

        Returns:
            The repaired response dict.

        Raises:
            AramexError: kind API when the response reports errors; other
                kinds propagate from the invoker unchanged.
        """
        response = await self._client.invoke(self.service, operation, request)
        if response is None:
            response = {}
        if response.get("HasErrors"):
            notifications = response.get("Notifications") or []
            logger.warning(
                "%s.%s returned errors: %s",
                self.service.value, operation, format_notifications(notifications),
            )
            raise AramexError.api(
                failure_message,
                notifications,
                service=self.service.value,
                operation=operation,
            )
        return response
