"""Static catalog of the four Aramex SOAP services.

Maps each logical service to its packaged WSDL document, the binding
declared in that document, and one endpoint URL per environment.
WSDL files are always read from the package; they are never fetched
from the remote side at runtime.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from types import MappingProxyType

_WSDL_DIR = Path(__file__).resolve().parent.parent / "wsdl"

ARAMEX_NAMESPACE = "http://ws.aramex.net/ShippingAPI/v1/"

_SANDBOX_BASE_URL = "https://ws.sbx.aramex.net/shippingapi.v2"
_PRODUCTION_BASE_URL = "https://ws.aramex.net/shippingapi.v2"


class ServiceName(str, Enum):
    """Logical service identifiers."""

    RATE = "rate"
    SHIPPING = "shipping"
    TRACKING = "tracking"
    LOCATION = "location"


@dataclass(frozen=True)
class ServiceDefinition:
    """WSDL document and endpoints for one logical service.

    Attributes:
        wsdl_file: File name under the packaged wsdl/ directory.
        binding_name: Qualified name of the SOAP binding in that WSDL.
        sandbox_url: Endpoint for the sandbox environment.
        production_url: Endpoint for the production environment.
    """

    wsdl_file: str
    binding_name: str
    sandbox_url: str
    production_url: str


def _definition(wsdl_file: str, path: str) -> ServiceDefinition:
    return ServiceDefinition(
        wsdl_file=wsdl_file,
        binding_name=f"{{{ARAMEX_NAMESPACE}}}BasicHttpBinding_Service_1_0",
        sandbox_url=f"{_SANDBOX_BASE_URL}/{path}/service_1_0.svc",
        production_url=f"{_PRODUCTION_BASE_URL}/{path}/service_1_0.svc",
    )


SERVICE_CATALOG: MappingProxyType[ServiceName, ServiceDefinition] = MappingProxyType({
    ServiceName.SHIPPING: _definition("shipping-services-api-wsdl.wsdl", "shipping"),
    ServiceName.TRACKING: _definition("shipments-tracking-api-wsdl.wsdl", "tracking"),
    ServiceName.RATE: _definition("aramex-rates-calculator-wsdl.wsdl", "ratecalculator"),
    ServiceName.LOCATION: _definition("location-api-wsdl.wsdl", "location"),
})


def coerce_service(service: "ServiceName | str") -> ServiceName:
    """Normalise a service argument to a ServiceName.

    Args:
        service: ServiceName or its string value ("rate", "shipping", ...).

    Returns:
        The matching ServiceName.

    Raises:
        ValueError: If the name is not one of the four services.
    """
    try:
        return ServiceName(service)
    except ValueError:
        valid = ", ".join(s.value for s in ServiceName)
        raise ValueError(f"Unknown Aramex service '{service}'. Expected one of: {valid}") from None


def get_definition(service: "ServiceName | str") -> ServiceDefinition:
    """Return the catalog entry for a service."""
    return SERVICE_CATALOG[coerce_service(service)]


def wsdl_path(service: "ServiceName | str") -> Path:
    """Absolute path of the packaged WSDL document for a service."""
    return _WSDL_DIR / get_definition(service).wsdl_file


def endpoint_url(service: "ServiceName | str", sandbox: bool) -> str:
    """Endpoint URL for a service in the given environment.

    Args:
        service: Logical service.
        sandbox: True for the sandbox environment, False for production.

    Returns:
        The endpoint URL.
    """
    definition = get_definition(service)
    return definition.sandbox_url if sandbox else definition.production_url
