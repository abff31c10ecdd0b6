"""Decode and validate ISO 3779 Vehicle Identification Numbers."""

from vindecode._internal.vin import normalize
from vindecode.api.errors import ConfigError, GatewayError, VinDecodeError
from vindecode.api.gateway import ExtendedInfoGateway
from vindecode.api.nhtsa import NHTSAClient
from vindecode.models.vin import VIN
from vindecode.validator import compute_check_digit, is_valid

__version__ = "0.1.0"

__all__ = [
    "VIN",
    "ConfigError",
    "ExtendedInfoGateway",
    "GatewayError",
    "NHTSAClient",
    "VinDecodeError",
    "__version__",
    "compute_check_digit",
    "is_valid",
    "normalize",
]
