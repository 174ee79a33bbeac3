"""
Soroban Domains SDK — Python
Resolve domains to on-chain records and manage per-domain key/value data.
"""

from .version import __version__  # noqa: F401

# Core config & errors
from .config import SDKConfig  # noqa: F401
from .errors import (  # noqa: F401
    CodecError,
    ConfigurationMissingError,
    DomainDataNotFoundError,
    DomainNotFoundError,
    SimulationError,
    SorobanDomainsError,
    UnsupportedValueTypeError,
)

# Types
from .types import (  # noqa: F401
    BytesValue,
    Domain,
    NumberValue,
    PreparedTransaction,
    Record,
    RecordKey,
    RecordType,
    StorageValue,
    StringValue,
    SubDomain,
)

# Nodes & codec
from .node import parse_domain  # noqa: F401
from .codec import encode_storage_value, scval_to_native, to_storage_value  # noqa: F401

# Client
from .client import SorobanDomainsSDK  # noqa: F401
from .rpc import SorobanRpc  # noqa: F401

__all__ = [
    "__version__",
    # Core
    "SDKConfig",
    "SorobanDomainsError", "ConfigurationMissingError", "DomainNotFoundError",
    "DomainDataNotFoundError", "UnsupportedValueTypeError", "SimulationError", "CodecError",
    # Types
    "Record", "RecordKey", "RecordType", "Domain", "SubDomain",
    "StorageValue", "BytesValue", "NumberValue", "StringValue",
    "PreparedTransaction",
    # Nodes & codec
    "parse_domain", "encode_storage_value", "scval_to_native", "to_storage_value",
    # Client
    "SorobanDomainsSDK", "SorobanRpc",
]
