"""vaultkv_core - pure-stdlib version handling for Vault key-value clients."""

__version__ = "0.1.0"

from .version import (
    Version,
    VersionError, InvalidVersionError, MalformedVersionError,
    parse, compare, to_string,
)
from .kv_operations import KeyValueBackend, KeyValueOperationsSupport
