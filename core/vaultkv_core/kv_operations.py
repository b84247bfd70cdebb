"""
kv_operations.py - Vault key-value operations contract (pure stdlib)

Declares the list/get/delete surface shared by the key-value backends
and picks the backend variant a given Vault server supports.
Transport, authentication and path prefixing belong to implementations.
"""

from __future__ import annotations

import abc
import enum
import logging

from .version import Version, parse

logger = logging.getLogger(__name__)


class KeyValueBackend(enum.Enum):
    """Key-value secrets engine variants, oldest first.

    KV_1 has no version floor: every server speaks it, so it is the
    fallback when nothing newer is supported.
    """

    KV_1 = ("1", "0")
    KV_2 = ("2", "0.10.0")

    def __init__(self, api_version, minimum_server_version):
        self.api_version = api_version
        self._minimum = parse(minimum_server_version)

    @property
    def minimum_server_version(self) -> Version:
        """Oldest Vault server version that ships this backend."""
        return self._minimum

    def is_supported_by(self, server_version) -> bool:
        return _as_version(server_version).is_greater_than_or_equal_to(self._minimum)

    @classmethod
    def for_server_version(cls, server_version) -> KeyValueBackend:
        """Return the newest backend the given server supports.

        Args:
            server_version: Version or version string, e.g. "1.4.2".

        Raises:
            VersionError: If server_version is a string that does not parse.
        """
        version = _as_version(server_version)
        selected = cls.KV_1
        for backend in cls:
            if backend.is_supported_by(version):
                selected = backend
        logger.debug("Selected %s for Vault server %s", selected.name, version)
        return selected

    @classmethod
    def from_name(cls, name) -> KeyValueBackend:
        """Look up a backend by "1", "2", "kv_1", "KV_2" or "kv-v2"."""
        key = str(name).strip().lower().replace("-", "_")
        for prefix in ("kv_v", "kv_", "v"):
            if key.startswith(prefix):
                key = key[len(prefix):]
                break
        for backend in cls:
            if backend.api_version == key:
                return backend
        raise ValueError(f"Unknown key-value backend: {name!r}")


def _as_version(value) -> Version:
    if isinstance(value, Version):
        return value
    return parse(value)


class KeyValueOperationsSupport(abc.ABC):
    """Basic set of operations against a Vault key-value backend.

    Paths are relative; implementations prepend the operation-specific
    prefix of their backend before issuing requests.
    """

    @property
    @abc.abstractmethod
    def backend(self) -> KeyValueBackend:
        """The backend variant this implementation speaks."""

    @abc.abstractmethod
    def list(self, path: str) -> list[str] | None:
        """Enumerate keys under path.

        Returns:
            Key names, or None if the path does not exist.
        """

    @abc.abstractmethod
    def get(self, path: str) -> object | None:
        """Read the secret at path.

        Returns:
            The secret payload, or None if the path does not exist.
        """

    @abc.abstractmethod
    def delete(self, path: str) -> None:
        """Delete the secret at path. Deleting a missing path is a no-op."""

    @staticmethod
    def _require_path(path):
        """Validate a relative path argument and return it."""
        if not isinstance(path, str) or not path:
            raise ValueError(f"Path must not be empty, got {path!r}")
        return path
