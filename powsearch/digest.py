import hashlib
from typing_extensions import Protocol
from .error import ConfigurationError


class DigestFunction(Protocol):
    digest_size: int

    def digest(self, data: bytes) -> bytes:
        ...


class HashlibDigest(object):
    """
    Fixed-length digest backed by ``hashlib``.

    The algorithm is resolved once here, so an unavailable name fails
    before any search starts.
    """

    def __init__(self, algorithm: str = 'sha256') -> None:
        try:
            self._proto = hashlib.new(algorithm)
        except (ValueError, TypeError):
            raise ConfigurationError("%s hash algorithm isn't implemented on this system" % algorithm)
        if self._proto.digest_size == 0 or algorithm.lower().startswith('shake'):
            raise ConfigurationError("%s has a variable-length output, a fixed-length hash is required" % algorithm)
        self.algorithm = algorithm
        self.digest_size = self._proto.digest_size

    def digest(self, data: bytes) -> bytes:
        h = self._proto.copy()
        h.update(data)
        return h.digest()

    def __repr__(self) -> str:
        return 'HashlibDigest(%r)' % self.algorithm
