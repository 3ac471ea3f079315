"""
Hash function capability for the OAEP encoders.

Wraps ``cryptography`` hash algorithms behind a small streaming interface:
a fresh ``HashFunction`` is created for every digest, exposes its
``digest_size`` up front, and supports ``update()`` followed by ``digest()``.
"""

from typing import Optional, Type, Union

from cryptography.hazmat.primitives import hashes


HashAlgorithmLike = Union[hashes.HashAlgorithm, Type[hashes.HashAlgorithm], str, None]

DEFAULT_HASH_NAME = "sha1"

_ALGORITHMS = {
    "sha1": hashes.SHA1,
    "sha224": hashes.SHA224,
    "sha256": hashes.SHA256,
    "sha384": hashes.SHA384,
    "sha512": hashes.SHA512,
    "sha512_224": hashes.SHA512_224,
    "sha512_256": hashes.SHA512_256,
    "sha3_224": hashes.SHA3_224,
    "sha3_256": hashes.SHA3_256,
    "sha3_384": hashes.SHA3_384,
    "sha3_512": hashes.SHA3_512,
}

# Maximum input length in octets (FIPS 180-4 message length limits)
_INPUT_LIMITS = {
    "sha1": 2 ** 61 - 1,
    "sha224": 2 ** 61 - 1,
    "sha256": 2 ** 61 - 1,
    "sha384": 2 ** 125 - 1,
    "sha512": 2 ** 125 - 1,
    "sha512-224": 2 ** 125 - 1,
    "sha512-256": 2 ** 125 - 1,
}


class UnsupportedHashError(ValueError):
    """Raised when a hash algorithm name cannot be resolved."""
    pass


def _normalize_name(name: str) -> str:
    return "".join(c for c in name.strip().lower() if c not in "-_/ ")


_LOOKUP = {_normalize_name(name): factory for name, factory in _ALGORITHMS.items()}


def supported_hash_names() -> list:
    """Return the hash names accepted by ``resolve_hash_algorithm``."""
    return sorted(_ALGORITHMS)


def resolve_hash_algorithm(algorithm: HashAlgorithmLike = None) -> hashes.HashAlgorithm:
    """
    Turn a hash algorithm name, class or instance into a ``cryptography`` instance.
    
    Args:
        algorithm: A ``HashAlgorithm`` instance, a ``HashAlgorithm`` subclass,
            a name such as ``"sha256"``, or None for the default (SHA-1)
            
    Returns:
        HashAlgorithm instance
        
    Raises:
        UnsupportedHashError: If the name is unknown or the algorithm has
            no fixed digest size
    """
    if algorithm is None:
        algorithm = DEFAULT_HASH_NAME

    if isinstance(algorithm, str):
        try:
            return _LOOKUP[_normalize_name(algorithm)]()
        except KeyError:
            raise UnsupportedHashError(
                f"Unsupported hash algorithm: {algorithm!r} "
                f"(expected one of {', '.join(supported_hash_names())})"
            )

    if isinstance(algorithm, type) and issubclass(algorithm, hashes.HashAlgorithm):
        try:
            return algorithm()
        except TypeError as e:
            raise UnsupportedHashError(f"Cannot instantiate {algorithm.__name__}: {e}")

    if isinstance(algorithm, hashes.HashAlgorithm):
        if isinstance(algorithm, hashes.ExtendableOutputFunction):
            raise UnsupportedHashError(f"{algorithm.name} has no fixed digest size")
        return algorithm

    raise UnsupportedHashError(f"Not a hash algorithm: {algorithm!r}")


def hash_input_limit(algorithm: hashes.HashAlgorithm) -> Optional[int]:
    """
    Get the maximum number of octets the algorithm accepts as input.
    
    Returns:
        Limit in octets, or None if the algorithm imposes no practical limit
    """
    return _INPUT_LIMITS.get(algorithm.name)


class HashFunction:
    """
    Single-use streaming hash.
    
    Each instance hashes exactly one input; create a new one per digest.
    """
    
    def __init__(self, algorithm: HashAlgorithmLike = None):
        self.algorithm = resolve_hash_algorithm(algorithm)
        self._context = hashes.Hash(self.algorithm)
    
    @property
    def name(self) -> str:
        return self.algorithm.name
    
    @property
    def digest_size(self) -> int:
        """Digest length in octets (hLen)."""
        return self.algorithm.digest_size
    
    def update(self, data: bytes) -> "HashFunction":
        self._context.update(bytes(data))
        return self
    
    def digest(self) -> bytes:
        """Finalize and return the digest; the instance cannot be reused."""
        return self._context.finalize()
