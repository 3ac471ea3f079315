"""
MGF1 mask generation function (RFC 2437 Appendix B, RFC 3447 B.2.1).

Stretches a seed into a mask of arbitrary length by hashing the seed
together with a 4-octet big-endian counter and concatenating the digests.
"""

from .hashing import HashAlgorithmLike, HashFunction, resolve_hash_algorithm
from .utils import i2osp


class MaskTooLong(ValueError):
    """Raised when the requested mask exceeds 2^32 * hLen octets."""
    pass


class MGF1:
    """
    MGF1 bound to a hash algorithm.
    
    Mirrors ``cryptography.hazmat.primitives.asymmetric.padding.MGF1``:
    the instance carries the algorithm, ``generate()`` produces the mask.
    """
    
    def __init__(self, algorithm: HashAlgorithmLike = None):
        """
        Args:
            algorithm: Hash algorithm used to derive the mask (default SHA-1)
        """
        self.algorithm = resolve_hash_algorithm(algorithm)
    
    @property
    def digest_size(self) -> int:
        return self.algorithm.digest_size
    
    def generate(self, seed: bytes, mask_length: int) -> bytes:
        """
        Derive a mask of ``mask_length`` octets from ``seed``.
        
        Args:
            seed: Seed from which the mask is generated
            mask_length: Intended length of the mask in octets
            
        Returns:
            Mask bytes of exactly ``mask_length`` octets
            
        Raises:
            MaskTooLong: If mask_length > 2^32 * hLen
            ValueError: If mask_length is negative
        """
        if mask_length < 0:
            raise ValueError("Mask length must be non-negative")
        
        h_len = self.digest_size
        if mask_length > (2 ** 32) * h_len:
            raise MaskTooLong("mask too long")
        
        seed = bytes(seed)
        blocks = []
        for counter in range(-(-mask_length // h_len)):
            hash_function = HashFunction(self.algorithm)
            hash_function.update(seed)
            hash_function.update(i2osp(counter, 4))
            blocks.append(hash_function.digest())
        
        return b"".join(blocks)[:mask_length]
    
    __call__ = generate
    
    def __repr__(self) -> str:
        return f"MGF1({self.algorithm.name})"


def mgf1(seed: bytes, mask_length: int, algorithm: HashAlgorithmLike = None) -> bytes:
    """Functional form of ``MGF1(algorithm).generate(seed, mask_length)``."""
    return MGF1(algorithm).generate(seed, mask_length)
