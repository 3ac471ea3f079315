"""
RSAES-OAEP encryption scheme (RFC 3447 section 7.1).

Combines EME-OAEP encoding with the raw RSA primitives over
``cryptography`` key objects. Ciphertexts produced here decrypt with
``cryptography``'s own ``padding.OAEP`` and vice versa.
"""

import logging
from typing import Optional, Union

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from ..crypto.hashing import HashAlgorithmLike
from ..crypto.utils import SeedFunction, fill_with_random, i2osp, os2ip
from .oaep import (
    DecodingError,
    MaskGenerationFunction,
    SCHEME_EME,
    eme_oaep_decode,
    eme_oaep_encode,
    max_message_length,
)


logger = logging.getLogger(__name__)

RSAKey = Union[rsa.RSAPublicKey, rsa.RSAPrivateKey]


class RSAEncryptionError(Exception):
    """Raised when an RSA primitive receives an out-of-range representative."""
    pass


def modulus_length(key: RSAKey) -> int:
    """Length in octets of the RSA modulus (k)."""
    return (key.key_size + 7) // 8


def rsaep(public_key: rsa.RSAPublicKey, m: int) -> int:
    """RSA encryption primitive: c = m^e mod n."""
    numbers = public_key.public_numbers()
    if m < 0 or m >= numbers.n:
        raise RSAEncryptionError("message representative out of range")
    return pow(m, numbers.e, numbers.n)


def rsadp(private_key: rsa.RSAPrivateKey, c: int) -> int:
    """RSA decryption primitive: m = c^d mod n."""
    numbers = private_key.private_numbers()
    n = numbers.public_numbers.n
    if c < 0 or c >= n:
        raise RSAEncryptionError("ciphertext representative out of range")
    return pow(c, numbers.d, n)


def max_plaintext_length(key: RSAKey, hash_algorithm: HashAlgorithmLike = None) -> int:
    """Largest message RSAES-OAEP can encrypt under ``key``."""
    return max_message_length(modulus_length(key), hash_algorithm, SCHEME_EME)


def rsaes_oaep_encrypt(key: RSAKey, message: bytes, label: bytes = b"",
                       hash_algorithm: HashAlgorithmLike = None,
                       mgf: Optional[MaskGenerationFunction] = None,
                       seed_function: SeedFunction = fill_with_random) -> bytes:
    """
    Encrypt a message with RSAES-OAEP.
    
    Args:
        key: Recipient's RSA public key (a private key is reduced to its public half)
        message: Message to encrypt
        label: Optional label associated with the message
        hash_algorithm: Hash algorithm (default SHA-1)
        mgf: Mask generation function (default MGF1 over ``hash_algorithm``)
        seed_function: Seed source for EME-OAEP
        
    Returns:
        Ciphertext of exactly k octets
    """
    if isinstance(key, rsa.RSAPrivateKey):
        key = key.public_key()
    
    k = modulus_length(key)
    em = eme_oaep_encode(message, label, k, hash_algorithm, mgf, seed_function)
    c = rsaep(key, os2ip(em))
    
    logger.debug(f"RSAES-OAEP encrypted {len(message)} bytes under {key.key_size}-bit key")
    return i2osp(c, k)


def rsaes_oaep_decrypt(private_key: rsa.RSAPrivateKey, ciphertext: bytes, label: bytes = b"",
                       hash_algorithm: HashAlgorithmLike = None,
                       mgf: Optional[MaskGenerationFunction] = None) -> bytes:
    """
    Decrypt an RSAES-OAEP ciphertext.
    
    Args:
        private_key: Recipient's RSA private key
        ciphertext: Ciphertext of exactly k octets
        label: Label the message was encrypted with
        hash_algorithm: Hash algorithm (default SHA-1)
        mgf: Mask generation function (default MGF1 over ``hash_algorithm``)
        
    Returns:
        Recovered message
        
    Raises:
        DecodingError: On any failure; the cause is never reported
    """
    k = modulus_length(private_key)
    if len(ciphertext) != k:
        raise DecodingError("decryption error")
    
    try:
        m = rsadp(private_key, os2ip(ciphertext))
    except RSAEncryptionError:
        raise DecodingError("decryption error")
    
    em = i2osp(m, k)
    return eme_oaep_decode(em, label, k, hash_algorithm, mgf)


def load_public_key(data: bytes) -> rsa.RSAPublicKey:
    """
    Load an RSA public key from PEM or DER bytes.
    
    Raises:
        ValueError: If the data is not an RSA public key
    """
    if data.lstrip().startswith(b"-----"):
        key = serialization.load_pem_public_key(data)
    else:
        key = serialization.load_der_public_key(data)
    if not isinstance(key, rsa.RSAPublicKey):
        raise ValueError("Not an RSA public key")
    return key


def load_private_key(data: bytes, password: Optional[bytes] = None) -> rsa.RSAPrivateKey:
    """
    Load an RSA private key from PEM or DER bytes.
    
    Raises:
        ValueError: If the data is not an RSA private key
    """
    if data.lstrip().startswith(b"-----"):
        key = serialization.load_pem_private_key(data, password=password)
    else:
        key = serialization.load_der_private_key(data, password=password)
    if not isinstance(key, rsa.RSAPrivateKey):
        raise ValueError("Not an RSA private key")
    return key
