"""
Padding schemes: basic OAEP, EME-OAEP and RSAES-OAEP.
"""

from .oaep import oaep_encode, oaep_decode, eme_oaep_encode, eme_oaep_decode, max_message_length
from .rsaes import rsaes_oaep_encrypt, rsaes_oaep_decrypt

__all__ = [
    'oaep_encode',
    'oaep_decode',
    'eme_oaep_encode',
    'eme_oaep_decode',
    'max_message_length',
    'rsaes_oaep_encrypt',
    'rsaes_oaep_decrypt',
]
