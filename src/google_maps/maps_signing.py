"""
URL signing for Google Maps premier (client id) authentication.

The signature is an HMAC-SHA1 of the URL's path and query, keyed with the
client's base64url private key and appended as a ``signature`` parameter.
"""

import base64
import binascii
import hashlib
import hmac
from typing import Optional
from urllib.parse import urlsplit

from .maps_errors import InvalidPremierConfigurationError


def decode_url_safe_base64(value: str) -> bytes:
    """
    Decode a base64url string, tolerating stripped padding.
    
    Args:
        value: String using the ``-`` and ``_`` alphabet
        
    Returns:
        Decoded bytes
    """
    value = value.strip()
    padded = value + "=" * (-len(value) % 4)
    return base64.urlsafe_b64decode(padded)


def encode_url_safe_base64(value: bytes) -> str:
    """Encode bytes as base64url (``+`` -> ``-``, ``/`` -> ``_``), padded."""
    return base64.urlsafe_b64encode(value).decode("ascii")


def sign_url(url: str, premier_key: Optional[str]) -> str:
    """
    Sign a request URL with a premier private key.
    
    Args:
        url: Fully built request URL (scheme, host, path and query)
        premier_key: base64url encoded private key
        
    Returns:
        The URL with ``&signature=<sig>`` appended
        
    Raises:
        InvalidPremierConfigurationError: If the private key is missing or malformed
    """
    if not premier_key:
        raise InvalidPremierConfigurationError(
            "No private key set, configure MapsConfig.premier_key"
        )

    parts = urlsplit(url)
    # The "?" is part of the signed string even when the query is empty
    url_to_sign = f"{parts.path}?{parts.query}"

    try:
        raw_key = decode_url_safe_base64(premier_key)
    except binascii.Error as e:
        raise InvalidPremierConfigurationError(
            f"Private key is not valid base64url: {e}"
        ) from e

    digest = hmac.new(raw_key, url_to_sign.encode("utf-8"), hashlib.sha1).digest()
    signature = encode_url_safe_base64(digest)

    return f"{parts.scheme}://{parts.netloc}{url_to_sign}&signature={signature}".strip()
