"""LT-Signer Hash Utilities

HMAC-SHA256 signing and verification of request bodies.
"""

import hashlib
import hmac
import re

HEX_RE = re.compile(r'(?:[0-9a-fA-F]{2})+')


def compute_signature(body: str, secret: str) -> str:
    """Compute the HMAC-SHA256 signature of a body.

    Args:
        body: Body text to sign (already trimmed)
        secret: HMAC key

    Returns:
        Lowercase hexadecimal HMAC-SHA256 digest
    """
    return hmac.new(
        secret.encode('utf-8'), body.encode('utf-8'), hashlib.sha256
    ).hexdigest()


def verify_signature(body: str, secret: str, signature: str) -> bool:
    """Check a hex signature against a body using a constant-time compare.

    Args:
        body: Body text that was signed
        secret: HMAC key
        signature: Candidate hex signature (either case, no whitespace)

    Returns:
        True if the signature matches, False otherwise or if it is not hex
    """
    # bytes.fromhex() skips whitespace, a header value with spaces is invalid
    if not HEX_RE.fullmatch(signature):
        return False
    candidate = bytes.fromhex(signature)

    expected = hmac.new(
        secret.encode('utf-8'), body.encode('utf-8'), hashlib.sha256
    ).digest()
    return hmac.compare_digest(candidate, expected)
