"""
LT-Signer core

Reads a request body file, signs it with HMAC-SHA256 and formats the
report printed by the CLI.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from lt_signer.config import resolve_secret
from lt_signer.constants import SIGNATURE_HEADER
from lt_signer.exceptions import FileReadError, SignatureMismatchError
from lt_signer.hashing import compute_signature, verify_signature

logger = logging.getLogger(__name__)

# Whitespace removed from both ends of the body. Includes the BOM and the
# Unicode space separators, excludes the \x1c-\x1f separators str.strip() drops.
TRIM_CHARS = (
    '\t\n\v\f\r \u00a0\u1680\u2000\u2001\u2002\u2003\u2004\u2005'
    '\u2006\u2007\u2008\u2009\u200a\u2028\u2029\u202f\u205f\u3000\ufeff'
)

SEPARATOR = "-" * 28


@dataclass(frozen=True)
class SignatureResult:
    """Outcome of signing one body file."""
    body_path: str
    secret: str
    signature: str
    header_name: str = SIGNATURE_HEADER

    def header_line(self) -> str:
        return f"{self.header_name}: {self.signature}"


def read_body(path: Union[str, Path]) -> str:
    """
    Read a body file as UTF-8 text and trim surrounding whitespace.

    Line endings inside the body are kept as-is so the signature covers
    the exact bytes a client sends.

    Args:
        path: Path to the body file

    Returns:
        Trimmed body text

    Raises:
        FileReadError: If the file cannot be read or is not valid UTF-8
    """
    try:
        raw = Path(path).read_bytes()
        text = raw.decode('utf-8')
    except (OSError, UnicodeDecodeError) as e:
        raise FileReadError(
            f"Error reading file: {path}",
            context={'path': str(path)},
            original_error=e
        ) from e

    body = text.strip(TRIM_CHARS)
    logger.debug(f"Read {len(raw)} bytes from {path}, {len(body)} chars after trim")
    return body


def sign_file(
    path: Union[str, Path],
    secret: Optional[str] = None,
    header_name: str = SIGNATURE_HEADER
) -> SignatureResult:
    """
    Sign the body stored at ``path``.

    Args:
        path: Path to the body file
        secret: HMAC key, resolved from the environment when None
        header_name: Header the signature is sent in

    Returns:
        SignatureResult with the path, secret and hex signature
    """
    body = read_body(path)
    if secret is None:
        secret = resolve_secret()
    return SignatureResult(
        body_path=str(path),
        secret=secret,
        signature=compute_signature(body, secret),
        header_name=header_name
    )


def check_file(path: Union[str, Path], signature: str, secret: Optional[str] = None) -> None:
    """
    Verify a candidate signature against the body stored at ``path``.

    Raises:
        FileReadError: If the file cannot be read
        SignatureMismatchError: If the signature does not match
    """
    body = read_body(path)
    if secret is None:
        secret = resolve_secret()
    if not verify_signature(body, secret, signature):
        raise SignatureMismatchError(
            "Signature mismatch",
            context={'path': str(path)}
        )


def format_report(result: SignatureResult) -> str:
    """Build the multi-line report printed after a successful signing."""
    lines = [
        "✅ HMAC Signature Generated",
        SEPARATOR,
        f"Body File : {result.body_path}",
        f"Secret    : {result.secret}",
        f"Signature : {result.signature}",
        SEPARATOR,
        "",
        "👉 Use this header in your API client:",
        result.header_line(),
    ]
    return "\n".join(lines)
