"""LT-Signer: HMAC-SHA256 LT-SIGNATURE header generator."""
