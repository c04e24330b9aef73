"""
Pytest configuration and fixtures for LT-Signer tests.

Provides:
- A clean signing environment (no HMAC_SECRET)
- Body file factories
"""

import sys
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Run every test without HMAC_SECRET or a log level override."""
    monkeypatch.delenv('HMAC_SECRET', raising=False)
    monkeypatch.delenv('LT_SIGNER_LOG_LEVEL', raising=False)
    yield


@pytest.fixture
def write_body(tmp_path):
    """Factory writing a body file and returning its path."""
    def _write(content, name='body.json'):
        path = tmp_path / name
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_bytes(content.encode('utf-8'))
        return path
    return _write


@pytest.fixture
def json_body(write_body):
    """Body file containing exactly {"a":1}."""
    return write_body('{"a":1}')
