#!/usr/bin/env python3
"""
LT-Signer Command Line Interface

Signs a request body file with HMAC-SHA256 and prints the LT-SIGNATURE
header to paste into an API client:

    HMAC_SECRET=... lt-signer body.json
    lt-signer body.json --verify <signature>

- Explicit argument parsing with validation
- Clear error messages for invalid inputs
- Exit code 0 on success, 1 on any failure
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from lt_signer.config import SignerConfig
from lt_signer.constants import APP_NAME, DESCRIPTION, EXIT_FAILURE, EXIT_OK, USAGE, VERSION
from lt_signer.exceptions import FileReadError, SignerError, UsageError
from lt_signer.signer import check_file, format_report, sign_file

logger = logging.getLogger(__name__)


class SignerArgumentParser(argparse.ArgumentParser):
    """Argument parser that reports bad input as UsageError (exit 1)."""

    def error(self, message):
        raise UsageError(f"{message}\n{USAGE}")


def create_parser() -> argparse.ArgumentParser:
    """
    Create the argument parser.

    The body path is optional at the argparse level so a missing path is
    reported as a UsageError. Parse errors are UsageErrors too, so every
    failure exits with 1.
    """
    parser = SignerArgumentParser(
        prog='lt-signer',
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument(
        '--version',
        action='version',
        version=f'{APP_NAME} v{VERSION}'
    )
    parser.add_argument(
        'body_path',
        nargs='?',
        help='Path to the request body file'
    )
    parser.add_argument(
        '--verify',
        metavar='SIGNATURE',
        help='Check SIGNATURE against the body instead of printing a new one'
    )
    return parser


def resolve_log_level(name: str) -> int:
    """Map a level name to its number, unknown names fall back to WARNING."""
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        return logging.WARNING
    return level


def configure_logging(level: str) -> None:
    logging.basicConfig(
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        level=resolve_log_level(level)
    )


def cmd_sign(body_path: str, config: SignerConfig) -> int:
    """
    Sign the body file and print the report.

    Returns:
        Exit code (0 for success)
    """
    result = sign_file(body_path, secret=config.secret, header_name=config.header_name)
    print(format_report(result))
    return EXIT_OK


def cmd_verify(body_path: str, signature: str, config: SignerConfig) -> int:
    """
    Verify a signature against the body file.

    Returns:
        Exit code (0 for success)
    """
    check_file(body_path, signature, secret=config.secret)
    print("✅ Signature OK")
    return EXIT_OK


def run(argv: Optional[List[str]] = None) -> int:
    """
    Parse arguments and dispatch, converting SignerError into exit codes.

    Args:
        argv: Argument list (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    config = SignerConfig.from_env()
    configure_logging(config.log_level)
    logger.debug(f"Configuration: {config.to_dict()}")

    try:
        # Anything after the body path is ignored
        args, extra = create_parser().parse_known_args(argv)
        if extra:
            logger.debug(f"Ignoring extra arguments: {extra}")

        if not args.body_path:
            raise UsageError(USAGE)

        if args.verify is not None:
            return cmd_verify(args.body_path, args.verify, config)
        return cmd_sign(args.body_path, config)

    except UsageError as e:
        logger.info(f"Usage error: {e.to_dict()}")
        print(f"❌ {e.message}", file=sys.stderr)
        return EXIT_FAILURE
    except FileReadError as e:
        logger.info(f"Failed to read body: {e.to_dict()}")
        print(f"❌ {e}", file=sys.stderr)
        return EXIT_FAILURE
    except SignerError as e:
        logger.info(f"Signing failed: {e.to_dict()}")
        print(f"❌ {e.message}", file=sys.stderr)
        return EXIT_FAILURE


def main() -> int:
    """Main entry point for CLI."""
    return run()


if __name__ == '__main__':
    sys.exit(main())
