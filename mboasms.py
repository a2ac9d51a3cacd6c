#!/usr/bin/env python3
"""MboaSMS - Cameroonian SMS marketing core.

Single entry point for the command line.

Usage:
    python mboasms.py --classify 650123456 "+237 655 12 34 56"
    python mboasms.py --send 650123456 --message "Hello" --sender MyShop
    python mboasms.py --status     # Show configuration report
    python mboasms.py --version    # Show version
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

sys.path.insert(0, str(Path(__file__).parent))

from src import __version__
from src.core.config import get_config, validate_config
from src.core.logging import get_logger, setup_logging
from src.core.phone import classify, is_valid_mobile, normalize_number


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for MboaSMS.

    Returns:
        Exit code (0 = success, non-zero = error)
    """
    parser = argparse.ArgumentParser(description="MboaSMS - Cameroonian SMS marketing core")
    parser.add_argument(
        "--classify", nargs="+", metavar="NUMBER", help="Normalize and classify phone numbers"
    )
    parser.add_argument("--send", metavar="PHONE", help="Send one SMS to PHONE")
    parser.add_argument("--message", help="Message body for --send")
    parser.add_argument("--sender", default="", help="Sender name for --send")
    parser.add_argument("--status", action="store_true", help="Show configuration report and exit")
    parser.add_argument("--version", action="store_true", help="Show version and exit")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)

    if args.version:
        print(f"MboaSMS v{__version__}")
        return 0

    if args.classify:
        for raw in args.classify:
            print(
                f"{raw!r}\t{normalize_number(raw) or '-'}\t"
                f"{'valid' if is_valid_mobile(raw) else 'invalid'}\t{classify(raw).value}"
            )
        return 0

    config = get_config()
    console_level = logging.DEBUG if (args.debug or config.debug) else logging.INFO
    setup_logging(log_dir=config.log_path, console_level=console_level)
    logger = get_logger("main")

    issues = validate_config(config)
    for issue in issues:
        if issue.startswith("CRITICAL:"):
            logger.error(f"Configuration: {issue}")
        else:
            logger.warning(f"Configuration issue: {issue}")

    if args.status:
        from src.integrations.mboa_sms import MboaSMSClient

        client = MboaSMSClient()
        print(f"\nMboaSMS v{__version__} - Status\n")
        print(f"  Gateway URL:     {config.mboa_api_url}")
        print(f"  Gateway ready:   {'yes' if client.is_configured() else 'no'}")
        if client.is_configured():
            reachable = client.health_check()
            print(f"  Gateway reached: {'yes' if reachable else 'no'}")
        print(f"  Dry run:         {'yes' if config.dry_run else 'no'}")
        print(f"  Fallback sender: {config.fallback_sender}")
        if issues:
            print(f"\nConfiguration issues ({len(issues)}):")
            for issue in issues:
                print(f"  ! {issue}")
        print()
        return 0

    if args.send:
        if not args.message:
            parser.error("--send requires --message")

        from src.engine.messaging import send_sms_to_contact

        result = send_sms_to_contact(args.send, args.message, args.sender)
        print(
            f"{'sent' if result.success else 'failed'}: {result.message} "
            f"(sender={result.sender_name or '-'}, carrier={result.carrier.value})"
        )
        return 0 if result.success else 1

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
