#!/usr/bin/env python3
"""
SecureVault Password Strength

Scores candidate passwords, lists improvement suggestions and decides
whether a password is strong enough for account creation.

Usage:
    python -m securevault.main --check             # Prompt for a password and score it
    python -m securevault.main --check PASSWORD    # Score the given password
    python -m securevault.main --check --json      # Print the full JSON report
    python -m securevault.main --web               # Launch Flask web server
    python -m securevault.main --help              # Show help
"""

import argparse
import getpass
import json
import logging
import sys

from .password_strength import calculate_password_strength
from .report import build_report
from .settings import get_settings

SETTINGS = get_settings()

def setup_logging(level=logging.INFO):
    """Setup logging configuration"""
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout),
            logging.FileHandler(str(SETTINGS.log_path), mode='a', encoding='utf-8')
        ]
    )

def read_password(value=None) -> str:
    """Use the command-line value, or prompt without echo"""
    if value is not None:
        return value
    return getpass.getpass("Password: ")

def check_password(password: str, as_json: bool = False) -> int:
    """Print the assessment and return the process exit code"""
    report = build_report(password)
    strength = calculate_password_strength(password)
    logging.getLogger("securevault.cli").debug(
        "Checked password: level=%s length=%s", strength.level, len(password)
    )

    if as_json:
        print(json.dumps(report, indent=2, ensure_ascii=False))
    else:
        print(f"Strength: {strength.label} ({strength.percentage}%)")
        for item in report['feedback']:
            print(f"  - {item}")
        if report['strong_enough']:
            print("Strong enough for account creation.")
        else:
            print("Not strong enough for account creation.")

    return 0 if report['strong_enough'] else 1


def launch_web(host: str = "127.0.0.1", port: int = 8000, debug: bool = False):
    """Start the Flask web application."""
    from .flask_app import app

    logger = logging.getLogger("securevault.web")
    logger.info("Starting Flask web server on %s:%s (debug=%s)", host, port, debug)
    app.run(host=host, port=port, debug=debug)


def main():
    """Main application entry point"""
    parser = argparse.ArgumentParser(
        description="SecureVault password strength checker",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  securevault --check              # Prompt for a password
  securevault --check 'Abcdefg1!'  # Score a password given inline
  securevault --check --json       # Print the JSON report
  securevault --web --port 9000    # Serve the strength meter and signup form
        """
    )

    parser.add_argument(
        '--check', '-c',
        nargs='?',
        const=None,
        default=argparse.SUPPRESS,
        metavar='PASSWORD',
        help='Score a password (prompted for when omitted) and exit'
    )

    parser.add_argument(
        '--json',
        action='store_true',
        help='Print the check result as a JSON report'
    )

    parser.add_argument(
        '--web', '--flask',
        dest='web',
        action='store_true',
        help='Start the Flask web server'
    )

    parser.add_argument(
        '--host',
        default='127.0.0.1',
        help='Host interface for the Flask web server (default: 127.0.0.1)'
    )

    parser.add_argument(
        '--port',
        type=int,
        default=8000,
        help='Port for the Flask web server (default: 8000)'
    )

    parser.add_argument(
        '--debug',
        action='store_true',
        help='Run the Flask web server in debug mode (implies --web)'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable verbose logging'
    )

    args = parser.parse_args()

    if args.debug:
        args.web = True

    # Setup logging
    log_level = logging.DEBUG if (args.verbose or args.debug) else logging.INFO
    setup_logging(log_level)

    if hasattr(args, 'check'):
        sys.exit(check_password(read_password(args.check), as_json=args.json))

    if args.web:
        launch_web(host=args.host, port=args.port, debug=args.debug)
        return

    print("No mode selected. Use --check or --web.")
    parser.print_help()

if __name__ == "__main__":
    main()
