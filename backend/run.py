#!/usr/bin/env python3
"""
Entry point for running the Expense Tracker API.

Host, port and log level default to the EXPENSE_TRACKER_* settings.

Usage:
    python run.py [--host HOST] [--port PORT] [--reload] [--open] [--qr]
"""

import argparse
import webbrowser

import qrcode
import uvicorn
from sqlalchemy.engine import make_url

from expense_tracker.config import get_settings

LOOPBACK_HOSTS = {"127.0.0.1", "localhost", "::1"}


def print_qr_code(url: str) -> None:
    """Print a QR code of the API URL, for opening it from a phone on the LAN."""
    qr = qrcode.QRCode(border=1, box_size=1)
    qr.add_data(url)
    qr.make(fit=True)
    qr.print_ascii(invert=True)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Expense Tracker API server")
    parser.add_argument("--host", default=settings.host, help=f"Host to bind to (default {settings.host})")
    parser.add_argument("--port", type=int, default=settings.port, help=f"Port to run on (default {settings.port})")
    parser.add_argument("--reload", action="store_true", help="Restart on code changes (development)")
    parser.add_argument("--open", action="store_true", help="Open the API docs in a browser")
    parser.add_argument("--qr", action="store_true", help="Print a QR code of the URL")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    settings = get_settings()
    url = f"http://{args.host}:{args.port}"

    print(f"Expense Tracker API on {url} (docs at {url}/docs)")
    print(f"Database: {make_url(settings.database_url).render_as_string(hide_password=True)}")

    if args.qr:
        if args.host in LOOPBACK_HOSTS:
            print("QR code skipped: bind to a LAN address with --host to reach it from another device")
        else:
            print_qr_code(url)

    if args.open:
        webbrowser.open(f"{url}/docs")

    uvicorn.run(
        "expense_tracker.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
