#!/usr/bin/env python3
"""
Bill bot startup script.

Usage:
    # Run on the default port
    python run_server.py

    # Run with custom port
    python run_server.py --port 8001

    # Run with reload for development
    python run_server.py --reload
"""

import argparse
import os

from dotenv import load_dotenv


def run_server(host: str = "0.0.0.0", port: int = 8000, reload: bool = False):
    """Start uvicorn with the bill bot app."""
    load_dotenv()
    database_url = os.getenv("DATABASE_URL", "sqlite:///./bill_bot.db")

    print(f"\n{'=' * 50}")
    print("Starting Bill Bot")
    print(f"  Port: {port}")
    print(f"  Database: {database_url}")
    print(f"{'=' * 50}\n")

    # Ensure data directory exists
    if database_url.startswith("sqlite:///./"):
        db_path = database_url.replace("sqlite:///./", "")
        db_dir = os.path.dirname(db_path)
        if db_dir:
            os.makedirs(db_dir, exist_ok=True)

    import uvicorn

    uvicorn.run(
        "bill_bot.main:app",
        host=host,
        port=port,
        reload=reload,
    )


def main():
    parser = argparse.ArgumentParser(
        description="Run the bill bot API server"
    )
    parser.add_argument(
        "--host",
        default="0.0.0.0",
        help="Host to bind to (default: 0.0.0.0)",
    )
    parser.add_argument(
        "--port",
        "-p",
        type=int,
        default=int(os.getenv("PORT", "8000")),
        help="Port to run on (default: $PORT or 8000)",
    )
    parser.add_argument(
        "--reload",
        "-r",
        action="store_true",
        help="Enable auto-reload for development",
    )

    args = parser.parse_args()
    run_server(host=args.host, port=args.port, reload=args.reload)


if __name__ == "__main__":
    main()
