#!/usr/bin/env python3
"""
Storefront Backend Runner
=========================

Run the storefront API with uvicorn.

Usage:
    python run_app.py                    # Development mode with auto-reload
    python run_app.py --mode prod        # Production mode
    python run_app.py --port 8001        # Custom port
    python run_app.py --host 127.0.0.1   # Custom host
    python run_app.py --no-seed          # Start with an empty catalog
"""

import argparse
import os
import sys


def run_app(host: str, port: int, reload: bool):
    """Run the FastAPI application"""
    import uvicorn

    print(f"Starting Storefront API on {host}:{port}")
    print(f"API Docs: http://{host}:{port}/api/docs")

    uvicorn.run(
        "storefront.main:app",
        host=host,
        port=port,
        reload=reload,
        log_level="info"
    )


def main():
    parser = argparse.ArgumentParser(
        description="Storefront Backend Runner",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--mode",
        choices=["dev", "prod"],
        default="dev",
        help="Server mode (default: dev)"
    )
    parser.add_argument(
        "--host",
        default="0.0.0.0",
        help="Host to bind to (default: 0.0.0.0)"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="Port to bind to (default: 8000)"
    )
    parser.add_argument(
        "--no-reload",
        action="store_true",
        help="Disable auto-reload"
    )
    parser.add_argument(
        "--no-seed",
        action="store_true",
        help="Do not load the demo catalog"
    )

    args = parser.parse_args()

    if args.no_seed:
        # Read by Settings when the app module is imported
        os.environ["SEED_DATA"] = "false"

    reload = not args.no_reload and args.mode != "prod"
    run_app(args.host, args.port, reload)
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\nServer stopped by user")
        sys.exit(0)
