#!/usr/bin/env python3
"""Launch the star catalog API server.

Usage:
    ./start_server.py                 # Start on the configured host/port
    ./start_server.py --port 8080     # Use custom port
    ./start_server.py --storage json  # Persist stars as JSON files
"""

import argparse
import os
import sys


def main():
    parser = argparse.ArgumentParser(description="Launch the star catalog API server")
    parser.add_argument("--port", type=int, default=None, help="Server port (default: from config)")
    parser.add_argument("--host", default=None, help="Server host (default: from config)")
    parser.add_argument("--storage", choices=["memory", "json"], default=None,
                        help="Storage backend (default: STARCATALOG_STORAGE or memory)")
    parser.add_argument("--data-dir", default=None, help="Directory for the json backend")
    parser.add_argument("--log-level", default=None, help="Log level (default: INFO)")
    args = parser.parse_args()

    # Environment must be set before starcatalog.env_config is imported
    if args.storage:
        os.environ["STARCATALOG_STORAGE"] = args.storage
    if args.data_dir:
        os.environ["STARCATALOG_DATA_DIR"] = args.data_dir
    if args.log_level:
        os.environ["STARCATALOG_LOG_LEVEL"] = args.log_level

    try:
        import uvicorn
    except ImportError:
        print("""
ERROR: Server dependencies not installed.

Install them with:
    pip install -e .
""")
        sys.exit(1)

    from starcatalog.services.config_service import get_config_service

    server_config = get_config_service().get_server_config()
    host = args.host or server_config.get("host", "127.0.0.1")
    port = args.port or server_config.get("port", 8000)

    print(f"Star catalog running at: http://{host}:{port} (docs at /api/docs)")

    uvicorn.run("starcatalog.server:app", host=host, port=port, reload=False)


if __name__ == "__main__":
    main()
