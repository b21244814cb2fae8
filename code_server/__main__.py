"""Command-line entry point to launch the code server."""

from __future__ import annotations

import argparse

from . import ServerSettings, create_app


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="One-time code server")
    parser.add_argument("--host", help="Interface to bind (default from settings)")
    parser.add_argument("--port", type=int, help="Port to listen on (default from settings)")
    parser.add_argument("--debug", action="store_true", help="Enable Flask debug mode")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    settings = ServerSettings()
    if args.host is not None:
        settings.host = args.host
    if args.port is not None:
        settings.port = args.port
    if args.debug:
        settings.debug = True
    app = create_app(settings)
    # use_reloader would start a second process with its own store.
    app.run(host=settings.host, port=settings.port, debug=settings.debug, threaded=True, use_reloader=False)


if __name__ == "__main__":
    main()
