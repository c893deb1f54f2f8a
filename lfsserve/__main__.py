"""
lfsserve: a read-only Git LFS server
"""

import argparse
import logging
from pathlib import Path

import uvicorn
from uvicorn.config import LOGGING_CONFIG

from lfsserve.api import create_app
from lfsserve.config import ENV_PREFIX, Settings, get_settings


def settings_from_args(args) -> Settings:
    """Override the configured settings with the values given on the command line"""
    overrides = {k: v for k, v in dict(root=args.root, host=args.host, port=args.port).items() if v is not None}
    return get_settings().model_copy(update=overrides)


def run(args):
    settings = settings_from_args(args)
    logging.info(f"Serving objects from {settings.root.resolve() / 'objects'}")
    logging.info(f"Listening for HTTP on port {settings.port}")
    log_config = "logging.yml" if Path("logging.yml").exists() else LOGGING_CONFIG
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port, log_config=log_config)


def config(_args):
    for k, v in get_settings().model_dump().items():
        print(f"{ENV_PREFIX.upper()}{k.upper()}={v}")


def main(argv=None):
    parser = argparse.ArgumentParser(description=__doc__, prog="python -m lfsserve")

    subparsers = parser.add_subparsers(dest="action", title="action", help="Action to perform:", required=True)
    p = subparsers.add_parser("run", help="Start a Git LFS server")
    p.add_argument("root", nargs="?", type=Path, help="Root directory of the object store (default: ./.lfs)")
    p.add_argument("-s", "--host", help="IP address to listen on (default: 127.0.0.1)")
    p.add_argument("-p", "--port", type=int, help="TCP port to listen on (default: 8080)")
    p.set_defaults(func=run)

    p = subparsers.add_parser("config", help="Show the current settings")
    p.set_defaults(func=config)

    args = parser.parse_args(argv)

    logging.basicConfig(format="[%(levelname)-7s:%(name)-15s] %(message)s", level=logging.INFO)
    args.func(args)


if __name__ == "__main__":
    main()
