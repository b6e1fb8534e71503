#!/usr/bin/env python3
"""
Run the SimpleDB demo.

Credentials come from the usual AWS locations (environment, .env file or
~/.aws/credentials). Do not keep a credentials file inside the source tree.

    python -m simpledb_demo
"""

import logging

from .config import SimpleDBConfig
from .core import create_domain_gateway
from .runner import DemoRunner

BANNER = "==========================================="


def configure_logging(config: SimpleDBConfig) -> None:
    level = logging.DEBUG if config.enable_debug_logging else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )


def main() -> int:
    """Run the demo once; service errors are reported, not raised."""
    config = SimpleDBConfig.from_env()
    configure_logging(config)

    print(BANNER)
    print("AWS SimpleDB Demo app")
    print(BANNER)

    runner = DemoRunner(config, gateway=create_domain_gateway(config))
    runner.run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
