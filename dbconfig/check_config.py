"""Print the resolved database configuration and check it is connectable.

Usage: ``dbconfig-check-config [--env production]``
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import List, Optional

from dbconfig.core.exceptions import ConfigurationError
from dbconfig.core.types import ENVIRONMENTS
from dbconfig.db.config import get_config
from dbconfig.db.database import ensure_connectable
from dbconfig.logging import setup_logging


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument(
        "--env",
        default=None,
        help=f"one of {', '.join(ENVIRONMENTS)} (defaults to APP_ENV)",
    )
    args = parser.parse_args(argv)

    setup_logging()
    try:
        config = get_config(args.env)
    except ConfigurationError as exc:
        print(exc, file=sys.stderr)
        return 2

    print(json.dumps(config.masked(), indent=2, sort_keys=True))
    try:
        ensure_connectable(config)
    except ConfigurationError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
