"""Command line entry point of the arcade."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from .database import PASSWORD, Database, DatabaseError
from .gamepage import Gamepage
from .homepage import Homepage


def _parse(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="arcadeterm", description="Terminal arcade.")
    parser.add_argument("--host", default="localhost")
    parser.add_argument("--port", type=int, default=3306)
    parser.add_argument("--user", default="root")
    parser.add_argument("--password", default=PASSWORD)
    parser.add_argument("--database", default="mydatabase")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse(argv)
    db = Database(args.host, args.user, args.password, args.database, args.port)
    try:
        db.connect()
    except DatabaseError as exc:
        print(exc)
        return 1
    with db:
        current_user = Homepage(db).show()
        if current_user:
            Gamepage(current_user, db).show()
    print("Thank you!")
    return 0


if __name__ == "__main__":
    sys.exit(main())