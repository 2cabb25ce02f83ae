"""Process bootstrap — `python -m deadmedia path/to/seed.json`.

The seed file is validated before the server starts so a bad dataset fails
fast with exit status 1 instead of inside the ASGI lifespan.
"""

import argparse
import sys

import uvicorn

from deadmedia.config import get_settings
from deadmedia.infrastructure.seed import SeedDataError, load_seed_file
from deadmedia.main import create_app


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="deadmedia", description="Serve the dead media catalog.",
    )
    parser.add_argument("seed_file", help="JSON array of {name, type, desc}")
    parser.add_argument("--host", default=None)
    parser.add_argument("--port", type=int, default=None)
    args = parser.parse_args(argv)

    try:
        load_seed_file(args.seed_file)
    except SeedDataError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    base = get_settings()
    settings = base.model_copy(update={
        "seed_file": args.seed_file,
        "host": args.host or base.host,
        "port": args.port or base.port,
    })
    uvicorn.run(
        create_app(settings), host=settings.host, port=settings.port,
        log_level=settings.log_level.lower(),
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
