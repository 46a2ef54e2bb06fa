"""Write the SeatSync OpenAPI document to disk.

Usage: python -m scripts.export_openapi [destination]
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

from fastapi import FastAPI
from seatsync.api.main import app as api_app

DEFAULT_DESTINATION = Path("docs/api/openapi.json")


def export_openapi(app: FastAPI, destination: Path) -> Path:
    """Persist the OpenAPI schema to the given destination."""
    destination.parent.mkdir(parents=True, exist_ok=True)
    schema = app.openapi()
    destination.write_text(json.dumps(schema, indent=2, sort_keys=True))
    return destination


def main(argv: list[str] | None = None) -> None:
    args = sys.argv[1:] if argv is None else argv
    output = Path(args[0]) if args else DEFAULT_DESTINATION
    export_openapi(api_app, output)


if __name__ == "__main__":
    main()
