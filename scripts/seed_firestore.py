"""Import a JSON starter database into Firestore.

The file maps collection -> document id -> document data, e.g.::

    {"app": {"exampleApp": {"appInfo": {...}}}, "formField": {...}}

Existing documents with the same id are overwritten.

Usage:
    uv run python -m scripts.seed_firestore [path/to/starter-database.json] [--only app,formField]

Default path: docs/starter-database.json (relative to project root).
"""

from __future__ import annotations

import argparse
import asyncio
import json
from pathlib import Path

from app.infrastructure.firebase import close_firebase

from scripts._bootstrap import firestore_or_exit, project_root


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument(
        "path",
        nargs="?",
        default=str(project_root() / "docs" / "starter-database.json"),
    )
    parser.add_argument("--only", default="", help="Comma-separated collection names")
    return parser.parse_args()


async def main() -> None:
    args = _parse_args()
    data = json.loads(Path(args.path).read_text(encoding="utf-8"))
    only = {c.strip() for c in args.only.split(",") if c.strip()}

    db = firestore_or_exit()
    try:
        for collection, documents in data.items():
            if only and collection not in only:
                continue
            for document_id, fields in documents.items():
                await db.collection(collection).document(document_id).set(fields)
            print(f"{collection}: {len(documents)} document(s)")
    finally:
        await close_firebase()


if __name__ == "__main__":
    asyncio.run(main())
