"""Export Firestore collections to a JSON file (same layout seed_firestore reads).

Usage:
    uv run python -m scripts.export_firestore [--out exported.json] [collection ...]

Without collection names, every collection the form handler uses is exported.
Timestamps are written as ISO 8601 strings.
"""

from __future__ import annotations

import argparse
import asyncio
import json
from pathlib import Path
from typing import Any

from app.infrastructure.firebase import close_firebase
from app.infrastructure.firebase.collections import (
    COLLECTION_APP,
    COLLECTION_FORM_FIELD,
    COLLECTION_FORM_TEMPLATE,
    COLLECTION_GLOBAL,
    COLLECTION_SUBMIT_FORM,
)

from scripts._bootstrap import firestore_or_exit

DEFAULT_COLLECTIONS = (
    COLLECTION_APP,
    COLLECTION_GLOBAL,
    COLLECTION_FORM_FIELD,
    COLLECTION_FORM_TEMPLATE,
    COLLECTION_SUBMIT_FORM,
)


def _json_default(value: Any) -> str:
    if hasattr(value, "isoformat"):
        return value.isoformat()
    return str(value)


async def main() -> None:
    parser = argparse.ArgumentParser(description="Export Firestore collections to JSON")
    parser.add_argument("collections", nargs="*", default=list(DEFAULT_COLLECTIONS))
    parser.add_argument("--out", default="exported.json")
    args = parser.parse_args()

    db = firestore_or_exit()
    exported: dict[str, dict[str, Any]] = {}
    try:
        for collection in args.collections:
            exported[collection] = {
                snapshot.id: snapshot.to_dict()
                async for snapshot in db.collection(collection).stream()
            }
            print(f"{collection}: {len(exported[collection])} document(s)")
    finally:
        await close_firebase()

    Path(args.out).write_text(
        json.dumps(exported, indent=2, default=_json_default), encoding="utf-8"
    )
    print(f"Saved {args.out}")


if __name__ == "__main__":
    asyncio.run(main())
