"""Re-run the sheet sync for stored submissions.

Use after fixing an app's spreadsheet settings, or when the document-created
trigger was missed. Each run inserts a new row, so syncing the same
submission twice duplicates it.

Usage:
    uv run python -m scripts.resync_submission <submission_id> [<submission_id> ...]
"""

import asyncio
import sys

from app.application.use_cases.sheet_sync import SheetSyncService
from app.infrastructure.external.sheets import GoogleSheetsClient
from app.infrastructure.firebase import close_firebase, load_service_account_info
from app.infrastructure.firebase.repositories import (
    FirestoreAppRepository,
    FirestoreFormTemplateRepository,
    FirestoreSubmissionRepository,
)

from scripts._bootstrap import firestore_or_exit


async def main() -> None:
    if len(sys.argv) < 2:
        print(
            "Usage: uv run python -m scripts.resync_submission <submission_id> [...]",
            file=sys.stderr,
        )
        sys.exit(1)

    db = firestore_or_exit()
    service = SheetSyncService(
        FirestoreAppRepository(db),
        FirestoreFormTemplateRepository(db),
        FirestoreSubmissionRepository(db),
        GoogleSheetsClient.from_service_account_info(load_service_account_info() or {}),
    )
    failed = 0
    try:
        for submission_id in sys.argv[1:]:
            result = await service.sync(submission_id)
            if result is None:
                failed += 1
                print(f"{submission_id}: failed (see log)", file=sys.stderr)
            else:
                print(f"{submission_id}: {result.sheet_title} row 2")
    finally:
        await close_firebase()
    sys.exit(1 if failed else 0)


if __name__ == "__main__":
    asyncio.run(main())
