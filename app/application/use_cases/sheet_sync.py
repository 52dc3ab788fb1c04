"""Sheet sync use case: mirror a stored submission into the app's spreadsheet.

Each template gets its own sheet (tab) named after the template. Newest
rows go on top: row 1 is the header, the new data row is written to row 2
after a blank row is inserted there. A missing sheet is created with its
header, and its id is recorded on the app document.
"""

from __future__ import annotations

from app.application.dtos.submission import SheetSyncResult
from app.application.interfaces.repositories import (
    IAppRepository,
    IFormTemplateRepository,
    ISubmissionRepository,
)
from app.application.interfaces.services import ISheetsClient
from app.application.services.sheet_rows import build_data_row, build_header_row
from app.domain.entities import PersistedSubmission
from app.domain.exceptions import (
    AppNotFoundException,
    SheetSyncException,
    TemplateNotFoundException,
)
from app.shared.telemetry.logging import get_logger
from app.shared.utils.datetime import utc_now

logger = get_logger(__name__)

# Data rows are inserted directly under the header row.
DATA_ROW_INDEX = 1


class SheetSyncService:
    """Appends one row per submission; failures are logged, never raised to the caller."""

    def __init__(
        self,
        app_repo: IAppRepository,
        template_repo: IFormTemplateRepository,
        submission_repo: ISubmissionRepository,
        sheets_client: ISheetsClient,
    ) -> None:
        self.app_repo = app_repo
        self.template_repo = template_repo
        self.submission_repo = submission_repo
        self.sheets_client = sheets_client

    async def sync(self, submission: str | PersistedSubmission) -> SheetSyncResult | None:
        """Sync a submission (by id or record). Returns None when the sync failed."""
        submission_id = submission if isinstance(submission, str) else submission.id
        try:
            if isinstance(submission, str):
                record = await self.submission_repo.get(submission)
                if record is None:
                    raise SheetSyncException("Submission not found", submission_id=submission)
            else:
                record = submission
            return await self.sync_submission(record)
        except Exception:
            logger.exception("Sheet sync failed for submission %s", submission_id)
            return None

    async def sync_submission(self, submission: PersistedSubmission) -> SheetSyncResult:
        """Write the submission row; raises on any failure."""
        app = await self.app_repo.get_app(submission.app_key)
        if app is None:
            raise AppNotFoundException(submission.app_key)
        template = await self.template_repo.get_template(submission.template_name)
        if template is None:
            raise TemplateNotFoundException(submission.template_name)
        if not app.spreadsheet_id:
            raise SheetSyncException(
                f"App {app.id} has no spreadsheetId", submission_id=submission.id
            )

        created_at = submission.created_at
        if created_at is None:
            logger.warning("Submission %s has no createdDateTime; using now", submission.id)
            created_at = utc_now()
        data_row = build_data_row(
            created_at, app.info.timezone, template, submission.template_data
        )

        spreadsheet_id = app.spreadsheet_id
        title = template.name
        existing = await self.sheets_client.get_sheet_ids(spreadsheet_id)

        if title in existing:
            sheet_id = app.sheet_id_for(title)
            if sheet_id is None:
                sheet_id = existing[title]
                logger.warning("Sheet %r has no recorded id on app %s; using %s", title, app.id, sheet_id)
            await self.sheets_client.insert_blank_row(spreadsheet_id, sheet_id, DATA_ROW_INDEX)
            await self.sheets_client.update_values(spreadsheet_id, f"{title}!A2", [data_row])
            created = False
        else:
            sheet_id = await self.sheets_client.add_sheet(spreadsheet_id, title)
            await self.app_repo.set_sheet_id(app.id, title, sheet_id)
            await self.sheets_client.update_values(
                spreadsheet_id, f"{title}!A1", [build_header_row(template)]
            )
            await self.sheets_client.update_values(spreadsheet_id, f"{title}!A2", [data_row])
            created = True

        logger.info(
            "Synced submission %s to sheet %r (%s) of app %s",
            submission.id,
            title,
            "new" if created else "existing",
            app.id,
        )
        return SheetSyncResult(
            submission_id=submission.id,
            spreadsheet_id=spreadsheet_id,
            sheet_title=title,
            sheet_id=sheet_id,
            sheet_created=created,
            data_row=data_row,
        )
