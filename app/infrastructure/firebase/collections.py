"""Firestore collection names (schema-in-code).

Firestore has no DDL or migrations. Collections are created automatically
when you first write a document. Use these constants so collection names
stay consistent and act as the single source of truth for the "schema".

Example:
    from app.infrastructure.firebase.client import get_firestore_client
    from app.infrastructure.firebase.collections import COLLECTION_APP

    db = get_firestore_client()
    if db:
        snapshot = await db.collection(COLLECTION_APP).document(app_key).get()
"""

# Tenant ("app") and global configuration
COLLECTION_APP = "app"
COLLECTION_GLOBAL = "global"
GLOBAL_APP_DOC = "app"

# Form configuration
COLLECTION_FORM_FIELD = "formField"
COLLECTION_FORM_TEMPLATE = "formTemplate"

# Submissions (document creation triggers the sheet sync)
COLLECTION_SUBMIT_FORM = "submitForm"

# Default document schemas applied to newly created docs (global/{schema})
SCHEMA_DEFAULT_DOCS: dict[str, str] = {
    COLLECTION_APP: "schemaApp",
    COLLECTION_FORM_TEMPLATE: "schemaFormTemplate",
}
