"""Identifier generators: Firestore-style document ids and request ids (CUID2)."""

import secrets
import string

from cuid2 import cuid_wrapper

# Same alphabet and length as the Firestore client libraries' auto ids.
_AUTO_ID_ALPHABET = string.ascii_letters + string.digits
_AUTO_ID_LENGTH = 20

cuid_generator = cuid_wrapper()


def generate_document_id() -> str:
    """Return a 20-character id for a new document in a Firestore collection."""
    return "".join(secrets.choice(_AUTO_ID_ALPHABET) for _ in range(_AUTO_ID_LENGTH))


def generate_cuid() -> str:
    """Return a CUID2, used as the request id when the caller sends none."""
    return str(cuid_generator())
