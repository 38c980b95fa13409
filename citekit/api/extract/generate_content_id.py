"""Content-addressed identifiers for extracted text."""

import hashlib

# first 16 hex chars (64 bits) of the SHA-256 digest
CONTENT_ID_LENGTH = 16


def generate_content_id(content: str) -> str:
    return hashlib.sha256(content.encode("utf-8")).hexdigest()[:CONTENT_ID_LENGTH]
