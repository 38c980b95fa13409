"""Validation status and reason codes."""

STATUS_VALID = "valid"
STATUS_WARNING = "warning"
STATUS_ERROR = "error"
STATUSES = (STATUS_VALID, STATUS_WARNING, STATUS_ERROR)

REASON_TARGET_MISSING = "target_missing"
REASON_ANCHOR_MISSING = "anchor_missing"
REASON_FOLDER_REFERENCE = "folder_reference"
REASON_SCOPE_FALLBACK = "scope_fallback"
REASON_UNREADABLE = "unreadable"
