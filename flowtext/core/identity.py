"""
Stable node id derivation.

Two id shapes exist:

- DSL ids: ``DSL_PREFIX`` + the literal digit token from the text, so
  ``3.`` always maps to ``n_3`` whatever its label says.
- Simple ids: ``SIMPLE_PREFIX`` + URL-safe base64 of the trimmed label
  (padding stripped). The encoding is reversible, so a label can always be
  recovered from the id alone.
"""

import base64
import re
from typing import Optional

DSL_PREFIX = "n_"
SIMPLE_PREFIX = "t_"

DSL_ID_RE = re.compile(rf"^{re.escape(DSL_PREFIX)}(\d+)$")


def dsl_id(token: str) -> str:
    return f"{DSL_PREFIX}{token}"


def simple_id(label: str) -> str:
    encoded = base64.urlsafe_b64encode(label.strip().encode("utf-8")).decode("ascii")
    return f"{SIMPLE_PREFIX}{encoded.rstrip('=')}"


def is_dsl_id(node_id: str) -> bool:
    return DSL_ID_RE.match(node_id) is not None


def dsl_token(node_id: str) -> Optional[str]:
    """Return the digit token of a DSL id, or None for any other id."""
    match = DSL_ID_RE.match(node_id)
    return match.group(1) if match else None


def label_from_id(node_id: str) -> str:
    """
    Best-effort recovery of a label from an encoded id.

    DSL ids give back their token; simple ids are base64-decoded. Anything
    that does not decode cleanly falls back to the raw id text.
    """
    if node_id.startswith(DSL_PREFIX):
        return node_id[len(DSL_PREFIX):] or node_id
    if node_id.startswith(SIMPLE_PREFIX):
        payload = node_id[len(SIMPLE_PREFIX):]
        padded = payload + "=" * (-len(payload) % 4)
        try:
            return base64.urlsafe_b64decode(padded.encode("ascii")).decode("utf-8")
        except ValueError:
            # binascii.Error and UnicodeDecodeError are both ValueErrors
            return node_id
    return node_id
