"""PADT Mock — response template loading and placeholder substitution."""

from __future__ import annotations

import uuid
from pathlib import Path

from shared.logging import get_logger

log = get_logger(__name__)

PARTY_ID_PLACEHOLDER = "${PartyID}"

DEFAULT_RESPONSE = """<?xml version="1.0" encoding="UTF-8"?>
<soap:Envelope xmlns:soap="http://schemas.xmlsoap.org/soap/envelope/"
               xmlns:padt="http://padt.example.com/party">
  <soap:Body>
    <padt:PadtResponse>
      <padt:Status>SUCCESS</padt:Status>
      <padt:PartyID>${PartyID}</padt:PartyID>
      <padt:Message>Default PADT response; no response file was readable.</padt:Message>
    </padt:PadtResponse>
  </soap:Body>
</soap:Envelope>
"""


def load_template(path: Path | str) -> str:
    """Read the response template, falling back to ``DEFAULT_RESPONSE``.

    The file is read on every call so edits take effect on the next request.
    Read failures (missing file, permissions, a directory, bad encoding) are
    logged as warnings and never raised.
    """
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        log.warning(
            "response_file_unreadable",
            response_file=str(path),
            error=str(exc),
            fallback="default",
        )
        return DEFAULT_RESPONSE


def render(
    template: str,
    placeholder: str = PARTY_ID_PLACEHOLDER,
    party_id: str | None = None,
) -> str:
    """Replace every ``placeholder`` in ``template`` with one party ID.

    A fresh UUID4 is generated unless ``party_id`` is given.
    """
    if not placeholder or placeholder not in template:
        return template
    if party_id is None:
        party_id = str(uuid.uuid4())
    return template.replace(placeholder, party_id)
