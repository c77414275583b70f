"""Shared pydantic field types for request bodies.

Request schemas validate shape before any service code runs; a bad body
is answered with FastAPI's standard 422 instead of failing in the store.
"""

from __future__ import annotations

import re
from typing import Annotated

from pydantic import AfterValidator, StringConstraints

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def _normalize_email(value: str) -> str:
    email = value.strip().lower()
    if not _EMAIL_RE.match(email):
        raise ValueError("invalid email address")
    return email


Email = Annotated[str, AfterValidator(_normalize_email)]

# Stripped, must contain something.
Text = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]

# Passwords are taken verbatim (no stripping) but must be non-empty.
Password = Annotated[str, StringConstraints(min_length=1)]
