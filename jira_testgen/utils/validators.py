"""Validation helpers for the Jira connection form."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

FIELD_LABELS = {
    "domain": "JIRA Domain",
    "email": "Email",
    "token": "API Token",
}


@dataclass(frozen=True)
class JiraCredentials:
    domain: str
    email: str
    token: str

    def __repr__(self) -> str:
        return f"JiraCredentials(domain={self.domain!r}, email={self.email!r}, token='***')"


def normalize_domain(domain: str) -> str:
    """Strip scheme, whitespace and trailing slashes from a Jira domain."""
    if not domain:
        return ""
    normalized = re.sub(r"^https?://", "", domain.strip(), flags=re.IGNORECASE)
    return normalized.rstrip("/")


def is_email_valid(email: str) -> bool:
    return bool(email) and bool(_EMAIL_RE.match(email.strip()))


def missing_credential_fields(domain: str, email: str, token: str) -> List[str]:
    values = {"domain": domain, "email": email, "token": token}
    return [name for name, value in values.items() if not (value or "").strip()]


def build_credentials(domain: str, email: str, token: str) -> JiraCredentials:
    """Return normalized credentials or raise ValueError with a form message."""
    if missing_credential_fields(domain, email, token):
        raise ValueError("Please fill in all fields")
    if not is_email_valid(email):
        raise ValueError("Please enter a valid email address")
    return JiraCredentials(
        domain=normalize_domain(domain),
        email=email.strip(),
        token=token.strip(),
    )


__all__ = [
    "JiraCredentials",
    "FIELD_LABELS",
    "normalize_domain",
    "is_email_valid",
    "missing_credential_fields",
    "build_credentials",
]
