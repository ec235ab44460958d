"""Base class for domain exceptions.

Every domain error carries a stable ``code`` and the identifiers that
caused it, so the API layer can render a precise message without
parsing the exception text.
"""

from __future__ import annotations

from typing import Any, Dict


class DomainError(Exception):
    """Root of all errors raised by the service layer."""

    code = "domain_error"

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message)
        self.context = context

    def as_dict(self) -> Dict[str, Any]:
        return {"detail": str(self), "code": self.code, **self.context}
