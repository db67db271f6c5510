"""AccessGate: identity-bound authorization for protected operations.

Every protected operation goes through the gate instead of checking
tokens inline. Authentication always runs first, so a caller without a
valid credential gets ``AuthenticationError`` even when the subject
would not have matched either.
"""

from __future__ import annotations

from foodlane.domain.exceptions import ForbiddenError
from foodlane.domain.model.identity import Identity
from foodlane.domain.service.identity_verifier import IdentityVerifier


class AccessGate:

    def __init__(self, verifier: IdentityVerifier) -> None:
        self._verifier = verifier

    def authenticate(self, credential: str | None) -> Identity:
        """Return the caller's identity or raise AuthenticationError."""
        return self._verifier.verify(credential)

    def authorize(self, credential: str | None, subject_email: str | None) -> Identity:
        """Authenticate, then require the caller to be ``subject_email``.

        A request that names no subject is refused as well.
        """
        identity = self.authenticate(credential)
        self.ensure_subject(identity, subject_email)
        return identity

    @staticmethod
    def ensure_subject(identity: Identity, subject_email: str | None) -> None:
        """Raise ForbiddenError unless ``identity`` is ``subject_email``."""
        if not identity.is_subject(subject_email):
            raise ForbiddenError("forbidden access")
