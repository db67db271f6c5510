"""Port for credential verification.

The domain only needs to know that a credential either yields a caller
identity or is rejected. Token formats live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from foodlane.domain.model.identity import Identity


class IdentityVerifier(ABC):

    @abstractmethod
    def verify(self, credential: str | None) -> Identity:
        """Return the identity asserted by ``credential``.

        Raises AuthenticationError when the credential is absent,
        malformed, expired or fails signature verification.
        """
