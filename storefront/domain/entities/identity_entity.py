"""
Identity Entity - the authenticated user of the current session
"""

import hashlib
from dataclasses import dataclass

from storefront.infrastructure.utilities.constants import AuthSettings


@dataclass(frozen=True)
class Identity:
    """Logged-in user produced by the mock credential pass-through"""

    username: str
    token: str
    user_id: int = AuthSettings.MOCK_USER_ID
    first_name: str = ""
    email: str = ""

    def __post_init__(self):
        if not self.username:
            raise ValueError("Username cannot be empty")
        if not self.token:
            raise ValueError("Token cannot be empty")

    @property
    def is_authenticated(self) -> bool:
        return True

    @staticmethod
    def derive_token(username: str, password: str) -> str:
        """Opaque token derived from the credentials"""
        return hashlib.sha256(f"{username}:{password}".encode("utf-8")).hexdigest()

    @classmethod
    def from_credentials(cls, username: str, password: str) -> "Identity":
        """Build the identity for a username/password pair"""
        return cls(
            username=username,
            token=cls.derive_token(username, password),
            first_name=username,
            email=f"{username}@{AuthSettings.EMAIL_DOMAIN}",
        )
