"""Login credential verification."""

import hmac
from abc import ABC, abstractmethod
from typing import Optional

from vipudev.core.config import settings


class CredentialVerifier(ABC):
    """Decides whether a username/password pair may log in."""

    @abstractmethod
    def verify(self, username: str, password: str) -> bool:
        pass


class StaticCredentialVerifier(CredentialVerifier):
    """Single operator account configured through ADMIN_USERNAME / ADMIN_PASSWORD."""

    def __init__(self, username: str, password: str):
        self.username = username
        self.password = password

    def verify(self, username: str, password: str) -> bool:
        # Evaluate both comparisons so timing does not reveal which one failed
        user_ok = hmac.compare_digest(username.encode(), self.username.encode())
        password_ok = hmac.compare_digest(password.encode(), self.password.encode())
        return user_ok and password_ok


_credential_verifier: Optional[CredentialVerifier] = None


def get_credential_verifier() -> CredentialVerifier:
    global _credential_verifier
    if _credential_verifier is None:
        _credential_verifier = StaticCredentialVerifier(
            settings.admin_username, settings.admin_password
        )
    return _credential_verifier
