"""Security module."""

from vipudev.core.security.encryption import KeyEncryptionService, get_encryption_service
from vipudev.core.security.credentials import (
    CredentialVerifier,
    StaticCredentialVerifier,
    get_credential_verifier,
)
from vipudev.core.security.sessions import (
    SessionStore,
    InMemorySessionStore,
    DatabaseSessionStore,
    get_session_store,
)

__all__ = [
    "KeyEncryptionService",
    "get_encryption_service",
    "CredentialVerifier",
    "StaticCredentialVerifier",
    "get_credential_verifier",
    "SessionStore",
    "InMemorySessionStore",
    "DatabaseSessionStore",
    "get_session_store",
]
