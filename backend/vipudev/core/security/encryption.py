"""Encryption of stored secrets using Fernet (AES-128)."""

import logging
from typing import Optional

from cryptography.fernet import Fernet, InvalidToken

from vipudev.core.config import ENV_FILE, settings

logger = logging.getLogger(__name__)

ENV_FILE_PATH = ENV_FILE


class KeyEncryptionService:
    """Encrypts and decrypts the API key saved in the dashboard configuration."""

    def __init__(self, master_key: Optional[str] = None):
        """
        Initialize encryption service with master key.

        Args:
            master_key: Base64-encoded 32-byte key. Falls back to
                        MASTER_ENCRYPTION_KEY, then to a generated key that is
                        written to the backend .env file.
        """
        key = master_key or settings.master_encryption_key or self._auto_generate_key()

        try:
            self.cipher = Fernet(key.encode() if isinstance(key, str) else key)
        except (ValueError, TypeError) as e:
            raise ValueError(f"Invalid MASTER_ENCRYPTION_KEY: {e}")

    def encrypt(self, plaintext: str) -> bytes:
        if not plaintext:
            raise ValueError("Cannot encrypt empty string")

        return self.cipher.encrypt(plaintext.encode())

    def decrypt(self, encrypted: bytes) -> str:
        if not encrypted:
            raise ValueError("Cannot decrypt empty bytes")

        try:
            return self.cipher.decrypt(encrypted).decode()
        except InvalidToken as e:
            raise ValueError("Failed to decrypt stored secret; was the master key rotated?") from e

    def _auto_generate_key(self) -> str:
        """
        Generate a master key and persist it to the backend .env file.

        A key that cannot be saved is still used for this process, but secrets
        encrypted with it become unreadable after a restart.
        """
        new_key = Fernet.generate_key().decode()
        line = f"MASTER_ENCRYPTION_KEY={new_key}"

        try:
            if ENV_FILE_PATH.exists():
                lines = ENV_FILE_PATH.read_text().splitlines()
                if any(existing.startswith("MASTER_ENCRYPTION_KEY=") for existing in lines):
                    lines = [
                        line if existing.startswith("MASTER_ENCRYPTION_KEY=") else existing
                        for existing in lines
                    ]
                else:
                    lines.append(line)
                ENV_FILE_PATH.write_text("\n".join(lines) + "\n")
            else:
                ENV_FILE_PATH.write_text(f"# Auto-generated .env file\n{line}\n")
            logger.warning("Generated MASTER_ENCRYPTION_KEY and saved it to %s", ENV_FILE_PATH)
        except OSError as e:
            logger.warning("Could not save generated MASTER_ENCRYPTION_KEY: %s", e)

        return new_key

    @staticmethod
    def generate_master_key() -> str:
        return Fernet.generate_key().decode()


# Global encryption service instance
_encryption_service: Optional[KeyEncryptionService] = None


def get_encryption_service() -> KeyEncryptionService:
    """Get or create the global encryption service instance."""
    global _encryption_service
    if _encryption_service is None:
        _encryption_service = KeyEncryptionService()
    return _encryption_service
