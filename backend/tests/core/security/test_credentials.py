"""Tests for login credential verification."""

import pytest

from vipudev.core.security.credentials import StaticCredentialVerifier


@pytest.mark.unit
class TestStaticCredentialVerifier:
    @pytest.fixture
    def verifier(self):
        return StaticCredentialVerifier("admin", "admin123")

    def test_matching_pair(self, verifier):
        assert verifier.verify("admin", "admin123") is True

    @pytest.mark.parametrize(
        "username,password",
        [
            ("admin", "wrong"),
            ("root", "admin123"),
            ("", ""),
            ("Admin", "admin123"),
        ],
    )
    def test_rejected_pairs(self, verifier, username, password):
        assert verifier.verify(username, password) is False

    def test_non_ascii_password(self):
        verifier = StaticCredentialVerifier("admin", "pässwörd")

        assert verifier.verify("admin", "pässwörd") is True
        assert verifier.verify("admin", "passwoord") is False
