"""Tests for credential resolution exceptions."""

import pytest

from printavo.auth.exceptions import CredentialError, CredentialNotFoundError


class TestCredentialError:
    def test_exception_message(self):
        with pytest.raises(CredentialError, match="Custom error message"):
            raise CredentialError("Custom error message")


class TestCredentialNotFoundError:
    def test_is_credential_error(self):
        with pytest.raises(CredentialError):
            raise CredentialNotFoundError("Test error")

    def test_env_var_name_attribute(self):
        error = CredentialNotFoundError("Printavo token not found", env_var_name="PRINTAVO_TOKEN")

        assert str(error) == "Printavo token not found"
        assert error.env_var_name == "PRINTAVO_TOKEN"

    def test_env_var_name_defaults_to_none(self):
        assert CredentialNotFoundError("missing").env_var_name is None
