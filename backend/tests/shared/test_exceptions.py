"""Tests for shared/exceptions.py."""

import pytest

from shared.exceptions import (
    AccountsError,
    NotFoundError,
    ValidationError,
    ConflictError,
    AuthenticationError,
    ConfigurationError,
    ExternalServiceError,
    UniqueViolationError,
    StoreUnavailableError,
)


class TestAccountsError:
    def test_accounts_error_message(self):
        """AccountsError should store message."""
        error = AccountsError("Test error")
        assert error.message == "Test error"
        assert str(error) == "Test error"

    def test_accounts_error_default_code(self):
        """AccountsError should default code to class name."""
        error = AccountsError("Test error")
        assert error.code == "AccountsError"

    def test_accounts_error_custom_code(self):
        """AccountsError should accept custom code."""
        error = AccountsError("Test error", code="CUSTOM_ERROR")
        assert error.code == "CUSTOM_ERROR"

    def test_accounts_error_default_details(self):
        """AccountsError should default details to empty dict."""
        error = AccountsError("Test error")
        assert error.details == {}

    def test_accounts_error_to_dict(self):
        """AccountsError should convert to dict."""
        error = AccountsError("Test error", code="TEST_ERROR", details={"key": "value"})
        result = error.to_dict()

        assert result["error"] == "TEST_ERROR"
        assert result["message"] == "Test error"
        assert result["details"]["key"] == "value"


class TestErrorKinds:
    @pytest.mark.parametrize(
        "kind",
        [NotFoundError, ValidationError, ConflictError, AuthenticationError, ConfigurationError],
    )
    def test_kinds_inherit_accounts_error(self, kind):
        """Every error kind should inherit from AccountsError."""
        assert isinstance(kind("boom"), AccountsError)


class TestExternalServiceError:
    def test_external_service_error_stores_service(self):
        """ExternalServiceError should store service name."""
        error = ExternalServiceError("Connection failed", service="supabase")
        assert error.service == "supabase"

    def test_external_service_error_preserves_other_details(self):
        """ExternalServiceError should preserve other details."""
        error = ExternalServiceError(
            "Connection failed",
            service="supabase",
            details={"status_code": 500}
        )
        result = error.to_dict()

        assert result["details"]["service"] == "supabase"
        assert result["details"]["status_code"] == 500


class TestStoreErrors:
    def test_unique_violation_hides_value(self):
        """UniqueViolationError should name the field but not echo the value."""
        error = UniqueViolationError("email", "john@example.com")
        assert error.code == "UNIQUE_VIOLATION"
        assert error.details == {"field": "email"}
        assert "john@example.com" not in error.message

    def test_store_unavailable_is_external_service_error(self):
        """StoreUnavailableError should be an ExternalServiceError."""
        error = StoreUnavailableError("supabase", "timeout")
        assert isinstance(error, ExternalServiceError)
        assert error.code == "STORE_UNAVAILABLE"
        assert error.details["service"] == "supabase"
