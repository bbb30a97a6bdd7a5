"""Tests for client exception classes."""


from cms_flag_preview.clients import (
    APIError,
    AuthError,
    ClientError,
    ConfigurationError,
    ContentMissing,
    ContentTypeError,
    DecodeError,
    DiscoveryUnavailable,
    FetchFailed,
    NotFoundError,
    TransportError,
    ValidationError,
)


class TestClientError:
    """Tests for the base ClientError exception."""

    def test_instantiation_with_message(self):
        """ClientError stores the error message."""
        error = ClientError("Something went wrong")

        assert error.message == "Something went wrong"
        assert str(error) == "Something went wrong"

    def test_inheritance(self):
        """ClientError is an Exception."""
        assert isinstance(ClientError("test"), Exception)


class TestErrorKinds:
    """Tests for the machine-readable error kinds."""

    def test_kinds(self):
        """Each error class carries its kind."""
        assert ValidationError("x").kind == "validation"
        assert ConfigurationError("x").kind == "validation"
        assert TransportError("x").kind == "transport"
        assert DecodeError("x").kind == "transport"
        assert APIError("x", status_code=500).kind == "api"
        assert AuthError().kind == "auth"
        assert NotFoundError().kind == "not_found"
        assert ContentTypeError().kind == "content_type"
        assert ContentMissing("x").kind == "content_missing"
        assert DiscoveryUnavailable("x", status_code=500).kind == "discovery_unavailable"


class TestTransportError:
    """Tests for TransportError and DecodeError."""

    def test_instantiation(self):
        """TransportError stores the error message."""
        error = TransportError("Network unreachable")

        assert error.message == "Network unreachable"
        assert isinstance(error, ClientError)

    def test_decode_error_keeps_raw_body(self):
        """DecodeError keeps the undecodable body."""
        error = DecodeError("Malformed JSON", raw_body="<html>")

        assert error.raw_body == "<html>"
        assert isinstance(error, TransportError)


class TestAPIError:
    """Tests for APIError exception."""

    def test_instantiation_with_status_code(self):
        """APIError stores message, status code and raw body."""
        error = APIError("Server error", status_code=500, raw_body="boom")

        assert error.message == "Server error"
        assert error.status_code == 500
        assert error.raw_body == "boom"

    def test_fetch_failed_alias(self):
        """FetchFailed is the same class as APIError."""
        assert FetchFailed is APIError

    def test_inheritance(self):
        """APIError inherits from ClientError."""
        assert isinstance(APIError("test", status_code=500), ClientError)


class TestAuthError:
    """Tests for AuthError exception."""

    def test_default_message(self):
        """AuthError defaults to 401."""
        error = AuthError()

        assert error.message == "Authentication failed"
        assert error.status_code == 401

    def test_forbidden(self):
        """AuthError accepts a 403 status."""
        error = AuthError("Forbidden", status_code=403)

        assert error.status_code == 403
        assert isinstance(error, APIError)


class TestNotFoundError:
    """Tests for NotFoundError exception."""

    def test_default_message(self):
        """NotFoundError has a default message."""
        error = NotFoundError()

        assert error.message == "Resource not found"
        assert error.status_code == 404

    def test_custom_message(self):
        """NotFoundError accepts custom message."""
        error = NotFoundError("Entry blt123 not found")

        assert error.message == "Entry blt123 not found"
        assert isinstance(error, APIError)


class TestContentTypeError:
    """Tests for ContentTypeError exception."""

    def test_default_message(self):
        """ContentTypeError is a 422."""
        error = ContentTypeError()

        assert error.message == "Invalid content type"
        assert error.status_code == 422
        assert isinstance(error, APIError)


class TestValidationError:
    """Tests for ValidationError exception."""

    def test_instantiation_with_message(self):
        """ValidationError stores message."""
        error = ValidationError("Invalid data")

        assert error.message == "Invalid data"
        assert error.errors == []

    def test_instantiation_with_errors(self):
        """ValidationError stores validation error details."""
        errors = ["field 'entryId' is required", "field 'environment' is required"]
        error = ValidationError("Validation failed", errors=errors)

        assert error.errors == errors
        assert isinstance(error, ClientError)


class TestConfigurationError:
    """Tests for ConfigurationError exception."""

    def test_defaults_to_400(self):
        """ConfigurationError defaults to a 400 status."""
        error = ConfigurationError("Missing apiKey")

        assert error.status_code == 400
        assert isinstance(error, ValidationError)

    def test_custom_status(self):
        """ConfigurationError accepts a 500 status."""
        assert ConfigurationError("No config", status_code=500).status_code == 500
