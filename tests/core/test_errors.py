"""Error hierarchy tests — codes, categories and log extras."""

from function_parser.core.errors import (
    EndpointRegistrationError,
    ErrorCategory,
    ErrorContext,
    ErrorSeverity,
    FunctionParserError,
    InvalidEndpointError,
    RootPathRequiredError,
    UnsupportedRequestTypeError,
)


def test_every_error_is_a_function_parser_error():
    for error in (
        RootPathRequiredError(),
        UnsupportedRequestTypeError("HEAD"),
        InvalidEndpointError("missing"),
        EndpointRegistrationError("a.py", "g", ValueError("boom")),
    ):
        assert isinstance(error, FunctionParserError)
        assert error.code
        assert isinstance(error.category, ErrorCategory)


def test_root_path_error_is_critical_configuration():
    error = RootPathRequiredError()
    assert error.code == "ROOT_PATH_REQUIRED"
    assert error.category == ErrorCategory.CONFIGURATION
    assert error.severity == ErrorSeverity.CRITICAL
    assert "root_path is required" in str(error)


def test_registration_error_names_file_group_and_cause():
    cause = UnsupportedRequestTypeError("HEAD")
    error = EndpointRegistrationError("/srv/billing/x.endpoint.py", "billing", cause)
    assert "/srv/billing/x.endpoint.py" in error.message
    assert "'billing'" in error.message
    assert "HEAD" in error.message
    assert error.cause is cause
    assert error.to_log_extra() == {
        "error_code": "ENDPOINT_REGISTRATION_FAILED",
        "file": "/srv/billing/x.endpoint.py",
        "group": "billing",
    }


def test_log_extra_omits_missing_context():
    error = InvalidEndpointError("bad", ErrorContext(name="refunds"))
    assert error.to_log_extra() == {"error_code": "INVALID_ENDPOINT", "endpoint": "refunds"}
