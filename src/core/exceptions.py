"""MboaSMS Exception Hierarchy.

All custom exceptions inherit from MboaSMSError.
Phone classification itself never raises: malformed numbers are
reported as invalid instead.

Exception Hierarchy:
    MboaSMSError (base)
    ├── ConfigurationError
    ├── ValidationError
    └── IntegrationError
        └── GatewayError
"""


class MboaSMSError(Exception):
    """Base exception for all MboaSMS errors.

    Allows broad exception handling at the workflow boundary.
    """

    pass


class ConfigurationError(MboaSMSError):
    """Configuration is invalid or missing.

    Raised when:
        - Gateway credentials are missing
        - Configuration file is malformed
    """

    pass


class ValidationError(MboaSMSError):
    """Data validation failed.

    Raised when:
        - Required field is missing
        - Phone number is not a valid Cameroonian mobile
        - Field exceeds its length limit
    """

    pass


class IntegrationError(MboaSMSError):
    """External integration failed.

    Base class for integration-specific errors.
    """

    pass


class GatewayError(IntegrationError):
    """SMS gateway rejected or failed a request.

    Raised when:
        - Gateway returns a non-2xx status
        - Gateway body is not valid JSON
    """

    pass
