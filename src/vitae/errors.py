"""Exception definitions for Vitae"""


class VitaeException(Exception):
    """Base exception for all Vitae errors.

    All custom exceptions in Vitae inherit from this class. Use this as a
    catch-all for Vitae-specific errors when you don't need to handle
    specific exception types.
    """

    pass


class ConfigException(VitaeException):
    """Raised when configuration validation or loading fails.

    Use this exception when:
    - The configuration file cannot be found
    - The TOML syntax is invalid
    - Configuration validation fails (invalid values, unknown types)
    """

    pass


class ApiException(VitaeException):
    """Raised when a call to the remote résumé service fails.

    Use this exception when:
    - The request cannot be sent (DNS, connection, timeout)
    - The service answers with a 5xx status code
    - The response body cannot be decoded or does not match the expected model
    - A requested code sample does not exist
    """

    pass


class ClientError(ApiException):
    """Raised when HTTP 4XX client errors occur.

    The error indicates a client-side problem (unknown sample, invalid
    input payload, etc.) and repeating the request unchanged would not
    succeed.
    """

    pass


class SchemaParseError(VitaeException):
    """Base class for input schema parse errors.

    Parse errors are returned by ``parse_schema`` rather than raised, so
    callers decide how to surface them.
    """

    pass


class MalformedJSONError(SchemaParseError):
    """The input schema is not valid JSON or not a JSON object."""

    pass


class FormValidationError(VitaeException):
    """Base class for form validation errors.

    ``validate`` returns the first violation it finds as an instance of one
    of the subclasses below. ``field`` names the offending property, with an
    ``[index]`` suffix for array items.
    """

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field
        self.message = message

    def __eq__(self, other):
        return (
            type(self) is type(other)
            and self.field == other.field
            and self.message == other.message
        )

    def __hash__(self):
        return hash((type(self), self.field, self.message))

    def __repr__(self):
        return f"{type(self).__name__}({self.field!r})"


class MissingRequiredError(FormValidationError):
    """A required scalar field holds empty text."""

    def __init__(self, field: str):
        super().__init__(field, f"'{field}' is required.")


class MissingRequiredArrayItemError(MissingRequiredError):
    """A required array field has no items, or a required field cannot be filled."""

    def __init__(self, field: str):
        FormValidationError.__init__(
            self, field, f"'{field}' is required and must have at least one item."
        )


class TypeMismatchError(FormValidationError):
    """Scalar or array item text does not parse as its declared numeric type."""

    def __init__(self, field: str, expected_type: str):
        label = "a valid integer" if expected_type == "integer" else "a valid decimal number"
        super().__init__(field, f"'{field}' must be {label}.")
        self.expected_type = expected_type

    def __repr__(self):
        return f"{type(self).__name__}({self.field!r}, {self.expected_type!r})"


class FormInputException(VitaeException):
    """Raised when textual input cannot be applied to a form.

    Use this exception when:
    - A ``NAME=VALUE`` assignment is malformed or names an unknown field
    - A boolean or enum value is not one of the accepted choices
    - A value targets a field whose type is unsupported
    """

    pass
