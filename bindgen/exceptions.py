"""Exceptions raised by bindgen.

The resolvers in this package are pure functions, so every error here is
terminal for the call that raised it. The driver (context builder, codegen)
stops at the first one and reports which operation failed.
"""

from __future__ import annotations


class BindgenError(Exception):
    """Base exception for all bindgen errors."""

    def __init__(self, message: str, *args):
        self.message = message
        super().__init__(message, *args)


class InvalidInputShape(BindgenError):
    """A filter or resolver received a value of the wrong kind."""


class MissingRequiredArgument(BindgenError):
    """A mandatory argument (the HTTP method) was not supplied."""

    def __init__(self, argument: str, caller: str):
        self.argument = argument
        self.caller = caller
        super().__init__(f"{caller} requires a '{argument}' argument")


class UnsupportedMethod(BindgenError):
    """HTTP method outside get/post/put/delete/patch/head."""

    def __init__(self, method: str):
        self.method = method
        super().__init__(
            f"Unsupported HTTP method: '{method}'. "
            "Supported methods are: get, post, put, delete, patch, head"
        )


class SelectionError(BindgenError):
    """Base for failures to pick a body or response schema."""


class MissingContent(SelectionError):
    """The request body or response has no 'content' field."""


class NoUsableSchema(SelectionError):
    """Neither application/json nor the first media type carries a schema."""


class EmptyResponses(SelectionError):
    """The responses mapping has no entries."""


class SpecLoadError(BindgenError):
    """Failed to read or parse an OpenAPI document.

    Attributes:
        source: The path or URL that failed to load.
        cause: The underlying exception, if any.
    """

    def __init__(self, source: str, reason: str | None = None, cause: Exception | None = None):
        self.source = source
        self.cause = cause
        message = f"Failed to load OpenAPI document from '{source}'"
        if reason:
            message += f": {reason}"
        elif cause:
            message += f": {cause}"
        super().__init__(message)


class ConfigurationError(BindgenError):
    """Invalid or missing generator configuration."""

    def __init__(self, message: str, config_path: str | None = None, field: str | None = None):
        self.config_path = config_path
        self.field = field
        full_message = message
        if config_path:
            full_message = f"{message} in '{config_path}'"
        if field:
            full_message += f" (field: {field})"
        super().__init__(full_message)


class OperationGenerationError(BindgenError):
    """Resolving one path/operation pair failed.

    Attributes:
        method: HTTP method of the operation.
        path: URL path template of the operation.
        cause: The core error that aborted generation.
    """

    def __init__(self, method: str, path: str, cause: Exception):
        self.method = method
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to generate {method.upper()} {path}: {cause}")


class OutputError(BindgenError):
    """Writing the generated file failed."""

    def __init__(self, output_path: str, cause: Exception | None = None):
        self.output_path = output_path
        self.cause = cause
        message = f"Failed to write output to '{output_path}'"
        if cause:
            message += f": {cause}"
        super().__init__(message)
