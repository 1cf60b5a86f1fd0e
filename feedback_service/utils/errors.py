"""Custom exception hierarchy for the feedback service.

All application exceptions inherit from :class:`FeedbackServiceError`, which
carries an optional ``provider_name`` so error handlers can identify which
collaborator (e.g. "comprehend", "sqlite_feedback", "anthropic") caused the
failure.

The hierarchy is split along the line the HTTP layer cares about:

    FeedbackServiceError  (base -- catch-all for any feedback-service error)
    +-- MalformedRequestError   (client: body missing or not a JSON object)
    +-- ValidationError         (client: a submission rule was violated)
    +-- DependencyFailure       (server: a collaborator call failed)
    |   +-- ClassificationError (sentiment classifier failed)
    |   +-- StoreError          (feedback or statistics store failed)
    |   +-- LLMError            (LLM API call failed or was unparseable)
    +-- ConfigurationError      (startup / missing config)

Client errors surface their message verbatim as a 400.  Everything else is
collapsed into a generic 500 by ``ErrorHandlingMiddleware``; the detail stays
in the server log.
"""


class FeedbackServiceError(Exception):
    """Base exception for all feedback-service errors.

    Every subclass carries a human-readable ``message`` and an optional
    ``provider_name`` identifying which collaborator triggered the error.
    The ``__str__`` method prefixes the provider name in brackets for
    structured log output, e.g. ``[sqlite_feedback] database is locked``.
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        provider_name: str | None = None,
    ) -> None:
        self._message = message
        self._provider_name = provider_name
        super().__init__(self._message)

    @property
    def message(self) -> str:
        return self._message

    @property
    def provider_name(self) -> str | None:
        return self._provider_name

    def __str__(self) -> str:
        if self._provider_name:
            return f"[{self._provider_name}] {self._message}"
        return self._message


# ---------------------------------------------------------------------------
# Client errors (400)
# ---------------------------------------------------------------------------

class MalformedRequestError(FeedbackServiceError):
    """Raised when the request body is missing or cannot be parsed."""

    def __init__(
        self,
        message: str = "Request body is required",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)


class ValidationError(FeedbackServiceError):
    """Raised when a submission or query violates an input rule.

    The message names the violated rule and is returned to the caller.
    """

    def __init__(
        self,
        message: str = "Invalid request",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)


# ---------------------------------------------------------------------------
# Collaborator errors (500)
# ---------------------------------------------------------------------------

class DependencyFailure(FeedbackServiceError):
    """Raised when an external collaborator (classifier, store) fails.

    Callers only ever see a generic "Internal server error"; the message
    and provider name are for the server log.
    """

    def __init__(
        self,
        message: str = "A dependency call failed",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)


class ClassificationError(DependencyFailure):
    """Raised when the sentiment classifier cannot produce a result."""

    def __init__(
        self,
        message: str = "Failed to analyze sentiment",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)


class StoreError(DependencyFailure):
    """Raised when the feedback or statistics store cannot be read or written."""

    def __init__(
        self,
        message: str = "Store operation failed",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)


class LLMError(DependencyFailure):
    """Raised when an LLM API call fails or returns an unparseable response."""

    def __init__(
        self,
        message: str = "LLM API call failed",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)


# ---------------------------------------------------------------------------
# Startup errors
# ---------------------------------------------------------------------------

class ConfigurationError(FeedbackServiceError):
    """Raised when configuration is invalid or missing at startup."""

    def __init__(
        self,
        message: str = "Invalid or missing configuration",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)
