"""Error taxonomy for the diff analyzer pipeline."""


class AnalyzerError(Exception):
    """Base class for every failure that aborts the pipeline."""


class ConfigError(AnalyzerError):
    """Missing credential, invalid setting or malformed argument."""


class RetrievalError(AnalyzerError):
    """The git diff could not be produced."""

    def __init__(self, message: str, stderr: str | None = None) -> None:
        """
        Initialize RetrievalError.

        Args:
            message: Human readable description of the failure
            stderr: Captured standard error of the git process, if any
        """
        self.stderr = stderr
        if stderr and stderr.strip():
            message = f"{message}: {stderr.strip()}"
        super().__init__(message)


class SummarizationError(AnalyzerError):
    """The summarization API call failed or returned an unusable payload."""

    BODY_SNIPPET_LENGTH = 500

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        body: str | None = None,
    ) -> None:
        """
        Initialize SummarizationError.

        Args:
            message: Human readable description of the failure
            status_code: HTTP status returned by the API, if one was received
            body: Raw response body, truncated to a snippet in the message
        """
        self.status_code = status_code
        self.body = body
        if status_code is not None:
            message = f"{message} (HTTP {status_code})"
        if body:
            snippet = body.strip()
            if len(snippet) > self.BODY_SNIPPET_LENGTH:
                snippet = snippet[: self.BODY_SNIPPET_LENGTH] + "..."
            message = f"{message}: {snippet}"
        super().__init__(message)


class WriteError(AnalyzerError):
    """An output file could not be written."""
