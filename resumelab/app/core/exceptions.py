"""
Service-layer exceptions. Routers translate these into HTTP responses.
"""


class TextExtractionError(ValueError):
    """No usable text could be pulled out of an uploaded document."""


class LLMServiceError(RuntimeError):
    """The LLM API call failed (transport, HTTP status or configuration)."""


class LLMNotConfiguredError(LLMServiceError):
    """No API key is configured for the LLM provider."""


class LLMTimeoutError(LLMServiceError):
    """The LLM API did not answer within the configured timeout."""


class LLMResponseError(LLMServiceError):
    """The LLM answered, but the reply is empty or not the JSON we asked for."""


class DocumentRenderError(RuntimeError):
    """A PDF/DOCX renderer failed or is not available."""
