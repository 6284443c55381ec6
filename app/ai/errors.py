from __future__ import annotations


class AIError(RuntimeError):
    def __init__(self, message: str, *, code: str = "llm_unavailable"):
        super().__init__(message)
        self.code = code


class AIConfigError(AIError):
    """Misconfiguration detected while selecting a provider; never retried."""


class UnsupportedProvider(AIConfigError):
    def __init__(self, provider: str):
        super().__init__(f"Unsupported LLM_PROVIDER: {provider}", code="unsupported_provider")
        self.provider = provider


class MissingCredential(AIConfigError):
    def __init__(self, message: str = "EXTERNAL_LLM_API_KEY is required for external provider"):
        super().__init__(message, code="missing_credential")


class MissingModel(AIConfigError):
    def __init__(self, message: str = "MODEL_NAME is not configured"):
        super().__init__(message, code="missing_model")


class ProviderError(AIError):
    """The backend was reached (or not) but produced no usable reply."""


class ProviderHTTPError(ProviderError):
    def __init__(self, provider: str, status: int, body: str):
        super().__init__(f"{provider} error: {status} {body}", code="provider_http_error")
        self.provider = provider
        self.status = status
        self.body = body


class ProviderContentMissing(ProviderError):
    def __init__(self, provider: str):
        super().__init__(f"{provider} response missing content", code="provider_content_missing")
        self.provider = provider


class ProviderConnectionError(ProviderError):
    def __init__(self, provider: str, reason: str):
        super().__init__(f"{provider} request failed: {reason}", code="provider_connection_error")
        self.provider = provider
