"""
Exceptions for the provider layer.

Provider calls never raise: their failures travel as ``ProviderFailure``
values. The only exception raised by this package is for configuration
problems detected while the gateway is being built.
"""


class GatewayConfigurationError(Exception):
    """
    Raised at start-up when the gateway cannot be assembled.

    Examples:
    - Prompt template directory or template file missing
    - Provider configured without a model identifier
    """
    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}
