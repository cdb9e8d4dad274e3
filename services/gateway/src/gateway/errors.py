"""Gateway error taxonomy."""


class GatewayError(Exception):
    """Base class for gateway failures."""


class ConfigurationError(GatewayError):
    """Required configuration (e.g. the provider credential) is missing."""


class UpstreamResponseError(GatewayError):
    """Provider answered, but the response lacks the generated output."""


class UpstreamCallError(GatewayError):
    """The call to the provider failed (network, auth, rate limit, bad payload)."""


class InputValidationError(GatewayError):
    """GraphQL input violates a range or enum rule of the domain model."""
