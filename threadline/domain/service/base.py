"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services orchestrate storage handles on behalf of callers that
    only hold serialized identifiers.
    """

    pass
