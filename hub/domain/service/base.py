"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the rules that span an entity and its store round
    trips: secret-key checks, counters, cascades.
    """

    pass
