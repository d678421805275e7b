"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold logic that belongs to no single entity, such as
    mapping provider payloads or coordinating with a repository.
    """

    pass
