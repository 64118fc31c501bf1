"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the rules that span posts and comments, such as
    the delete cascade and counter re-derivation.
    """

    pass
