"""Domain-level exceptions.

All rule violations and collaborator failures are expressed as subclasses
of DomainException so the stores can convert them into state fields and
the CLI layer can catch them uniformly.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class GatewayError(DomainException):
    """An external collaborator (catalog or auth provider) could not answer."""
