"""Domain exceptions for business rule violations."""


class DomainError(Exception):
    """Base exception for domain layer."""


class InfrastructureError(DomainError):
    """Raised when infrastructure operations fail (catalog files, network, etc.)."""
