from .exceptions import (
    BusinessRuleViolationException,
    CancellationWindowExpiredException,
    DomainException,
    DuplicateResourceException,
    InsufficientInventoryException,
    InvalidDateRangeException,
    InventoryShortage,
    InventoryUpdateFailedException,
    ResourceNotFoundException,
    StoreException,
    ValidationException,
)

__all__ = [
    "DomainException",
    "ValidationException",
    "InvalidDateRangeException",
    "ResourceNotFoundException",
    "BusinessRuleViolationException",
    "InventoryShortage",
    "InsufficientInventoryException",
    "CancellationWindowExpiredException",
    "DuplicateResourceException",
    "StoreException",
    "InventoryUpdateFailedException",
]
