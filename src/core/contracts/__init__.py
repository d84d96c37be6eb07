"""
Contract Validation Module

Validation of JSON quantity payloads against the shipped JSON Schema.
"""

from .validators import (
    ContractValidator,
    QuantityValidator,
    SchemaLoader,
    quantity_from_contract,
    validate_quantity,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "QuantityValidator",
    # Functions
    "validate_quantity",
    "quantity_from_contract",
]
