"""
Contract Validation Module

JSON Schema contracts for serialized digitwise payloads.
"""

from .validators import (
    DECIMAL_BIGINT_SCHEMA,
    KNOWN_SCHEMAS,
    NUMBER_GRID_SCHEMA,
    ContractViolation,
    check_contract,
    contract_errors,
    error_location,
    get_validator,
    is_valid_payload,
    load_schema,
    validate_decimal_bigint,
    validate_number_grid,
)

__all__ = [
    # Schema names
    "DECIMAL_BIGINT_SCHEMA",
    "NUMBER_GRID_SCHEMA",
    "KNOWN_SCHEMAS",
    # Exceptions
    "ContractViolation",
    # Loading
    "load_schema",
    "get_validator",
    # Checks
    "check_contract",
    "contract_errors",
    "error_location",
    "is_valid_payload",
    "validate_decimal_bigint",
    "validate_number_grid",
]
