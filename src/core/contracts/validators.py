"""
Payload Contracts — JSON Schema checks at the serialization boundary

Every JSON payload that enters or leaves digitwise passes through one of
the contracts below before it is turned into (or produced from) a domain
value:

- decimal_bigint: {"digits": [d0, d1, ...]}   (conversions.from_payload / to_payload)
- number_grid:    {"rows": [[...], ...]}       (grid_loader.grid_from_payload / grid_to_payload)

Schemas ship as package data in src/core/contracts/schema/ and are read
through importlib.resources, so they resolve the same way from a source
checkout and from an installed wheel.

A payload that breaks its contract raises ContractViolation carrying
every jsonschema error, not just the first one. Canonical form (no
most-significant zeros) is not a schema concern: the DecimalBigInt
model enforces it on load.
"""

import json
from functools import lru_cache
from importlib import resources
from typing import Any, Final

from jsonschema import Draft202012Validator, SchemaError, ValidationError

# =============================================================================
# SCHEMA LOCATION
# =============================================================================

SCHEMA_PACKAGE: Final[str] = "src.core.contracts"
SCHEMA_SUBDIR: Final[str] = "schema"

DECIMAL_BIGINT_SCHEMA: Final[str] = "decimal_bigint"
NUMBER_GRID_SCHEMA: Final[str] = "number_grid"

KNOWN_SCHEMAS: Final[tuple[str, ...]] = (DECIMAL_BIGINT_SCHEMA, NUMBER_GRID_SCHEMA)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ContractViolation(ValueError):
    """
    A payload does not satisfy its JSON Schema contract.

    Attributes:
        schema_name: Contract that was checked
        errors: All jsonschema ValidationError objects, ordered by location
    """

    def __init__(self, schema_name: str, errors: list[ValidationError]):
        self.schema_name = schema_name
        self.errors = errors
        details = "; ".join(f"{error_location(e)}: {e.message}" for e in errors)
        super().__init__(f"{schema_name} contract violated: {details}")


def error_location(error: ValidationError) -> str:
    """JSON-pointer-like location of an error inside the payload ('/' for the root)."""
    return "/" + "/".join(str(part) for part in error.absolute_path)


# =============================================================================
# SCHEMA LOADING
# =============================================================================


@lru_cache(maxsize=None)
def load_schema(schema_name: str) -> dict[str, Any]:
    """
    Read and meta-validate a bundled schema.

    Cached: each schema file is read once per process.

    Raises:
        FileNotFoundError: if no schema with that name is bundled
        ValueError: if the file is not a valid Draft 2020-12 schema
    """
    resource = (
        resources.files(SCHEMA_PACKAGE)
        .joinpath(SCHEMA_SUBDIR)
        .joinpath(f"{schema_name}.json")
    )
    if not resource.is_file():
        raise FileNotFoundError(f"No bundled schema named {schema_name!r}")

    schema = json.loads(resource.read_text(encoding="utf-8"))

    try:
        Draft202012Validator.check_schema(schema)
    except SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e.message}") from e

    return schema


@lru_cache(maxsize=None)
def get_validator(schema_name: str) -> Draft202012Validator:
    """Compiled validator for a bundled schema (cached)."""
    return Draft202012Validator(load_schema(schema_name))


# =============================================================================
# CHECKS
# =============================================================================


def contract_errors(schema_name: str, payload: Any) -> list[ValidationError]:
    """All violations of a contract, ordered by their location in the payload."""
    errors = get_validator(schema_name).iter_errors(payload)
    return sorted(errors, key=lambda e: [str(part) for part in e.absolute_path])


def is_valid_payload(schema_name: str, payload: Any) -> bool:
    """Check a payload without raising."""
    return get_validator(schema_name).is_valid(payload)


def check_contract(schema_name: str, payload: Any) -> None:
    """
    Enforce a contract on a payload.

    Raises:
        ContractViolation: with every violation found
    """
    errors = contract_errors(schema_name, payload)
    if errors:
        raise ContractViolation(schema_name, errors)


def validate_decimal_bigint(payload: Any) -> None:
    """Enforce the decimal_bigint contract."""
    check_contract(DECIMAL_BIGINT_SCHEMA, payload)


def validate_number_grid(payload: Any) -> None:
    """Enforce the number_grid contract."""
    check_contract(NUMBER_GRID_SCHEMA, payload)
