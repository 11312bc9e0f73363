"""
JSON Schema Contract Validators

Validation of lamination definition documents against their formal JSON
Schema contract, using the jsonschema library (Draft 2020-12).

Schemas (laminations/contracts/schema/):
- lamination_definition.json

Every violation of a document is collected and logged; the most relevant one
is raised.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Final, Iterator

import jsonschema
from jsonschema import Draft202012Validator, ValidationError
from jsonschema.exceptions import best_match

logger = logging.getLogger(__name__)

# Schemas ship as package data next to this module
SCHEMA_DIR: Final[Path] = Path(__file__).parent / "schema"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """Reads schema files from one directory, meta-validates and caches them."""

    def __init__(self, schema_dir: Path | None = None):
        self.schema_dir = schema_dir or SCHEMA_DIR
        if not self.schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self.schema_dir}")

        self._cache: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Args:
            schema_name: File name without the .json suffix

        Returns:
            Parsed schema, the same object on every call

        Raises:
            FileNotFoundError: If the schema file does not exist
            ValueError: If the file is not a valid Draft 2020-12 schema
        """
        cached = self._cache.get(schema_name)
        if cached is not None:
            return cached

        path = self.schema_dir / f"{schema_name}.json"
        if not path.is_file():
            raise FileNotFoundError(f"Schema not found: {path}")

        schema = json.loads(path.read_text(encoding="utf-8"))
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {path.name}: {e.message}") from e

        return self._cache.setdefault(schema_name, schema)


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """Validator bound to one named schema."""

    def __init__(self, schema_name: str, loader: SchemaLoader = _SCHEMA_LOADER):
        self.schema_name = schema_name
        self._validator = Draft202012Validator(loader.load_schema(schema_name))

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        return self._validator.iter_errors(data)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Check data against the schema, reporting every violation.

        Raises:
            ValidationError: The most relevant violation, if there is any
        """
        errors = list(self.iter_errors(data))
        if not errors:
            return

        logger.debug("%d %s schema violations", len(errors), self.schema_name)
        for error in errors:
            location = "/".join(map(str, error.absolute_path)) or "<root>"
            logger.debug("  %s: %s", location, error.message)

        raise best_match(errors)


class LaminationDefinitionValidator(ContractValidator):
    def __init__(self):
        super().__init__("lamination_definition")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_lamination_definition(data: Dict[str, Any]) -> None:
    """
    Validate a lamination definition document.

    Raises:
        ValidationError: If data does not match the schema
    """
    LaminationDefinitionValidator().validate(data)
