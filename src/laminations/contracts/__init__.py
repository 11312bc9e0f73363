"""
Contract Validation Module

Validation and loading of lamination definition documents (JSON).
"""

from .definition import (
    LaminationDefinition,
    load_lamination_definition,
    load_lamination_definition_file,
)
from .validators import (
    ContractValidator,
    LaminationDefinitionValidator,
    SchemaLoader,
    validate_lamination_definition,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "LaminationDefinitionValidator",
    "LaminationDefinition",
    # Functions
    "validate_lamination_definition",
    "load_lamination_definition",
    "load_lamination_definition_file",
]
