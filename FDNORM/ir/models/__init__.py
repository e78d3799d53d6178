"""IR (Intermediate Representation) models."""

from .functional_dependency import (
    Attribute,
    AttributeSet,
    FDSet,
    FunctionalDependency,
    as_attribute_set,
    sort_attributes,
    sort_fds,
)
from .er_relational import (
    Column,
    Table,
    RelationalSchema,
    NormalFormReport,
    NormalFormAnalysis,
    NormalizedSchema,
)

__all__ = [
    "Attribute",
    "AttributeSet",
    "FDSet",
    "FunctionalDependency",
    "as_attribute_set",
    "sort_attributes",
    "sort_fds",
    "Column",
    "Table",
    "RelationalSchema",
    "NormalFormReport",
    "NormalFormAnalysis",
    "NormalizedSchema",
]
