"""Intermediate Representation (IR) models."""

from .models import (
    FunctionalDependency,
    FDSet,
    AttributeSet,
    Column,
    Table,
    RelationalSchema,
    NormalFormReport,
    NormalFormAnalysis,
    NormalizedSchema,
)

__all__ = [
    "FunctionalDependency",
    "FDSet",
    "AttributeSet",
    "Column",
    "Table",
    "RelationalSchema",
    "NormalFormReport",
    "NormalFormAnalysis",
    "NormalizedSchema",
]
