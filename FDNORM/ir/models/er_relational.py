"""Pydantic models for relational schema descriptions and normalization outputs.

These models are used internally by the deterministic steps to avoid raw dict handling.
Public step functions still accept/return dicts.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field


class Column(BaseModel):
    name: str
    description: Optional[str] = None
    type_hint: Optional[str] = None
    nullable: Optional[bool] = None
    is_primary_key: bool = False

    model_config = {"extra": "allow"}


class Table(BaseModel):
    name: str
    columns: List[Column] = Field(default_factory=list)
    primary_key: List[str] = Field(default_factory=list)

    # Normalization metadata
    is_decomposed: bool = False
    original_table: Optional[str] = None
    functional_dependencies: List[Dict[str, List[str]]] = Field(default_factory=list)
    candidate_keys: List[List[str]] = Field(default_factory=list)

    model_config = {"extra": "allow"}

    @property
    def column_names(self) -> List[str]:
        return [c.name for c in self.columns]


class RelationalSchema(BaseModel):
    tables: List[Table] = Field(default_factory=list)

    model_config = {"extra": "allow"}


class NormalFormReport(BaseModel):
    table: str
    candidate_keys: List[List[str]] = Field(default_factory=list)
    prime_attributes: List[str] = Field(default_factory=list)
    minimal_cover: List[Dict[str, List[str]]] = Field(default_factory=list)
    is_in_2nf: bool = True
    is_in_3nf: bool = True
    is_in_bcnf: bool = True
    is_guaranteed_in_4nf: bool = False
    is_guaranteed_in_pjnf: bool = False
    highest_normal_form: str = "1NF"
    third_nf_violations: List[str] = Field(default_factory=list)
    bcnf_violations: List[str] = Field(default_factory=list)


class NormalFormAnalysis(BaseModel):
    reports: List[NormalFormReport] = Field(default_factory=list)
    skipped_tables: List[str] = Field(default_factory=list)


class NormalizedSchema(BaseModel):
    normalized_tables: List[Table] = Field(default_factory=list)
    decomposition_steps: List[str] = Field(default_factory=list)
    attribute_mapping: Dict[str, List[str]] = Field(default_factory=dict)
    dependency_preservation_report: Dict[str, bool] = Field(default_factory=dict)
    key_preservation_report: Dict[str, bool] = Field(default_factory=dict)

    model_config = {"extra": "allow"}
