"""Normalization steps: normal-form analysis and 3NF synthesis."""

from .step_normal_form_analysis import step_normal_form_analysis
from .step_3nf_synthesis import step_3nf_synthesis

__all__ = [
    "step_normal_form_analysis",
    "step_3nf_synthesis",
]
