"""Normal-form analysis step.

Classify every table of a relational schema against 2NF/3NF/BCNF (and the FD-only
sufficient conditions for 4NF/PJNF) using its functional dependencies.
Pure transformation; no side effects beyond logging.
"""

from typing import Any, Dict, List

from FDNORM.ir.models.er_relational import NormalFormAnalysis, NormalFormReport, RelationalSchema
from FDNORM.utils.fd import (
    fds_to_dicts,
    find_3nf_violations,
    find_all_keys,
    find_bcnf_violations,
    find_minimal_cover,
    highest_normal_form,
    is_guaranteed_in_4nf,
    is_guaranteed_in_pjnf,
    is_in_2nf,
    prime_attributes,
)
from FDNORM.utils.logging import get_logger
from FDNORM.utils.pipeline_config import get_fd_engine_config

from .common import build_scheme_for_table, keys_to_lists

logger = get_logger(__name__)

OPERATION = "normal_form_analysis"


def step_normal_form_analysis(
    relational_schema: Dict[str, Any],
    functional_dependencies: Dict[str, List[Any]],
) -> Dict[str, Any]:
    """
    Analyze each table's normal form.

    Args:
        relational_schema: {"tables": [{"name": ..., "columns": [{"name": ...}], ...}]}
        functional_dependencies: table name -> list of FD literals
            ({"lhs": [...], "rhs": [...]}, [lhs, rhs] pairs, or "A, B -> C" text)

    Returns:
        dict: {"reports": [...], "skipped_tables": [...]}

    Example:
        >>> result = step_normal_form_analysis(
        ...     relational_schema={"tables": [{"name": "R", "columns": [{"name": "A"}, {"name": "B"}]}]},
        ...     functional_dependencies={"R": [{"lhs": ["A"], "rhs": ["B"]}]},
        ... )
        >>> result["reports"][0]["highest_normal_form"]
        'PJNF'
    """
    logger.info("Starting normal-form analysis (deterministic)")
    config = get_fd_engine_config()
    schema_model = RelationalSchema.model_validate(relational_schema)

    analysis = NormalFormAnalysis()
    for table in schema_model.tables:
        scheme, note = build_scheme_for_table(
            table, functional_dependencies.get(table.name, []), OPERATION
        )
        if scheme is None:
            logger.debug(note)
            analysis.skipped_tables.append(table.name)
            continue

        fds, universe = scheme.fds, scheme.attributes
        keys = find_all_keys(fds, universe, exhaustive=bool(config.exhaustive_key_search))
        third_nf_violations = [str(fd) for fd in find_3nf_violations(fds, universe, keys)]
        bcnf_violations = [str(fd) for fd in find_bcnf_violations(fds, universe)]

        report = NormalFormReport(
            table=table.name,
            candidate_keys=keys_to_lists(keys),
            prime_attributes=sorted(prime_attributes(keys)),
            minimal_cover=fds_to_dicts(find_minimal_cover(fds)),
            is_in_2nf=is_in_2nf(fds, universe, keys),
            is_in_3nf=not third_nf_violations,
            is_in_bcnf=not bcnf_violations,
            is_guaranteed_in_4nf=is_guaranteed_in_4nf(fds, universe, keys),
            is_guaranteed_in_pjnf=is_guaranteed_in_pjnf(fds, universe, keys),
            highest_normal_form=highest_normal_form(fds, universe, keys).value,
            third_nf_violations=third_nf_violations,
            bcnf_violations=bcnf_violations,
        )
        logger.info(f"Table {table.name}: highest normal form {report.highest_normal_form}")
        analysis.reports.append(report)

    return analysis.model_dump()
