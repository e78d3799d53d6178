"""Shared helpers for the normalization steps."""

from typing import Any, List, Optional, Tuple

from FDNORM.ir.models.er_relational import Table
from FDNORM.ir.models.functional_dependency import FunctionalDependency
from FDNORM.utils.error_handling import ErrorContext, FDError, handle_operation_error
from FDNORM.utils.fd import RelationScheme, normalize_fd
from FDNORM.utils.logging import get_logger

logger = get_logger(__name__)


def _filter_fds_for_table(
    table_name: str,
    fds: List[FunctionalDependency],
    table_attributes: set,
) -> List[FunctionalDependency]:
    """Keep only non-trivial FDs fully contained in the table's attributes."""
    filtered: List[FunctionalDependency] = []
    for fd in fds:
        if not fd.attributes <= table_attributes:
            logger.debug(
                f"Skipping FD for table {table_name} because attributes are missing from table. "
                f"FD={fd} missing={sorted(fd.attributes - table_attributes)}"
            )
            continue
        if fd.is_trivial:
            continue
        filtered.append(fd)
    return filtered


def build_scheme_for_table(
    table: Table,
    raw_fds: List[Any],
    operation: str,
) -> Tuple[Optional[RelationScheme], str]:
    """
    Build a RelationScheme from a table description and its raw FD literals.

    Returns:
        (scheme, note). scheme is None when no applicable FDs remain; note explains why.

    Raises:
        OperationError: If an FD literal or a column name is malformed
    """
    fds: List[FunctionalDependency] = []
    for raw in raw_fds or []:
        try:
            fds.append(normalize_fd(raw))
        except FDError as e:
            handle_operation_error(
                e,
                ErrorContext(operation=operation, scheme_name=table.name, fd=repr(raw)),
                reraise=True,
            )

    if not fds:
        return None, f"Table {table.name}: No functional dependencies to normalize"

    attributes = set(table.column_names)
    fds = _filter_fds_for_table(table.name, fds, attributes)
    if not fds:
        return None, f"Table {table.name}: No applicable functional dependencies after filtering"

    try:
        scheme = RelationScheme(name=table.name, attributes=attributes, fds=fds)
    except FDError as e:
        handle_operation_error(
            e,
            ErrorContext(operation=operation, scheme_name=table.name, attributes=sorted(attributes)),
            reraise=True,
        )
    return scheme, ""


def keys_to_lists(keys) -> List[List[str]]:
    return [sorted(k) for k in sorted(keys, key=lambda k: (len(k), sorted(k)))]

