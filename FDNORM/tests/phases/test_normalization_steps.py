"""Unit tests for the deterministic normalization steps."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent.parent.parent))

from FDNORM.phases.normalization import step_3nf_synthesis, step_normal_form_analysis
from FDNORM.utils.error_handling import OperationError


def _table(name, *columns, primary_key=None):
    return {
        "name": name,
        "columns": [{"name": c} for c in columns],
        "primary_key": list(primary_key or []),
    }


@pytest.fixture
def customer_schema():
    return {"tables": [
        _table("Customer", "id", "zipcode", "city", primary_key=["id"]),
        _table("Order", "order_id", "total", primary_key=["order_id"]),
        _table("Tag", "label"),
    ]}


@pytest.fixture
def customer_fds():
    return {
        "Customer": [
            {"lhs": ["id"], "rhs": ["zipcode"]},
            "zipcode -> city",
        ],
        "Order": [[["order_id"], ["total"]]],
    }


class TestStep3NFSynthesis:
    """step_3nf_synthesis decomposes tables that are not in 3NF."""

    def test_decomposes_transitive_dependency(self, customer_schema, customer_fds, monkeypatch):
        monkeypatch.setenv("FDNORM_LOG_DECOMPOSITION", "0")

        result = step_3nf_synthesis(customer_schema, customer_fds)

        tables = {t["name"]: t for t in result["normalized_tables"]}
        assert set(tables) == {"Customer_1", "Customer_2", "Order", "Tag"}

        assert [c["name"] for c in tables["Customer_1"]["columns"]] == ["id", "zipcode"]
        assert tables["Customer_1"]["primary_key"] == ["id"]
        assert tables["Customer_1"]["is_decomposed"] is True
        assert tables["Customer_1"]["original_table"] == "Customer"

        assert [c["name"] for c in tables["Customer_2"]["columns"]] == ["zipcode", "city"]
        assert tables["Customer_2"]["primary_key"] == ["zipcode"]
        assert tables["Customer_2"]["functional_dependencies"] == [{"lhs": ["zipcode"], "rhs": ["city"]}]

        assert result["attribute_mapping"] == {
            "Customer.id": ["Customer_1.id"],
            "Customer.zipcode": ["Customer_1.zipcode", "Customer_2.zipcode"],
            "Customer.city": ["Customer_2.city"],
        }
        assert result["dependency_preservation_report"]["Customer"] is True
        assert result["key_preservation_report"]["Customer"] is True

    def test_table_already_in_3nf_is_kept(self, customer_schema, customer_fds):
        result = step_3nf_synthesis(customer_schema, customer_fds)

        order = next(t for t in result["normalized_tables"] if t["name"] == "Order")
        assert order["is_decomposed"] is False
        assert order["functional_dependencies"] == [{"lhs": ["order_id"], "rhs": ["total"]}]
        assert order["candidate_keys"] == [["order_id"]]
        assert any("Order: Already in 3NF" in s for s in result["decomposition_steps"])

    def test_table_without_fds_is_kept(self, customer_schema, customer_fds):
        result = step_3nf_synthesis(customer_schema, customer_fds)

        tag = next(t for t in result["normalized_tables"] if t["name"] == "Tag")
        assert tag["columns"] == [{
            "name": "label",
            "description": None,
            "type_hint": None,
            "nullable": None,
            "is_primary_key": False,
        }]
        assert "Table Tag: No functional dependencies to normalize" in result["decomposition_steps"]

    def test_fds_outside_table_are_ignored(self):
        schema = {"tables": [_table("R", "a", "b")]}

        result = step_3nf_synthesis(schema, {"R": ["a -> z"]})

        assert [t["name"] for t in result["normalized_tables"]] == ["R"]
        assert result["decomposition_steps"] == [
            "Table R: No applicable functional dependencies after filtering"
        ]

    def test_malformed_fd_raises_operation_error(self):
        schema = {"tables": [_table("R", "a", "b")]}

        with pytest.raises(OperationError) as exc_info:
            step_3nf_synthesis(schema, {"R": [{"lhs": ["a"]}]})

        assert exc_info.value.context.operation == "3nf_synthesis"
        assert exc_info.value.context.scheme_name == "R"
        assert exc_info.value.error_type == "ShapeViolation"

    def test_empty_column_name_raises_operation_error(self):
        schema = {"tables": [_table("R", "a", "b", "")]}

        with pytest.raises(OperationError) as exc_info:
            step_3nf_synthesis(schema, {"R": ["a -> b"]})

        assert exc_info.value.context.scheme_name == "R"
        assert exc_info.value.context.attributes == ["", "a", "b"]
        assert exc_info.value.error_type == "ShapeViolation"


class TestStepNormalFormAnalysis:
    """step_normal_form_analysis reports keys, covers and normal forms per table."""

    def test_reports(self, customer_schema, customer_fds):
        result = step_normal_form_analysis(customer_schema, customer_fds)

        reports = {r["table"]: r for r in result["reports"]}
        assert set(reports) == {"Customer", "Order"}
        assert result["skipped_tables"] == ["Tag"]

        customer = reports["Customer"]
        assert customer["candidate_keys"] == [["id"]]
        assert customer["prime_attributes"] == ["id"]
        assert customer["minimal_cover"] == [
            {"lhs": ["id"], "rhs": ["zipcode"]},
            {"lhs": ["zipcode"], "rhs": ["city"]},
        ]
        assert customer["is_in_2nf"] is True
        assert customer["is_in_3nf"] is False
        assert customer["is_in_bcnf"] is False
        assert customer["highest_normal_form"] == "2NF"
        assert customer["third_nf_violations"] == ["zipcode -> city"]
        assert customer["bcnf_violations"] == ["zipcode -> city"]

        order = reports["Order"]
        assert order["highest_normal_form"] == "PJNF"
        assert order["is_guaranteed_in_pjnf"] is True

    def test_exhaustive_key_search_agrees(self, customer_schema, customer_fds, monkeypatch):
        default = step_normal_form_analysis(customer_schema, customer_fds)
        monkeypatch.setenv("FDNORM_EXHAUSTIVE_KEY_SEARCH", "1")

        exhaustive = step_normal_form_analysis(customer_schema, customer_fds)

        assert exhaustive == default
