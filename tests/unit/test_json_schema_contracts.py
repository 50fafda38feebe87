"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON Schema валидаторов:
- Валидность самих схем
- Валидация документов, построенных из доменов и таблиц
- Детекция нарушений required полей, типов и constraints
"""

import copy

import pytest
from jsonschema import ValidationError

from fibseq.core.contracts import (
    FibonacciTableValidator,
    IntegerDomainValidator,
    SchemaLoader,
    validate_fibonacci_table,
    validate_integer_domain,
)
from fibseq.core.domain import I8, STANDARD_DOMAINS, U128
from fibseq.sequences import fibonacci_table


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def valid_domain_doc():
    """Валидный integer_domain документ."""
    return I8.to_contract()


@pytest.fixture
def valid_table_doc():
    """Валидный fibonacci_table документ."""
    return fibonacci_table(I8).to_contract()


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Загрузка и meta-validation схем."""

    @pytest.mark.parametrize("schema_name", ["integer_domain", "fibonacci_table"])
    def test_schema_loads(self, schema_name):
        schema = SchemaLoader().load_schema(schema_name)
        assert schema["title"] == schema_name

    def test_schema_cached(self):
        loader = SchemaLoader()
        assert loader.load_schema("integer_domain") is loader.load_schema("integer_domain")

    def test_missing_schema_raises(self):
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")

    def test_missing_directory_raises(self, tmp_path):
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(tmp_path / "nope")

    def test_invalid_schema_raises(self, tmp_path):
        (tmp_path / "broken.json").write_text('{"type": 42}', encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            SchemaLoader(tmp_path).load_schema("broken")


# =============================================================================
# INTEGER DOMAIN CONTRACT
# =============================================================================


class TestIntegerDomainContract:
    """integer_domain.json"""

    @pytest.mark.parametrize("domain", list(STANDARD_DOMAINS.values()), ids=str)
    def test_standard_domains_valid(self, domain):
        validate_integer_domain(domain.to_contract())

    def test_missing_field(self, valid_domain_doc):
        del valid_domain_doc["signed"]
        with pytest.raises(ValidationError):
            validate_integer_domain(valid_domain_doc)

    def test_wrong_type(self, valid_domain_doc):
        valid_domain_doc["bits"] = "8"
        assert not IntegerDomainValidator().is_valid(valid_domain_doc)

    def test_extra_field_rejected(self, valid_domain_doc):
        valid_domain_doc["endianness"] = "little"
        errors = list(IntegerDomainValidator().iter_errors(valid_domain_doc))
        assert len(errors) == 1


# =============================================================================
# FIBONACCI TABLE CONTRACT
# =============================================================================


class TestFibonacciTableContract:
    """fibonacci_table.json"""

    @pytest.mark.parametrize("domain", list(STANDARD_DOMAINS.values()), ids=str)
    def test_standard_tables_valid(self, domain):
        validate_fibonacci_table(fibonacci_table(domain).to_contract())

    def test_big_values_are_exact_integers(self):
        doc = fibonacci_table(U128).to_contract()
        validate_fibonacci_table(doc)
        assert doc["values"][-1] == 332825110087067562321196029789634457848

    def test_wrong_prefix_rejected(self, valid_table_doc):
        broken = copy.deepcopy(valid_table_doc)
        broken["values"][1] = 2
        assert not FibonacciTableValidator().is_valid(broken)

    def test_negative_value_rejected(self, valid_table_doc):
        valid_table_doc["values"].append(-144)
        with pytest.raises(ValidationError):
            validate_fibonacci_table(valid_table_doc)

    def test_schema_version_pinned(self, valid_table_doc):
        valid_table_doc["schema_version"] = "2"
        with pytest.raises(ValidationError):
            validate_fibonacci_table(valid_table_doc)

    def test_too_short_rejected(self, valid_table_doc):
        valid_table_doc["values"] = [0, 1]
        valid_table_doc["length"] = 2
        assert not FibonacciTableValidator().is_valid(valid_table_doc)
