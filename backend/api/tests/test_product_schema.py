import pytest

from backend.api.schemas.product_schema import (
    MSG_CPF_FORMAT,
    MSG_CPF_INVALID,
    MSG_REQUIRED,
    Product,
    ProductValidationError,
    validate_product,
)

VALID = {
    "name": "Notebook",
    "model": "X1",
    "dateManufacture": "2023-05-10",
    "year": 2023,
    "brand": "Acme",
    "cpf": "52998224725",
}


def errors_by_field(payload):
    return {e.field: e.message for e in validate_product(payload).errors}


def test_valid_payload_builds_product():
    result = validate_product(VALID)
    assert result.ok
    assert result.product == Product("Notebook", "X1", "2023-05-10", 2023, "Acme", "52998224725")
    assert result.product.to_dict() == VALID


def test_unknown_keys_are_dropped():
    result = validate_product({**VALID, "price": 10})
    assert result.ok
    assert "price" not in result.product.to_dict()


@pytest.mark.parametrize("field", ["name", "model", "dateManufacture", "year", "brand", "cpf"])
def test_missing_field(field):
    payload = {k: v for k, v in VALID.items() if k != field}
    assert errors_by_field(payload) == {field: MSG_REQUIRED}


@pytest.mark.parametrize("field", ["name", "model", "brand"])
@pytest.mark.parametrize("value", ["", 5])
def test_text_fields_must_be_non_empty_strings(field, value):
    assert errors_by_field({**VALID, field: value}) == {field: f"{field} must be a non-empty string"}


@pytest.mark.parametrize("value", ["2023-02-30", "10/05/2023", "2023-5-10", "20230510", 20230510, "2023-05-10\n", "0000-02-30"])
def test_bad_dates(value):
    assert "dateManufacture" in errors_by_field({**VALID, "dateManufacture": value})


@pytest.mark.parametrize("value", ["0000-01-01", "0000-02-29", "2024-02-29"])
def test_edge_dates_are_accepted(value):
    result = validate_product({**VALID, "dateManufacture": value})
    assert result.ok
    assert result.product.date_manufacture == value


@pytest.mark.parametrize("value", ["2023", 2023.5, True, None])
def test_bad_year(value):
    assert "year" in errors_by_field({**VALID, "year": value})


def test_integral_float_year_is_coerced():
    result = validate_product({**VALID, "year": 2023.0})
    assert result.ok
    assert result.product.year == 2023
    assert isinstance(result.product.year, int)


@pytest.mark.parametrize("value", ["529.982.247-25", "5299822472", "5299822472a", 52998224725, "52998224725\n", "５２９９８２２４７２５"])
def test_malformed_cpf(value):
    assert errors_by_field({**VALID, "cpf": value}) == {"cpf": MSG_CPF_FORMAT}


@pytest.mark.parametrize("value", ["52998224726", "11111111111"])
def test_checksum_failure(value):
    assert errors_by_field({**VALID, "cpf": value}) == {"cpf": MSG_CPF_INVALID}


def test_every_bad_field_is_reported():
    errors = errors_by_field({"name": "", "year": "x", "cpf": "1"})
    assert set(errors) == {"name", "model", "dateManufacture", "year", "brand", "cpf"}


@pytest.mark.parametrize("payload", [None, [], "product"])
def test_body_must_be_an_object(payload):
    assert list(errors_by_field(payload)) == ["body"]


def test_raise_for_errors():
    with pytest.raises(ProductValidationError) as excinfo:
        validate_product({**VALID, "cpf": "52998224726"}).raise_for_errors()
    assert excinfo.value.field == "cpf"
    assert excinfo.value.message == MSG_CPF_INVALID
    assert validate_product(VALID).raise_for_errors().name == "Notebook"
