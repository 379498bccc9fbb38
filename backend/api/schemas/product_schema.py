"""
Schema de produto: registro, resultado de validação e a função validate_product.
Não depende do FastAPI; o app traduz ProductValidationError em resposta HTTP.
"""
import re
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, List, Optional

from backend.utils.cpf_utils import CPFUtils

REQUIRED_FIELDS = ["name", "model", "dateManufacture", "year", "brand", "cpf"]
TEXT_FIELDS = ["name", "model", "brand"]

ISO_DATE_PATTERN = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")
CPF_PATTERN = re.compile(r"[0-9]{11}")

MSG_REQUIRED = "Field is required"
MSG_BODY = "Request body must be a JSON object"
MSG_DATE = "dateManufacture must be a valid ISO date (YYYY-MM-DD)"
MSG_YEAR = "year must be an integer"
MSG_CPF_FORMAT = "CPF must contain exactly 11 numeric digits"
MSG_CPF_INVALID = "CPF Invalid"


@dataclass(frozen=True)
class Product:
    name: str
    model: str
    date_manufacture: str
    year: int
    brand: str
    cpf: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "model": self.model,
            "dateManufacture": self.date_manufacture,
            "year": self.year,
            "brand": self.brand,
            "cpf": self.cpf,
        }


@dataclass
class FieldError:
    field: str
    message: str

    def to_dict(self) -> Dict[str, str]:
        return {"field": self.field, "message": self.message}


class ProductValidationError(Exception):
    """Payload de produto rejeitado. Carrega todos os erros por campo."""

    def __init__(self, errors: List[FieldError]):
        self.errors = errors
        super().__init__("; ".join(f"{e.field}: {e.message}" for e in errors))

    @property
    def field(self) -> str:
        return self.errors[0].field

    @property
    def message(self) -> str:
        return self.errors[0].message


@dataclass
class ValidationResult:
    product: Optional[Product] = None
    errors: List[FieldError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    def raise_for_errors(self) -> Product:
        """Retorna o produto validado ou levanta ProductValidationError."""
        if self.errors:
            raise ProductValidationError(self.errors)
        return self.product


def _check_text(name: str, value: Any) -> Optional[str]:
    if not isinstance(value, str) or len(value) < 1:
        return f"{name} must be a non-empty string"
    return None


def _check_date(value: Any) -> Optional[str]:
    match = ISO_DATE_PATTERN.fullmatch(value) if isinstance(value, str) else None
    if match is None:
        return MSG_DATE
    year, month, day = (int(part) for part in match.groups())
    # datetime não representa o ano 0000; 2000 tem o mesmo calendário (bissexto)
    try:
        date(year or 2000, month, day)
    except ValueError:
        return MSG_DATE
    return None


def _coerce_year(value: Any) -> Optional[int]:
    # bool é subclasse de int e não conta como ano
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def _check_cpf(value: Any) -> Optional[str]:
    if not isinstance(value, str) or not CPF_PATTERN.fullmatch(value):
        return MSG_CPF_FORMAT
    if not CPFUtils.is_valid_cpf(value):
        return MSG_CPF_INVALID
    return None


def validate_product(payload: Any) -> ValidationResult:
    """
    Valida o corpo de criação/atualização de produto.
    Parâmetros:
        payload (Any): corpo da requisição já decodificado do JSON
    Retorno:
        ValidationResult: produto construído ou lista de erros por campo
    """
    if not isinstance(payload, dict):
        return ValidationResult(errors=[FieldError("body", MSG_BODY)])

    errors: List[FieldError] = []
    for name in REQUIRED_FIELDS:
        if name not in payload or payload[name] is None:
            errors.append(FieldError(name, MSG_REQUIRED))
            continue
        value = payload[name]
        if name in TEXT_FIELDS:
            message = _check_text(name, value)
        elif name == "dateManufacture":
            message = _check_date(value)
        elif name == "year":
            message = MSG_YEAR if _coerce_year(value) is None else None
        else:
            message = _check_cpf(value)
        if message:
            errors.append(FieldError(name, message))

    if errors:
        return ValidationResult(errors=errors)

    product = Product(
        name=payload["name"],
        model=payload["model"],
        date_manufacture=payload["dateManufacture"],
        year=_coerce_year(payload["year"]),
        brand=payload["brand"],
        cpf=payload["cpf"],
    )
    return ValidationResult(product=product)
