"""
JSON Schema Contract Validators

Контракты на границе сессии калькулятора:
- canonical_symbol: символ, пришедший от Input Normalizer как JSON payload
- calculator_state: снапшот Buffer + ErrorFlag (snapshot / restore)

Схемы поставляются как package data (calc_engine.contracts.schema) и
читаются через importlib.resources, поэтому работают и из checkout,
и из установленного wheel. На каждую схему один Draft202012Validator.
"""

import json
from functools import lru_cache
from importlib.resources import files
from typing import Any, Dict, Iterator, Tuple

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

SCHEMA_PACKAGE = "calc_engine.contracts.schema"

CANONICAL_SYMBOL = "canonical_symbol"
CALCULATOR_STATE = "calculator_state"


# =============================================================================
# ЗАГРУЗКА СХЕМ
# =============================================================================


def available_schemas() -> Tuple[str, ...]:
    """Имена схем (без .json), найденные в пакете ресурсов."""
    return tuple(
        sorted(
            entry.name[: -len(".json")]
            for entry in files(SCHEMA_PACKAGE).iterdir()
            if entry.name.endswith(".json")
        )
    )


@lru_cache(maxsize=None)
def load_schema(schema_name: str) -> Dict[str, Any]:
    """
    Чтение и meta-validation схемы.

    Raises:
        FileNotFoundError: Если схемы нет в пакете
        ValueError: Если файл не является валидной JSON Schema
    """
    resource = files(SCHEMA_PACKAGE).joinpath(f"{schema_name}.json")
    if not resource.is_file():
        raise FileNotFoundError(f"Schema not found in {SCHEMA_PACKAGE}: {schema_name}.json")

    schema = json.loads(resource.read_text(encoding="utf-8"))
    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e.message}") from e
    return schema


@lru_cache(maxsize=None)
def get_validator(schema_name: str) -> Draft202012Validator:
    """Кэшированный валидатор схемы (один экземпляр на схему)."""
    return Draft202012Validator(load_schema(schema_name))


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_canonical_symbol(data: Dict[str, Any]) -> None:
    """
    Проверка payload символа.

    Raises:
        ValidationError: Если payload не соответствует canonical_symbol
    """
    get_validator(CANONICAL_SYMBOL).validate(data)


def validate_calculator_state(data: Dict[str, Any]) -> None:
    """
    Проверка снапшота состояния.

    Raises:
        ValidationError: Если снапшот не соответствует calculator_state
    """
    get_validator(CALCULATOR_STATE).validate(data)


def contract_errors(schema_name: str, data: Dict[str, Any]) -> Iterator[ValidationError]:
    """Все нарушения контракта (для диагностики), без исключения."""
    return get_validator(schema_name).iter_errors(data)
