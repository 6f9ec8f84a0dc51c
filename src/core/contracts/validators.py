"""
JSON Schema Contract Validators

Модуль для валидации JSON данных согласно формальным JSON Schema контрактам.
Использует библиотеку jsonschema для проверки соответствия данных схемам.

Схемы:
- token_state.json (persisted-состояние экземпляра engine)
- token_event.json (событие token ledger)
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Автоматически находит схемы в contracts/schema/ относительно корня проекта.
    """

    def __init__(self, schema_dir: Path | None = None):
        # Корень проекта — 4 уровня вверх от этого файла
        self._schema_dir = schema_dir or (
            Path(__file__).parent.parent.parent.parent / "contracts" / "schema"
        )
        if not self._schema_dir.exists():
            raise RuntimeError(
                f"Schema directory not found: {self._schema_dir} "
                "(contracts/schema ships with the source tree: install with "
                "`pip install -e .` or pass schema_dir explicitly)"
            )

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    @property
    def schema_dir(self) -> Path:
        return self._schema_dir

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'token_state')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема не проходит meta-validation
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER: SchemaLoader | None = None


def _get_loader() -> SchemaLoader:
    global _SCHEMA_LOADER
    if _SCHEMA_LOADER is None:
        _SCHEMA_LOADER = SchemaLoader()
    return _SCHEMA_LOADER


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str, loader: SchemaLoader | None = None):
        self.schema_name = schema_name
        self.schema = (loader or _get_loader()).load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """Итератор по всем ошибкам валидации."""
        return self.validator.iter_errors(data)


class TokenStateValidator(ContractValidator):
    """Валидатор для token_state контракта."""

    def __init__(self, loader: SchemaLoader | None = None):
        super().__init__("token_state", loader)


class TokenEventValidator(ContractValidator):
    """Валидатор для token_event контракта."""

    def __init__(self, loader: SchemaLoader | None = None):
        super().__init__("token_event", loader)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_token_state(data: Dict[str, Any]) -> None:
    """
    Валидация token_state данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    TokenStateValidator().validate(data)


def validate_token_event(data: Dict[str, Any]) -> None:
    """
    Валидация token_event данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    TokenEventValidator().validate(data)
