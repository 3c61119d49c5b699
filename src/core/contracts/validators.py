"""
JSON Schema Contract Validators

Модуль для валидации сериализованного представления Integer согласно
формальному JSON Schema контракту. Использует библиотеку jsonschema.

Схемы:
- integer.json: {"is_negative": bool, "digits": [uint32, ...]}
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator

from src.core.domain.integer import Integer


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Автоматически находит схемы в contracts/schema/ относительно корня проекта.
    """

    def __init__(self):
        # Определяем корень проекта (4 уровня вверх от этого файла)
        self._schema_dir = Path(__file__).parent.parent.parent.parent / "contracts" / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'integer')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Валидируем саму схему (meta-validation)
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
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


class IntegerContractValidator(ContractValidator):
    """Валидатор для integer контракта."""

    def __init__(self):
        super().__init__("integer")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_integer_payload(data: Dict[str, Any]) -> None:
    """
    Валидация сериализованного Integer.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    IntegerContractValidator().validate(data)


def integer_to_payload(x: Integer) -> Dict[str, Any]:
    """Сериализация Integer в payload, соответствующий контракту."""
    payload = x.model_dump(mode="json")
    validate_integer_payload(payload)
    return payload


def integer_from_payload(data: Dict[str, Any]) -> Integer:
    """
    Десериализация payload в Integer.

    Контракт проверяется ДО создания модели: некорректный payload
    никогда не даёт валидно выглядящий Integer.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    validate_integer_payload(data)
    return Integer.model_validate(data)
