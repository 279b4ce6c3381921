"""
SMPP Configuration Base Classes

This module provides the base configuration class with validation and
serialization shared by the transport and logging configuration.
"""

import dataclasses
import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Type, TypeVar, Union

from ..exceptions import SMPPValidationException

T = TypeVar('T', bound='BaseConfig')

_TRUE_VALUES = ('true', '1', 'yes', 'on')


@dataclass(frozen=True)
class BaseConfig:
    """Base configuration class with validation and serialization."""

    def validate(self) -> None:
        """Validate configuration values. Override in subclasses."""
        pass

    @classmethod
    def from_dict(cls: Type[T], data: Dict[str, Any]) -> T:
        """Create config from dictionary with type conversion."""
        # Filter data to only include fields that exist in the dataclass
        field_names = {f.name for f in dataclasses.fields(cls)}
        filtered_data = {k: v for k, v in data.items() if k in field_names}

        try:
            instance = cls(**filtered_data)
        except (TypeError, ValueError) as e:
            raise SMPPValidationException(
                f'Invalid configuration data for {cls.__name__}: {e}',
                field_name='config_data',
                validation_rule='type_conversion',
                original_error=e,
            ) from e

        instance.validate()
        return instance

    @classmethod
    def from_env(cls: Type[T], prefix: str = '') -> T:
        """Create config from environment variables."""
        env_data: Dict[str, Any] = {}
        prefix = prefix.upper()

        for field_info in dataclasses.fields(cls):
            env_key = f'{prefix}{field_info.name.upper()}'
            env_value = os.getenv(env_key)

            if env_value is None:
                continue

            # Type conversion based on field type
            field_type = field_info.type
            try:
                if field_type is bool:
                    env_data[field_info.name] = env_value.lower() in _TRUE_VALUES
                elif field_type is int:
                    env_data[field_info.name] = int(env_value)
                elif field_type is float:
                    env_data[field_info.name] = float(env_value)
                else:
                    env_data[field_info.name] = env_value
            except (ValueError, TypeError) as e:
                raise SMPPValidationException(
                    f'Invalid environment value for {env_key}: {env_value}',
                    field_name=field_info.name,
                    field_value=env_value,
                    validation_rule='env_type_conversion',
                    original_error=e,
                ) from e

        return cls.from_dict(env_data)

    @classmethod
    def from_file(cls: Type[T], file_path: Union[str, Path]) -> T:
        """Create config from JSON file."""
        file_path = Path(file_path)

        if not file_path.exists():
            raise SMPPValidationException(
                f'Configuration file not found: {file_path}',
                field_name='config_file',
                field_value=str(file_path),
                validation_rule='file_exists',
            )

        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise SMPPValidationException(
                f'Invalid JSON in configuration file: {file_path}',
                field_name='config_file',
                field_value=str(file_path),
                validation_rule='valid_json',
                original_error=e,
            ) from e
        except OSError as e:
            raise SMPPValidationException(
                f'Error reading configuration file: {file_path}',
                field_name='config_file',
                field_value=str(file_path),
                validation_rule='file_readable',
                original_error=e,
            ) from e

        return cls.from_dict(data)

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return dataclasses.asdict(self)

    def to_file(self, file_path: Union[str, Path]) -> None:
        """Save config to JSON file."""
        file_path = Path(file_path)

        try:
            file_path.parent.mkdir(parents=True, exist_ok=True)

            with open(file_path, 'w', encoding='utf-8') as f:
                json.dump(self.to_dict(), f, indent=2, default=str)
        except OSError as e:
            raise SMPPValidationException(
                f'Error writing configuration file: {file_path}',
                field_name='config_file',
                field_value=str(file_path),
                validation_rule='file_writable',
                original_error=e,
            ) from e
