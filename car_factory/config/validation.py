"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any

from ..factories.registry import available_factories
from ..pricing import PriceFormat

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_output_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate output parameters."""
        errors = []

        if "price_format" in params:
            value = params["price_format"]
            formats = [fmt.value for fmt in PriceFormat]
            if value not in formats:
                errors.append(ValidationError(
                    field="price_format",
                    message=f"Must be one of: {', '.join(formats)}",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate logging parameters."""
        errors = []

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in LOG_LEVELS:
                errors.append(ValidationError(
                    field="level",
                    message=f"Must be one of: {', '.join(LOG_LEVELS)}",
                    value=value
                ))

        for flag in ("format_json", "include_timestamp"):
            if flag in params and not isinstance(params[flag], bool):
                errors.append(ValidationError(
                    field=flag,
                    message="Must be a boolean",
                    value=params[flag]
                ))

        return errors

    @staticmethod
    def validate_demo_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate demo parameters against the factory registry."""
        errors = []

        if "factories" in params:
            value = params["factories"]
            if not isinstance(value, (list, tuple)) or not value:
                errors.append(ValidationError(
                    field="factories",
                    message="Must be a non-empty list of factory names",
                    value=value
                ))
            else:
                known = available_factories()
                unknown = [name for name in value if not isinstance(name, str) or name.lower() not in known]
                if unknown:
                    errors.append(ValidationError(
                        field="factories",
                        message=f"Unknown factories; available: {', '.join(known)}",
                        value=unknown
                    ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []
        section_validators = {
            "output": ConfigValidator.validate_output_params,
            "logging": ConfigValidator.validate_logging_params,
            "demo": ConfigValidator.validate_demo_params,
        }

        for section, validate in section_validators.items():
            if section not in config:
                continue
            params = config[section]
            # A bare `output:` key in YAML loads as None
            if not isinstance(params, dict):
                errors.append(ValidationError(
                    field=section,
                    message="Must be a mapping of settings",
                    value=params
                ))
                continue
            errors.extend(validate(params))

        return errors
