"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any

CARRIER_FEE_PROFILES = ("att_tmobile", "verizon", "weighted")


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_projection_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate client growth projection parameters."""
        errors = []

        # Validate growth and churn rates
        for name in ("monthly_growth_rate", "monthly_churn_rate"):
            if name in params:
                value = params[name]
                if not _is_number(value) or value < 0 or value > 100:
                    errors.append(ValidationError(
                        field=name,
                        message="Must be a percentage between 0 and 100",
                        value=value
                    ))

        # Validate projection_period_months
        if "projection_period_months" in params:
            value = params["projection_period_months"]
            if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                errors.append(ValidationError(
                    field="projection_period_months",
                    message="Must be a positive integer",
                    value=value
                ))

        # Validate lifespan_fallback_months
        if "lifespan_fallback_months" in params:
            value = params["lifespan_fallback_months"]
            if not _is_number(value) or value <= 0:
                errors.append(ValidationError(
                    field="lifespan_fallback_months",
                    message="Must be a positive number",
                    value=value
                ))

        # Validate cac_ltv_ratio
        if "cac_ltv_ratio" in params:
            value = params["cac_ltv_ratio"]
            if not _is_number(value) or value <= 0 or value > 1:
                errors.append(ValidationError(
                    field="cac_ltv_ratio",
                    message="Must be a positive number between 0 and 1",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_non_negative_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate a section whose values are all non-negative amounts."""
        errors = []

        for name, value in params.items():
            if not _is_number(value) or value < 0:
                errors.append(ValidationError(
                    field=name,
                    message="Must be a non-negative number",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_breakeven_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate break-even analysis parameters."""
        errors = ConfigValidator.validate_non_negative_params(
            {k: v for k, v in params.items() if k != "worth_it_months"}
        )

        if "worth_it_months" in params:
            value = params["worth_it_months"]
            if not _is_number(value) or value <= 0:
                errors.append(ValidationError(
                    field="worth_it_months",
                    message="Must be a positive number",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_messaging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate SMS/MMS parameters."""
        errors = []

        # Validate carrier_fee_profile
        if "carrier_fee_profile" in params:
            value = params["carrier_fee_profile"]
            if value not in CARRIER_FEE_PROFILES:
                errors.append(ValidationError(
                    field="carrier_fee_profile",
                    message=f"Must be one of {', '.join(CARRIER_FEE_PROFILES)}",
                    value=value
                ))

        # Validate mms_outbound_split
        if "mms_outbound_split" in params:
            value = params["mms_outbound_split"]
            if not _is_number(value) or value < 0 or value > 100:
                errors.append(ValidationError(
                    field="mms_outbound_split",
                    message="Must be a percentage between 0 and 100",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_dashboard_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate profit dashboard parameters."""
        errors = []

        if "projection_months" in params:
            value = params["projection_months"]
            if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                errors.append(ValidationError(
                    field="projection_months",
                    message="Must be a positive integer",
                    value=value
                ))

        for name in ("monthly_growth", "cost_growth_share"):
            if name in params:
                value = params[name]
                if not _is_number(value) or value < 0:
                    errors.append(ValidationError(
                        field=name,
                        message="Must be a non-negative number",
                        value=value
                    ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        validators = {
            "projection": ConfigValidator.validate_projection_params,
            "agency_costs": ConfigValidator.validate_non_negative_params,
            "rebilling": ConfigValidator.validate_non_negative_params,
            "services": ConfigValidator.validate_non_negative_params,
            "hosting": ConfigValidator.validate_non_negative_params,
            "breakeven": ConfigValidator.validate_breakeven_params,
            "messaging": ConfigValidator.validate_messaging_params,
            "dashboard": ConfigValidator.validate_dashboard_params,
        }

        for section, validate in validators.items():
            if section not in config:
                continue

            params = config[section]
            if not isinstance(params, dict):
                errors.append(ValidationError(
                    field=section,
                    message="Must be a mapping",
                    value=params
                ))
                continue

            errors.extend(validate(params))

        return errors
