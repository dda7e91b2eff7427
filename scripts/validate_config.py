#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path
from typing import List

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from ghl_pricing.config.loader import ConfigLoader
from ghl_pricing.config.validation import ConfigValidator, ValidationError
from ghl_pricing.errors import ConfigurationError


def validate_scenario_config(loader: ConfigLoader, scenario_id: str) -> List[ValidationError]:
    """Validate the merged configuration for a scenario."""
    config = loader.merge_config(scenario_id)
    return ConfigValidator.validate_config(config)


def main():
    """Main validation function."""
    print("🔍 Validating pricing configuration...")

    loader = ConfigLoader.create()

    # Every scenario in scenarios.yaml, plus one that falls back to defaults
    scenario_ids = loader.list_scenarios() + ["unknown-scenario"]

    all_valid = True

    for scenario_id in scenario_ids:
        print(f"\n📊 Validating {scenario_id}...")

        try:
            errors = validate_scenario_config(loader, scenario_id)

            if errors:
                print(f"❌ Found {len(errors)} validation errors:")
                for error in errors:
                    print(f"  • {error.field}: {error.message} (value: {error.value})")
                all_valid = False
                continue

            loader.load(scenario_id)
            print(f"✅ {scenario_id} configuration is valid")

        except ConfigurationError as e:
            print(f"❌ Error validating {scenario_id}: {e}")
            all_valid = False

    print("\n📋 Testing per-call overrides...")
    test_overrides = {
        "projection": {"monthly_growth_rate": 15.0, "monthly_churn_rate": 3.0},
        "services": {"sms_markup": 150.0},
    }

    errors = ConfigValidator.validate_config(loader.merge_config("default", test_overrides))
    if errors:
        print("❌ Override validation failed:")
        for error in errors:
            print(f"  • {error.field}: {error.message}")
        all_valid = False
    else:
        print("✅ Override validation passed")

    if all_valid:
        print("\n🎉 All configuration validation passed!")
        sys.exit(0)
    else:
        print("\n❌ Configuration validation failed!")
        sys.exit(1)


if __name__ == "__main__":
    main()
