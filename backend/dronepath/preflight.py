"""Preflight checks for container startup.

- validates planner defaults (fails fast on bad env)
- prints config summary
"""

from __future__ import annotations

from dronepath.config import settings


def main():
    settings.validate_runtime()
    print("Preflight OK")
    print(f"ENVIRONMENT={settings.environment}")
    print(f"DEFAULT_POLICY={settings.default_policy}")
    print(f"SAFETY_MARGIN_M={settings.safety_margin_m}")
    print(f"MAX_STEP_M={settings.max_step_m}")
    print(f"CLOSE_LOOP={settings.close_loop}")
    print(f"CORS_ORIGINS={settings.cors_origins}")


if __name__ == "__main__":
    main()
