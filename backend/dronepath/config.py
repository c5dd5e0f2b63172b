from __future__ import annotations

from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_SAFETY_MARGIN = 1.0
DEFAULT_MAX_STEP = 1.5
POLICIES = ("detour", "subdivide")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # ------------------------------------------------------------
    # Server
    # ------------------------------------------------------------
    backend_host: str = "0.0.0.0"
    backend_port: int = 8080
    environment: str = "development"  # development | staging | production

    # ------------------------------------------------------------
    # CORS
    # ------------------------------------------------------------
    # Comma-separated origins, e.g.:
    # "http://localhost:3000,https://planner.example.com"
    cors_origins: str = "http://localhost:3000"

    # ------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------
    log_level: str = "INFO"
    log_json: bool = False

    # ------------------------------------------------------------
    # Planner defaults (used when a request omits them)
    # ------------------------------------------------------------
    default_policy: str = "detour"  # detour | subdivide
    safety_margin_m: float = DEFAULT_SAFETY_MARGIN
    max_step_m: float = DEFAULT_MAX_STEP
    close_loop: bool = True

    @property
    def cors_origins_list(self) -> List[str]:
        return [x.strip() for x in self.cors_origins.split(",") if x.strip()]

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    def validate_runtime(self) -> None:
        """Fail fast on planner defaults that no run could use."""
        problems = []
        if self.default_policy not in POLICIES:
            problems.append(f"DEFAULT_POLICY must be one of {', '.join(POLICIES)} (got {self.default_policy!r})")
        if self.safety_margin_m < 0:
            problems.append(f"SAFETY_MARGIN_M must be >= 0 (got {self.safety_margin_m})")
        if self.max_step_m <= 0:
            problems.append(f"MAX_STEP_M must be > 0 (got {self.max_step_m})")
        if problems:
            raise RuntimeError("Invalid planner configuration: " + "; ".join(problems))


settings = Settings()
settings.validate_runtime()
