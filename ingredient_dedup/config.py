from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Core
    log_level: str = "INFO"
    service_env: str = "dev"  # dev|prod

    # Ficheros de salida
    output_suffix: str = "_global_deduplicated"
    report_suffix: str = "_removal_report"
    json_indent: int = 2

    # Informes por consola
    top_duplicates: int = 15
    top_removal_preview: int = 5
    top_removed: int = 10

    # CORS
    cors_allow_origins: str = "*"

    # Size limit
    max_body_bytes: int = 10485760  # 10MB

    def parsed_cors_origins(self) -> list[str]:
        if self.cors_allow_origins == "*":
            return ["*"]
        return [o.strip() for o in self.cors_allow_origins.split(",") if o.strip()]

    @model_validator(mode="after")
    def _validate_limits(self) -> "Settings":
        if self.service_env not in ("dev", "prod"):
            raise ValueError("service_env must be 'dev' or 'prod'")
        for name in ("top_duplicates", "top_removal_preview", "top_removed", "max_body_bytes"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be a positive integer")
        if self.json_indent < 0:
            raise ValueError("json_indent cannot be negative")
        return self

settings = Settings()
