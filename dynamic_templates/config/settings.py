from pydantic_settings import BaseSettings


class Settings(BaseSettings):

    templates_config_path: str = "dynamic_templates.json"

    # Stands in for {dynamic_type} when a field's type could not be inferred
    unknown_dynamic_type: str = "unknown"

    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_prefix = "DYNAMIC_TEMPLATES_"
        extra = "ignore"


settings = Settings()
