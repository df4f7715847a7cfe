from pydantic_settings import BaseSettings, SettingsConfigDict


class ResponseConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="APNS_")

    log_level: str = "INFO"
    id_header: str = "apns-id"
    warn_on_success_body: bool = True
