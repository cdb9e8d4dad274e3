"""Gateway service configuration."""
from pydantic import AliasChoices, Field
from pydantic_settings import SettingsConfigDict

from shared.config import BaseAppSettings


class GatewaySettings(BaseAppSettings):
    model_config = SettingsConfigDict(env_prefix="GATEWAY_")

    host: str = "0.0.0.0"
    port: int = 8787
    json_logs: bool = True
    mock: bool = False
    openai_api_key: str = Field(
        default="",
        validation_alias=AliasChoices("openai_api_key", "OPENAI_API_KEY"),
        repr=False,
    )
    # development | production; unset means non-production
    environment: str | None = Field(
        default=None,
        validation_alias=AliasChoices("environment", "ENVIRONMENT"),
    )
    openai_base_url: str | None = None
    openai_timeout_seconds: float | None = None

    @property
    def graphiql_enabled(self) -> bool:
        """GraphiQL is served unless a non-development environment is declared."""
        return not self.environment or self.environment == "development"


_settings: GatewaySettings | None = None


def get_settings() -> GatewaySettings:
    global _settings
    if _settings is None:
        _settings = GatewaySettings()
    return _settings
