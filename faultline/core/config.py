"""
Application configuration.

Loads settings from environment variables and .env file.
The deployment environment is read once here and injected into the
use cases at construction time.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict

from faultline.domain.responding.entities import Environment


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable interactive docs. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        access_log: Write the per-request "METHOD path" line.
        environment: Deployment environment. Only ``production`` hides
            diagnostics from error bodies.
        page_format: Format name that selects rendered error pages
            during content negotiation.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "Faultline"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    access_log: bool = True
    environment: Environment = Environment.DEVELOPMENT
    page_format: str = "html"


settings = Settings()
