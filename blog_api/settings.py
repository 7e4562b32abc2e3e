from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    debug: bool = False
    app_name: str = "blog-api"
    aws_region: str = Field(default="eu-central-1", alias="AWS_DEFAULT_REGION")
    create_table: bool = False
    database_url: str | None = None
    host: str = "0.0.0.0"
    port: int = 8080
    stage: str = "dev"

    model_config = SettingsConfigDict(env_file=".env", populate_by_name=True)

    @computed_field
    @property
    def posts_table_name(self) -> str:
        return f"{self.stage}-posts"
