from functools import lru_cache
from urllib.parse import quote_plus

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file_encoding="utf-8", extra="ignore")

    app_name: str = "Job Board"

    # A full SQLAlchemy URL wins over the SQL Server parts below.
    database_url: str | None = Field(default=None)

    mssql_server: str | None = Field(default=None)
    mssql_port: int = Field(default=1433)
    mssql_database: str = Field(default="JobBoard")
    mssql_user: str | None = Field(default=None)
    mssql_password: str | None = Field(default=None)
    mssql_odbc_driver: str = Field(default="{ODBC Driver 17 for SQL Server}")

    secret_key: str = Field(default="dev-secret-key")
    bcrypt_rounds: int = Field(default=10, ge=4, le=31)
    log_level: str = Field(default="INFO")

    port: int = Field(default=3000)
    flask_debug: bool = Field(default=False)

    @model_validator(mode="after")
    def validate_mssql_auth(self):
        if self.database_url is None and self.mssql_server:
            if not self.mssql_user or not self.mssql_password:
                raise ValueError("mssql_user and mssql_password are required when MSSQL_SERVER is set")
        return self

    def sqlalchemy_url(self) -> str:
        if self.database_url:
            return self.database_url
        if self.mssql_server:
            raw_conn = (
                f"DRIVER={self.mssql_odbc_driver};"
                f"SERVER={self.mssql_server},{self.mssql_port};"
                f"DATABASE={self.mssql_database};"
                f"UID={self.mssql_user};"
                f"PWD={self.mssql_password};"
                "TrustServerCertificate=yes;"
            )
            return f"mssql+pyodbc:///?odbc_connect={quote_plus(raw_conn)}"
        return "sqlite:///jobboard.db"


@lru_cache()
def get_settings() -> Settings:
    return Settings()
