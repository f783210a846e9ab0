from __future__ import annotations
from pydantic_settings import BaseSettings
from pydantic import Field


class DataStoreSettings(BaseSettings):
    APP_NAME: str = Field(default="datastore")
    APP_VERSION: str = Field(default="0.1.0")
    HOST: str = Field(default="127.0.0.1")
    PORT: int = Field(default=8080, ge=1, le=65535)
    LOG_LEVEL: str = Field(default="INFO")
    # Path of the collection endpoint; items live under "<ENDPOINT>/{key}"
    ENDPOINT: str = Field(default="/data")

    class Config:
        env_prefix = "DATASTORE_"
        env_file = ".env"
        case_sensitive = False
