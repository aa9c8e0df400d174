from typing import Optional

from pydantic_settings import BaseSettings

DEFAULT_ABSTRACT_URL = "http://downloads.dbpedia.org/3.9/en/short_abstracts_en.ttl.bz2"
DEFAULT_ABSTRACT_PATH = "data/short_abstracts_en.ttl.bz2"
DEFAULT_BUFFER_SIZE = 1000
DEFAULT_LANGUAGE = "en"


class Settings(BaseSettings):
    app_name: str = "dbpedia-loader"

    # Dump file: downloaded from abstract_url when abstract_path is missing
    abstract_url: str = DEFAULT_ABSTRACT_URL
    abstract_path: str = DEFAULT_ABSTRACT_PATH

    # OpenSearchServer instance
    instance_url: Optional[str] = None
    index_name: Optional[str] = None
    login: Optional[str] = None
    key: Optional[str] = None
    request_timeout: float = 600.0  # seconds

    buffer_size: int = DEFAULT_BUFFER_SIZE
    language: str = DEFAULT_LANGUAGE  # ISO 639-1 code

    # Generic environment (debug/prod)
    APP_ENV: str = "local"  # or "production"
    LOG_LEVEL: str = "INFO"  # DEBUG, INFO, WARNING, ERROR

    class Config:
        env_prefix = "LOADER_"
        env_file = ".env"
        extra = "ignore"


settings = Settings()

if settings.buffer_size < 1:
    raise ValueError(
        f"Invalid LOADER_BUFFER_SIZE: {settings.buffer_size}\n"
        "The buffer size is the number of documents sent per update call "
        "and must be at least 1."
    )
