from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Library
    library_source: str = "./prompts.json"  # Local path or http(s) URL
    search_limit: int = 5

    # Defaults for omitted style selectors
    default_tone: str = "professional"
    default_length: str = "medium"
    default_format: str = "email"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
