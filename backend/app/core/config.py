import sys

from pydantic_settings import BaseSettings

_ENV_FILE = None if "pytest" in sys.modules else ".env"


class Settings(BaseSettings):
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    DIRECTORY_API_BASE_URL: str = "https://dummy.restapiexample.com/"
    DIRECTORY_API_TIMEOUT_SECONDS: float = 10.0

    COSMOS_DB_ENDPOINT: str = ""
    COSMOS_DB_KEY: str = ""
    COSMOS_DB_DATABASE: str = "employee-directory"
    COSMOS_DB_EMPLOYEES_CONTAINER: str = "employee_details"

    CACHE_WARM_ON_STARTUP: bool = True
    TOP_EARNERS_LIMIT: int = 10

    model_config = {
        "env_file": _ENV_FILE,
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
    }


settings = Settings()
