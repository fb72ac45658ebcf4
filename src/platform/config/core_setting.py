from pathlib import Path
from typing import Annotated, List

import orjson
from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Restaurant Booking'
    VERSION: str = '0.1.0'
    DEBUG: bool = True  # Set to False in production
    PORT: int = 5000

    # Security (JWT verification only, tokens are issued by the auth service)
    SECRET_KEY: SecretStr = SecretStr('test_secret_key_change_in_production')
    ALGORITHM: str = 'HS256'

    # CORS
    # NoDecode: the raw env string reaches the validator instead of being parsed as JSON
    BACKEND_CORS_ORIGINS: Annotated[List[str], NoDecode] = [
        'https://dreamy-sawine-9424af.netlify.app',
        'https://astounding-faun-baa021.netlify.app',
        'https://cosmic-syrniki-a578fe.netlify.app',
        'http://localhost:5173',
    ]

    @field_validator('BACKEND_CORS_ORIGINS', mode='before')
    @classmethod
    def assemble_cors_origins(cls, v: str | List[str]) -> List[str]:
        if isinstance(v, str) and not v.startswith('['):
            return [i.strip() for i in v.split(',') if i.strip()]
        elif isinstance(v, str):
            return orjson.loads(v)
        elif isinstance(v, list):
            return v
        return []

    # MongoDB
    MONGO_URI: str = 'mongodb://localhost:27017'
    MONGO_DB_NAME: str = 'restaurant_booking'
    MONGO_SERVER_SELECTION_TIMEOUT_MS: int = 5000

    # Razorpay
    RAZORPAY_KEY_ID: str = ''
    RAZORPAY_KEY_SECRET: SecretStr = SecretStr('')


settings = Settings()  # type: ignore
