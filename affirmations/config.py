from typing import Literal

from pydantic import BaseModel
from dotenv import load_dotenv
import os

load_dotenv()


class Config(BaseModel):
    # Database
    DATABASE_URL: str

    # Identity provider (JWT verification only)
    JWT_SECRET: str
    JWT_ALG: str
    JWT_ISSUER: str

    # Logging
    LOG_LEVEL: str
    LOG_FORMAT: Literal["json", "text"]

    # FastAPI
    FASTAPI_HOST: str
    FASTAPI_PORT: int


config = Config(
    DATABASE_URL=os.environ["DATABASE_URL"],

    JWT_SECRET=os.environ["JWT_SECRET"],
    JWT_ALG=os.getenv("JWT_ALG", "HS256"),
    JWT_ISSUER=os.getenv("JWT_ISSUER", ""),

    LOG_LEVEL=os.getenv("LOG_LEVEL", "INFO"),
    LOG_FORMAT=os.getenv("LOG_FORMAT", "json"),

    FASTAPI_HOST=os.getenv("FASTAPI_HOST", "0.0.0.0"),
    FASTAPI_PORT=int(os.getenv("FASTAPI_PORT", "8000")),
)

__all__ = ["config"]
