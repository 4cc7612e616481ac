from dataclasses import dataclass
from typing import Optional
import os
from dotenv import load_dotenv

from xray_assist.constants import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_MODELS,
    DEFAULT_PROVIDER,
    ENV_API_KEY,
    ENV_LOG_LEVEL,
    ENV_MODEL,
    ENV_PROVIDER,
    ENV_TIMEOUT,
    MSG_ERR_BAD_PROVIDER,
    MSG_ERR_BAD_TIMEOUT,
    MSG_ERR_NO_API_KEY,
)
from xray_assist.errors import MissingCredential


@dataclass(frozen=True)
class Config:
    api_key: str
    log_level: str = DEFAULT_LOG_LEVEL
    provider: str = DEFAULT_PROVIDER
    model: str = DEFAULT_MODELS[DEFAULT_PROVIDER]
    timeout: Optional[int] = None

    @classmethod
    def from_env(cls) -> "Config":
        load_dotenv()

        api_key = os.getenv(ENV_API_KEY)
        log_level = os.getenv(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL)
        provider = (os.getenv(ENV_PROVIDER) or DEFAULT_PROVIDER).strip().lower()
        model = os.getenv(ENV_MODEL) or None
        raw_timeout = os.getenv(ENV_TIMEOUT) or None

        return cls._validate(
            api_key=api_key,
            log_level=log_level,
            provider=provider,
            model=model,
            raw_timeout=raw_timeout,
        )

    @staticmethod
    def _validate(
        api_key: Optional[str],
        log_level: str,
        provider: str,
        model: Optional[str],
        raw_timeout: Optional[str],
    ) -> "Config":
        match api_key:
            case None | "":
                raise MissingCredential(MSG_ERR_NO_API_KEY)
            case _:
                pass

        match provider:
            case p if p in DEFAULT_MODELS:
                pass
            case _:
                raise ValueError(MSG_ERR_BAD_PROVIDER % provider)

        match raw_timeout:
            case None:
                timeout = None
            case str() as t if t.strip().isdigit() and int(t) > 0:
                timeout = int(t)
            case _:
                raise ValueError(MSG_ERR_BAD_TIMEOUT % raw_timeout)

        return Config(
            api_key=api_key,
            log_level=log_level,
            provider=provider,
            model=model or DEFAULT_MODELS[provider],
            timeout=timeout,
        )
