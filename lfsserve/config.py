"""
lfsserve Configuration

We read configuration from 3 sources, in order of precedence (higher is more priority)
- Command line arguments (see lfsserve/__main__.py)
- Environment variables
- A .env file, either in the current working directory or in a location specified
  by the LFSSERVE_ENV_FILE environment variable
"""

import functools
from pathlib import Path
from typing import Annotated

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_PREFIX = "lfsserve_"


class Settings(BaseSettings):
    env_file: Annotated[
        Path,
        Field(
            description="Location of a .env file (if used) relative to working directory",
        ),
    ] = Path(".env")

    root: Annotated[
        Path,
        Field(
            description="Root directory of the object store. Objects are read from <root>/objects/ab/cd/abcd...",
        ),
    ] = Path("./.lfs")

    host: Annotated[
        str,
        Field(
            description="IP address to listen on",
        ),
    ] = "127.0.0.1"

    port: Annotated[
        int,
        Field(
            description="TCP port to listen on. Also used as the port in generated object links (omitted if 80)",
            ge=1,
            le=65535,
        ),
    ] = 8080

    model_config = SettingsConfigDict(env_prefix=ENV_PREFIX)


@functools.lru_cache()
def get_settings() -> Settings:
    temp = Settings()
    load_dotenv(temp.env_file, override=False)
    return Settings()


def validate_settings(settings: Settings | None = None) -> str | None:
    settings = settings or get_settings()
    objects = settings.root / "objects"
    if not objects.is_dir():
        return (
            f"Object directory {objects} does not exist. "
            "Every request for an object will be answered with 'Object not found'"
        )
    return None


if __name__ == "__main__":
    # Echo the settings
    for k, v in get_settings().model_dump().items():
        print(f"{ENV_PREFIX.upper()}{k.upper()}={v}")
