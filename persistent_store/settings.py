from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

PERSISTENT_FILE_ENV = "PERSISTENT_FILE"
DEFAULT_FILENAME = ".persistR.json"


@dataclass(frozen=True)
class Settings:
    # Store location; empty when PERSISTENT_FILE is unset or blank
    persistent_file: str

    # Name of the fallback file inside the user's home directory
    default_filename: str


def get_settings(env_file: str | Path | None = None) -> Settings:
    # Values already exported in the process environment win over the file.
    if env_file is not None:
        load_dotenv(env_file, override=False)

    persistent_file = os.getenv(PERSISTENT_FILE_ENV, "")

    return Settings(
        persistent_file=persistent_file,
        default_filename=DEFAULT_FILENAME,
    )
