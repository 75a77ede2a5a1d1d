"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  A ``.env`` file in the working directory is
loaded first so that development and production deployments differ only
in their environment, never in code.  Defaults are provided for all
fields.
"""

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = field(default_factory=lambda: os.getenv("PROJECT_NAME", "Doctor Record Service"))
    api_version: str = field(default_factory=lambda: os.getenv("API_VERSION", "1.0.0"))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    log_file: str = field(default_factory=lambda: os.getenv("LOG_FILE", ""))

    # Address the server binds to when started through ``run.py``.
    host: str = field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(os.getenv("PORT", "3000")))

    # Path to the SQLite database file.  Relative paths are resolved
    # against the working directory by the ``db`` module; ``:memory:`` keeps
    # the whole store in process memory.
    database_url: str = field(default_factory=lambda: os.getenv("DATABASE_URL", "doctors.db"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Tests build a fresh
# ``Settings()`` after patching the environment.
settings = Settings()
