"""Global configuration for brand_sass, read from the environment / .env."""

from __future__ import annotations

import os
from typing import Final

from dotenv import load_dotenv

load_dotenv()

BRAND_FILE_NAME: Final = "_brand.yml"

PROJECT_DIR: Final = os.environ.get("BRAND_SASS_PROJECT_DIR", ".")
LOG_LEVEL: Final = os.environ.get("BRAND_SASS_LOG_LEVEL", "INFO").upper()

LOG_FORMAT: Final = "%(asctime)s — %(levelname)s — %(name)s — %(message)s"
