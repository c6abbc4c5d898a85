"""Server configuration."""

from __future__ import annotations

import os

MAX_UPLOAD_SIZE = int(os.getenv("DOCSTRUCT_MAX_UPLOAD_BYTES", str(50 * 1024 * 1024)))  # 50 MB
MAX_DISPLAY_SIZE = 300_000  # characters of extracted text echoed back
DEFAULT_RETRY_AFTER_S = 60
