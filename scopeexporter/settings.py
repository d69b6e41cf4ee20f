"""Default settings for scopeexporter.

Values here are the fallbacks used by the CLI when neither a command-line flag
nor a YAML profile (see :mod:`scopeexporter.profiles`) supplies one.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------
OUTPUT_DIR = "./scope"

# One file per category: <category><FILE_EXTENSION>
FILE_EXTENSION = ".txt"

ENCODING = "utf-8"

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------
LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s [%(name)s] %(levelname)s: %(message)s"
