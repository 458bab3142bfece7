# app/settings.py
import os
from pathlib import Path

from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).resolve().parents[1]

# Pick up a local .env (if any) before reading the environment
load_dotenv(PROJECT_ROOT / ".env")


def env_flag(name: str, default: bool) -> bool:
    """Read a yes/no style environment variable."""
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes")


SERVICE_NAME = os.getenv("SERVICE_NAME", "xml-to-json")
SERVICE_VERSION = 1

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Defaults for the host-side switches
#   ALLOW_MULTIPLE=true     -> every selected file is converted
#   ALLOW_MULTIPLE=false    -> only the first selected file is converted
#   IS_SCHEMA_VISIBLE=false -> result panel and copy buttons start hidden
ALLOW_MULTIPLE = env_flag("ALLOW_MULTIPLE", True)
IS_SCHEMA_VISIBLE = env_flag("IS_SCHEMA_VISIBLE", False)

XML_FILE_TYPES = ["xml"]
XML_MEDIA_TYPES = ["text/xml", "application/xml"]

# Instructional block placed ahead of the schema by "Copy Schema With Prompt"
COPY_PROMPT = (
    "Create a Power Apps collection called colName by parsing the JSON below using ParseJSON.\n\n"
    "Extract relevant fields using AddColumns, convert values using Text() or Value(), "
    "and use DropColumns to remove the original Value column (do not use quotes around Value).\n\n"
    "Replace Self.jsonResult with the actual source if needed (e.g., ThisItem.jsonResult).\n\n"
    "Here's the JSON:"
)
