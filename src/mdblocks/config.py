"""Shared configuration for the mdblocks web host and command-line tools."""

import os
from pathlib import Path

from dotenv import load_dotenv

ROOT = Path(__file__).parent.parent.parent.resolve()
load_dotenv(ROOT / ".env")

# Interface and port for the uvicorn server
HOST = os.getenv("MDBLOCKS_HOST", "127.0.0.1")
PORT = int(os.getenv("MDBLOCKS_PORT", "8000"))

# Root log level for the entry points (DEBUG shows per-block detail)
LOG_LEVEL = os.getenv("MDBLOCKS_LOG_LEVEL", "INFO").upper()

# Largest document the web API will process, in characters
MAX_DOCUMENT_CHARS = int(os.getenv("MDBLOCKS_MAX_DOCUMENT_CHARS", "1000000"))

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
