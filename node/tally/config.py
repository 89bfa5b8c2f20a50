# env vars + constants
import os

NODE_ID = os.getenv("NODE_ID", "nodeX")
PORT = int(os.getenv("PORT", "8000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

RECENT_DEFAULT_LIMIT = int(os.getenv("RECENT_DEFAULT_LIMIT", "10"))
NOTE_MAX_LENGTH = int(os.getenv("NOTE_MAX_LENGTH", "280"))
