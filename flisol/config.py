# flisol/config.py
import os
from dotenv import load_dotenv
load_dotenv()

# Content store (CMS database, read only)
DB_DSN = os.getenv("DATABASE_URL")
DB_POOL_SIZE = int(os.getenv("DB_POOL_SIZE", "10"))
DB_MAX_OVERFLOW = int(os.getenv("DB_MAX_OVERFLOW", "5"))
DB_APPLICATION_NAME = os.getenv("DB_APPLICATION_NAME", "flisol-articles")

PUBLIC_FILES_PATH = os.getenv("PUBLIC_FILES_PATH", "sites/default/files")
ANONYMOUS_PERMISSIONS = frozenset(
    p.strip() for p in os.getenv("ANONYMOUS_PERMISSIONS", "access content").split(",") if p.strip()
)

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
ROOT_PATH = os.getenv("ROOT_PATH", "")
