# eventhub/settings.py
import os
from dotenv import load_dotenv

load_dotenv()

# SQLite file next to the working directory unless overridden
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./eventhub.sqlite3")
SQL_ECHO = os.getenv("SQL_ECHO", "false").lower() in ("1", "true", "yes")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
