from dotenv import load_dotenv
import os

load_dotenv()

LOG_LEVEL = os.getenv("VSM_LOG_LEVEL", "INFO").upper()
CORS_ORIGINS = [o.strip() for o in os.getenv("VSM_CORS_ORIGINS", "*").split(",") if o.strip()]
REPORT_FILENAME = os.getenv("VSM_REPORT_FILENAME", "vsm_report")

try:
    MAX_DOCUMENTS = int(os.getenv("VSM_MAX_DOCUMENTS", "100"))
except ValueError:
    raise Exception("VSM_MAX_DOCUMENTS must be an integer. Check your .env file.")

if MAX_DOCUMENTS < 1:
    raise Exception("VSM_MAX_DOCUMENTS must be at least 1.")

if LOG_LEVEL not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
    raise Exception(f"Unknown VSM_LOG_LEVEL: {LOG_LEVEL}")
