from dotenv import load_dotenv
import os

# load .env from the working directory
load_dotenv()

# Storage
# duplicate-email detection relies on sqlite3.IntegrityError, so only SQLite URLs are supported
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./arogyamitra.db")

# JWT
SECRET_KEY = os.getenv("SECRET_KEY", "arogyamitra-secret-key-2026")
ALGORITHM = os.getenv("ALGORITHM", "HS256")
# 0 keeps tokens valid indefinitely; any positive value adds an exp claim
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", 0))

# Plan generation provider
OPENAI_API_KEY = os.getenv("OPENAI_API_KEY", "")
OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-4o-mini")
OPENAI_TIMEOUT = float(os.getenv("OPENAI_TIMEOUT", 30.0))

# HTTP
API_PREFIX = os.getenv("API_PREFIX", "/api")
CORS_ORIGINS = [origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",")]

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
