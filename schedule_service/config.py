import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(dotenv_path=env_path)

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./schedule_service.db")

# Connection pool settings (ignored for SQLite)
DB_POOL_SIZE = int(os.getenv("DB_POOL_SIZE", "20"))
DB_MAX_OVERFLOW = int(os.getenv("DB_MAX_OVERFLOW", "30"))
DB_POOL_TIMEOUT = int(os.getenv("DB_POOL_TIMEOUT", "30"))
DB_POOL_RECYCLE = int(os.getenv("DB_POOL_RECYCLE", "300"))

# Redis (shared by the list cache and the arq notification queue)
REDIS_URL = os.getenv("REDIS_URL")
REDIS_HOST = os.getenv("REDIS_HOST", "localhost")
REDIS_PORT = int(os.getenv("REDIS_PORT", "6379"))
REDIS_PASSWORD = os.getenv("REDIS_PASSWORD")
REDIS_DB = int(os.getenv("REDIS_DB", "0"))
REDIS_SSL = os.getenv("REDIS_SSL", "false").lower() == "true"
REDIS_SOCKET_TIMEOUT = float(os.getenv("REDIS_SOCKET_TIMEOUT", "5"))

# List caches share one fixed TTL; not configurable per entity kind
CACHE_TTL_SECONDS = 300

# Identity validation is delegated to the auth service
AUTH_SERVICE_URL = os.getenv("AUTH_SERVICE_URL", "http://localhost:3001/graphql")
AUTH_TIMEOUT_SECONDS = float(os.getenv("AUTH_TIMEOUT_SECONDS", "10"))

# Notification queue
QUEUE_TIMEOUT_SECONDS = float(os.getenv("QUEUE_TIMEOUT_SECONDS", "5"))
NOTIFICATION_MAX_ATTEMPTS = 3
NOTIFICATION_BACKOFF_SECONDS = 2

# Email delivery: SMTP when configured, Resend otherwise
SMTP_HOST = os.getenv("SMTP_HOST")
SMTP_PORT = int(os.getenv("SMTP_PORT", "587"))
SMTP_USER = os.getenv("SMTP_USER")
SMTP_PASS = os.getenv("SMTP_PASS")
SMTP_FROM = os.getenv("SMTP_FROM", '"Healthcare System" <noreply@healthcare.com>')
RESEND_API_KEY = os.getenv("RESEND_API_KEY")

# arq worker tuning
ARQ_MAX_JOBS = int(os.getenv("ARQ_MAX_JOBS", "20"))
ARQ_JOB_TIMEOUT = int(os.getenv("ARQ_JOB_TIMEOUT", "60"))
ARQ_KEEP_RESULT = int(os.getenv("ARQ_KEEP_RESULT", "3600"))
