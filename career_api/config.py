import logging
import os
import sys
from typing import List

from dotenv import load_dotenv

load_dotenv()


def env_int(name: str, default: int) -> int:
    value = (os.getenv(name) or "").strip()
    return int(value) if value else default


def env_float(name: str, default: float) -> float:
    value = (os.getenv(name) or "").strip()
    return float(value) if value else default


def env_list(name: str, default: List[str]) -> List[str]:
    value = os.getenv(name)
    if not value:
        return list(default)
    items = [item.strip() for item in value.split(",") if item.strip()]
    return items or list(default)


# =========================
# Text generation
# =========================
LLM_PROVIDER = (os.getenv("LLM_PROVIDER") or "openai").strip().lower()
OPENAI_API_KEY = (os.getenv("OPENAI_API_KEY") or "").strip()

ANALYSIS_MODEL = (os.getenv("ANALYSIS_MODEL") or "gpt-4o").strip()
ANALYSIS_TEMPERATURE = env_float("ANALYSIS_TEMPERATURE", 0.7)
ANALYSIS_MAX_TOKENS = env_int("ANALYSIS_MAX_TOKENS", 4000)

CHATBOT_MODEL = (os.getenv("CHATBOT_MODEL") or "gpt-4o-mini").strip()
CHATBOT_TEMPERATURE = env_float("CHATBOT_TEMPERATURE", 0.7)
CHATBOT_MAX_TOKENS = env_int("CHATBOT_MAX_TOKENS", 500)

OLLAMA_URL = (os.getenv("OLLAMA_URL") or "http://localhost:11434/api/chat").strip()
OLLAMA_MODEL = (os.getenv("OLLAMA_MODEL") or "llama3.1:8b").strip()
LLM_TIMEOUT_SECONDS = env_float("LLM_TIMEOUT_SECONDS", 180)

# =========================
# Payments (Stripe Checkout)
# =========================
STRIPE_SECRET_KEY = (os.getenv("STRIPE_SECRET_KEY") or "").strip()
STRIPE_WEBHOOK_SECRET = (os.getenv("STRIPE_WEBHOOK_SECRET") or "").strip()
SUCCESS_URL = (os.getenv("SUCCESS_URL") or "http://localhost:8080/success.html").strip()
CANCEL_URL = (os.getenv("CANCEL_URL") or "http://localhost:8080/cancel.html").strip()

CURRENCY = (os.getenv("CURRENCY") or "eur").strip().lower()
PRICE_CENTS = env_int("PRICE_CENTS", 499)
PRODUCT_NAME = (os.getenv("PRODUCT_NAME") or "KI-Karriereanalyse").strip()
PRODUCT_DESCRIPTION = (
    os.getenv("PRODUCT_DESCRIPTION") or "Personalisierte Karriereberatung mit KI"
).strip()
PAYMENT_METHOD_TYPES = env_list("PAYMENT_METHOD_TYPES", ["card", "paypal", "sepa_debit", "klarna"])

# =========================
# Result store
# =========================
# 0 disables expiry
RESULT_TTL_SECONDS = env_int("RESULT_TTL_SECONDS", 24 * 60 * 60)

# =========================
# App
# =========================
CORS_ALLOW_ORIGINS = env_list("CORS_ALLOW_ORIGINS", ["*"])
HOST = (os.getenv("HOST") or "0.0.0.0").strip()
PORT = env_int("PORT", 8080)
LOG_LEVEL = (os.getenv("LOG_LEVEL") or "INFO").strip().upper()

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = LOG_LEVEL) -> logging.Logger:
    logger = logging.getLogger("career_api")
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger
