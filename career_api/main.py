import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from career_api import config
from career_api.routes import router

logger = config.configure_logging()

# =========================
# App
# =========================
app = FastAPI(title="KI Karriereberater API", version="0.3")

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ALLOW_ORIGINS,
    allow_credentials=config.CORS_ALLOW_ORIGINS != ["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)

if not config.STRIPE_SECRET_KEY:
    logger.warning("STRIPE_SECRET_KEY is missing. Checkout sessions cannot be created.")
if config.LLM_PROVIDER == "openai" and not config.OPENAI_API_KEY:
    logger.warning("OPENAI_API_KEY is missing. Analyses cannot be generated.")


def run() -> None:
    logger.info("Server listening on port %s", config.PORT)
    uvicorn.run(app, host=config.HOST, port=config.PORT)


if __name__ == "__main__":
    run()
