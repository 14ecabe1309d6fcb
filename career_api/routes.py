import logging
from datetime import datetime

from fastapi import APIRouter, BackgroundTasks, Depends, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from career_api import config
from career_api.schemas import (
    AnalysisStatusResponse,
    ChatbotRequest,
    ChatbotResponse,
    CheckoutRequest,
    CheckoutResponse,
    ErrorResponse,
    PartnerAnalysisRequest,
    PartnerAnalysisResponse,
)
from career_api.core.analysis import new_partner_session_id, run_analysis
from career_api.core.chatbot import answer_question
from career_api.core.detached import spawn_detached
from career_api.core.prompting import CHATBOT_APOLOGY
from career_api.core.store import ResultStore
from career_api.services import payments

logger = logging.getLogger(__name__)

router = APIRouter()

RESULT_STORE = ResultStore(ttl_seconds=config.RESULT_TTL_SECONDS)


def get_store() -> ResultStore:
    return RESULT_STORE


def log_paid_analysis_failure(exc: BaseException) -> None:
    # payment may already be captured; nothing reconciles this
    logger.error("Analysis error: %s", exc, exc_info=exc)


@router.get("/", response_class=PlainTextResponse)
def root():
    return "KI Karriereberater Backend läuft! 🚀"


@router.get("/health")
def health():
    return {"ok": True}


@router.post("/create-checkout-session", response_model=CheckoutResponse, responses={500: {"model": ErrorResponse}})
def create_checkout_session(
    req: CheckoutRequest,
    background_tasks: BackgroundTasks,
    store: ResultStore = Depends(get_store),
):
    form_data = req.form_data.as_submitted()
    try:
        session_id = payments.create_checkout_session(form_data)
    except payments.PaymentError as e:
        logger.error("Stripe Error: %s", e)
        return JSONResponse(status_code=500, content={"error": str(e)})

    spawn_detached(background_tasks, run_analysis, form_data, session_id, store, on_error=log_paid_analysis_failure)
    return CheckoutResponse(session_id=session_id)


@router.post("/create-partner-analysis", response_model=PartnerAnalysisResponse, responses={500: {"model": ErrorResponse}})
def create_partner_analysis(req: PartnerAnalysisRequest, store: ResultStore = Depends(get_store)):
    logger.info("Partner analysis requested: %s (%s)", req.partner_code, req.source)
    session_id = new_partner_session_id()
    try:
        analysis = run_analysis(req.form_data.as_submitted(), session_id, store)
    except Exception as e:
        logger.exception("Partner analysis failed: %s", req.partner_code)
        return JSONResponse(
            status_code=500,
            content={"error": "Analysis generation failed", "message": str(e)},
        )

    logger.info("Partner analysis generated: %s (%s)", req.partner_code, datetime.now().isoformat())
    return PartnerAnalysisResponse(analysis=analysis, partner_code=req.partner_code)


@router.get(
    "/get-analysis/{session_id}",
    response_model=AnalysisStatusResponse,
    response_model_exclude_none=True,
    responses={202: {"model": AnalysisStatusResponse}},
)
def get_analysis(session_id: str, store: ResultStore = Depends(get_store)):
    record = store.get(session_id)
    if record is None:
        return JSONResponse(
            status_code=202,
            content={"status": "processing", "message": "Analyse läuft noch..."},
        )
    return AnalysisStatusResponse(status="complete", analysis=record.analysis)


@router.post("/api/chatbot", response_model=ChatbotResponse, responses={500: {"model": ErrorResponse}})
def chatbot(req: ChatbotRequest):
    try:
        answer = answer_question(req.question, req.analysis_context, req.session_id)
    except Exception:
        logger.exception("Chatbot error (session=%s)", req.session_id)
        return JSONResponse(status_code=500, content={"error": CHATBOT_APOLOGY})
    return ChatbotResponse(answer=answer)


@router.post("/webhook")
async def webhook(request: Request):
    payload = await request.body()
    try:
        event = payments.parse_webhook_event(payload, request.headers.get("stripe-signature", ""))
    except payments.PaymentError as e:
        logger.warning("Rejected webhook: %s", e)
        return JSONResponse(status_code=400, content={"error": str(e)})

    event_type = event.get("type", "unknown")
    if event_type == "checkout.session.completed":
        session = (event.get("data") or {}).get("object") or {}
        logger.info("Checkout completed for session: %s", session.get("id"))
    else:
        logger.info("Webhook event received: %s", event_type)
    return {"received": True}
