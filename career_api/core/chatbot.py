import logging
from typing import Optional

from career_api import config
from career_api.core.prompting import build_chatbot_system_prompt
from career_api.services import llm

logger = logging.getLogger(__name__)


def answer_question(question: str, analysis_context: str, session_id: Optional[str] = None) -> str:
    logger.info("Chatbot question (session=%s): %.80s", session_id or "-", question)
    return llm.chat(
        build_chatbot_system_prompt(analysis_context),
        question,
        model=config.CHATBOT_MODEL,
        temperature=config.CHATBOT_TEMPERATURE,
        max_tokens=config.CHATBOT_MAX_TOKENS,
    ).strip()
