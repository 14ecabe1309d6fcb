import logging
import secrets
import string
import time
from typing import Any, Dict

from career_api import config
from career_api.core.policy import select_variant
from career_api.core.prompting import ANALYSIS_SYSTEM_PROMPT, build_analysis_prompt, display_value
from career_api.core.store import AnalysisRecord, ResultStore
from career_api.services import llm

logger = logging.getLogger(__name__)

_ID_ALPHABET = string.ascii_lowercase + string.digits


def new_partner_session_id() -> str:
    suffix = "".join(secrets.choice(_ID_ALPHABET) for _ in range(9))
    return f"partner_{int(time.time() * 1000)}_{suffix}"


def run_analysis(form_data: Dict[str, Any], session_id: str, store: ResultStore) -> str:
    """Generate the career analysis for one session and record it.

    Nothing is written to the store when generation fails; the
    GenerationError propagates to the caller.
    """
    logger.info("Starting analysis for session: %s", session_id)

    variant = select_variant(display_value(form_data.get("education")), form_data.get("situation"))
    logger.debug("Session %s uses template variant %s", session_id, variant.key)
    prompt = build_analysis_prompt(form_data, variant)

    analysis = llm.chat(
        ANALYSIS_SYSTEM_PROMPT,
        prompt,
        model=config.ANALYSIS_MODEL,
        temperature=config.ANALYSIS_TEMPERATURE,
        max_tokens=config.ANALYSIS_MAX_TOKENS,
    ).strip()

    store.put(session_id, AnalysisRecord(analysis=analysis, form_data=form_data))
    logger.info("Analysis complete for session: %s", session_id)
    return analysis
