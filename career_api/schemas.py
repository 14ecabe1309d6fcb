from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

# any JSON value; display_value() turns it into prompt text
Answer = Optional[Any]


# =========================
# Schemas
# =========================
class FormData(BaseModel):
    # unknown keys are kept, values are never rejected
    model_config = ConfigDict(extra="allow")

    age: Answer = None
    education: Answer = None
    location: Answer = None
    flow_activity: Answer = None
    strengths: Answer = None

    situation: Answer = None
    anti_job: Answer = None
    interests: Answer = None
    work_style: Answer = None
    work_type: Answer = None
    energy: Answer = None
    priority: Answer = None
    risk: Answer = None
    routine: Answer = None

    def as_submitted(self) -> Dict[str, Any]:
        """The answers as sent by the client, extra keys included."""
        submitted = {name: getattr(self, name) for name in self.model_fields_set}
        submitted.update(self.model_extra or {})
        return submitted


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class CheckoutRequest(_CamelModel):
    form_data: FormData = Field(alias="formData")


class CheckoutResponse(_CamelModel):
    session_id: str = Field(alias="sessionId")


class PartnerAnalysisRequest(_CamelModel):
    form_data: FormData = Field(alias="formData")
    partner_code: Optional[str] = Field(default=None, alias="partnerCode")
    source: Optional[str] = None


class PartnerAnalysisResponse(_CamelModel):
    status: Literal["complete"] = "complete"
    analysis: str
    partner_code: Optional[str] = Field(default=None, alias="partnerCode")


class AnalysisStatusResponse(BaseModel):
    status: Literal["processing", "complete"]
    analysis: Optional[str] = None
    message: Optional[str] = None


class ChatbotRequest(_CamelModel):
    question: str = Field(min_length=1)
    analysis_context: str = Field(default="", alias="analysisContext")
    session_id: Optional[str] = Field(default=None, alias="sessionId")


class ChatbotResponse(BaseModel):
    answer: str


class ErrorResponse(BaseModel):
    error: str
    message: Optional[str] = None
