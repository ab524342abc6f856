from typing import Annotated, Any, List, Literal, Optional, Union
from pydantic import BaseModel, Field, field_validator, model_validator


class TailorRequest(BaseModel):
    """Request body sent to the tailoring backend."""

    resume_text: str = Field(..., description="Original resume text, as pasted")
    job_description: str = Field(..., description="Target job description, as pasted")
    role_title: Optional[str] = Field(None, description="Target role title, null when left blank")

    class Config:
        frozen = True

    @field_validator("resume_text", "job_description")
    @classmethod
    def require_text(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value

    @field_validator("role_title")
    @classmethod
    def blank_role_to_none(cls, value: Optional[str]) -> Optional[str]:
        # Non-blank titles are sent exactly as typed
        if value is None or not value.strip():
            return None
        return value

    def to_payload(self) -> dict:
        """JSON body for POST /api/tailor. role_title is always present, possibly null."""
        return {
            "resume_text": self.resume_text,
            "job_description": self.job_description,
            "role_title": self.role_title,
        }


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _as_text_list(value: Any) -> List[str]:
    if not isinstance(value, (list, tuple)):
        return []
    return [_as_text(item) for item in value if item is not None]


class TailorResult(BaseModel):
    """
    Tailoring result as returned by the backend.

    Every field is optional. Missing or null fields read as empty, keyword
    order is kept as returned and duplicates are not removed. Keys the
    backend adds beyond these four are preserved on the model but unused.
    """

    tailored_resume: str = Field("", description="ATS-friendly tailored resume text")
    matched_keywords: List[str] = Field(default_factory=list, description="Keywords found in both resume and job description")
    missing_but_referenced_keywords: List[str] = Field(default_factory=list, description="Job description keywords not detected in the resume")
    ats_tips: List[str] = Field(default_factory=list, description="Formatting and wording tips for applicant tracking systems")

    class Config:
        extra = "allow"
        frozen = True

    @model_validator(mode="before")
    @classmethod
    def lenient_payload(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return {}
        data = dict(data)
        data["tailored_resume"] = _as_text(data.get("tailored_resume"))
        for key in ("matched_keywords", "missing_but_referenced_keywords", "ats_tips"):
            data[key] = _as_text_list(data.get(key))
        return data


class Idle(BaseModel):
    """Nothing submitted yet."""

    kind: Literal["idle"] = "idle"

    class Config:
        frozen = True


class Loading(BaseModel):
    """A request is in flight."""

    kind: Literal["loading"] = "loading"

    class Config:
        frozen = True


class Success(BaseModel):
    """The backend answered 2xx with a JSON body."""

    kind: Literal["success"] = "success"
    result: TailorResult = Field(..., description="Result payload, used as returned")

    class Config:
        frozen = True


class Failed(BaseModel):
    """Validation, transport or parse failure, flattened to one message."""

    kind: Literal["failed"] = "failed"
    message: str = Field(..., description="User-visible error message")

    class Config:
        frozen = True


InteractionState = Annotated[
    Union[Idle, Loading, Success, Failed],
    Field(discriminator="kind"),
]
