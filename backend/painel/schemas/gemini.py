"""Gemini Endpoint Schemas: explanation and structured-series request bodies.

Invariants:
    - ExplainRequest: prompt/context optional, any length, empty means "use default"
    - SeriesRequest.months: positive, no upper bound, default 12
    - SeriesRequest.end: accepts YYYY-MM, YYYY-MM-DD or an ISO-8601 datetime;
      None means "current month" (resolved by the service, not here)
"""

from datetime import date, datetime, timezone

from pydantic import BaseModel, Field, field_validator


class ExplainRequest(BaseModel):
    """Free-text explanation request."""
    prompt: str | None = None
    context: str | None = None


class ExplainResponse(BaseModel):
    text: str


class SeriesRequest(BaseModel):
    """Structured series request: window size and reference month."""
    months: int = Field(12, ge=1)
    end: date | None = None

    @field_validator("end", mode="before")
    @classmethod
    def parse_end(cls, v):
        if v is None or isinstance(v, (date, datetime)):
            return v.date() if isinstance(v, datetime) else v
        if not isinstance(v, str):
            return v
        text = v.strip()
        if not text:
            return None
        if len(text) == 7:  # YYYY-MM
            text = f"{text}-01"
        if len(text) == 10:
            return text
        moment = datetime.fromisoformat(text.replace("Z", "+00:00"))
        if moment.tzinfo is not None:
            moment = moment.astimezone(timezone.utc)
        return moment.date()
