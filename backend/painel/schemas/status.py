"""Status Schemas: liveness payload and Gemini provider diagnostics."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class HealthResponse(BaseModel):
    ok: bool = True
    uptime: float


class ProviderStatus(BaseModel):
    """Result of one provider probe. Serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    has_key: bool
    masked_key: str | None = None
    reachable: bool | None = None
    http_status: int | None = None
    message: str | None = None
