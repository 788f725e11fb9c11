from fastapi import APIRouter

from models.study_requests import (
    RawResponseRequest,
    RecoverResponse,
    SanitizeRequest,
    SanitizeResponse,
)
from utils.latex_sanitizer import sanitize
from utils.response_recovery import recover_records


TEXT_ROUTER = APIRouter(tags=["Study"])


@TEXT_ROUTER.post("/recover", response_model=RecoverResponse)
async def recover_response(request: RawResponseRequest):
    result = recover_records(request.raw)
    return RecoverResponse(records=result.records, strategy=result.strategy)


@TEXT_ROUTER.post("/sanitize", response_model=SanitizeResponse)
async def sanitize_text(request: SanitizeRequest):
    return SanitizeResponse(text=sanitize(request.text))
