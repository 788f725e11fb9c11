from fastapi import APIRouter

from api.v1.study.endpoints.content import CONTENT_ROUTER
from api.v1.study.endpoints.text import TEXT_ROUTER


API_V1_STUDY_ROUTER = APIRouter(prefix="/api/v1/study")
API_V1_STUDY_ROUTER.include_router(TEXT_ROUTER)
API_V1_STUDY_ROUTER.include_router(CONTENT_ROUTER)
