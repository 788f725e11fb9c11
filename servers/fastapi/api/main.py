from contextlib import asynccontextmanager

from fastapi import FastAPI

from api.v1.study.router import API_V1_STUDY_ROUTER
from utils.logging_utils import setup_logging


@asynccontextmanager
async def app_lifespan(_: FastAPI):
    setup_logging()
    yield


app = FastAPI(lifespan=app_lifespan)
app.include_router(API_V1_STUDY_ROUTER)


@app.get("/healthz")
async def healthz():
    return {"status": "ok"}
