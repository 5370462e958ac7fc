import logging

from fastapi import FastAPI

from app.core.config import APP_TITLE
from app.core.logging_middleware import LoggingMiddleware
from app.routers.learner_data import router as learner_data_router

logging.basicConfig(level=logging.INFO)

app = FastAPI(title=APP_TITLE)

# Middleware
app.add_middleware(LoggingMiddleware)


# Health check
@app.get("/health")
def health():
    return {"status": "ok"}


app.include_router(learner_data_router, tags=["learner-data"])
