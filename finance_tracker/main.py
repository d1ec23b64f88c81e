from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from finance_tracker.api.v1.api import api_router
from finance_tracker.core.config import settings
from finance_tracker.core.logging import configure_logging, get_logger
from finance_tracker.db.session import close_database, open_database

logger = get_logger(__name__)

app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.PROJECT_VERSION,
    description=settings.DESCRIPTION,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
async def startup():
    configure_logging()
    open_database(app, settings)
    logger.info("%s started (%s)", settings.PROJECT_NAME, settings.ENVIRONMENT)


@app.on_event("shutdown")
async def shutdown():
    close_database(app)


@app.get(f"{settings.API_PREFIX}/health")
async def health():
    return {"status": "UP", "message": "API is running"}


@app.get("/")
async def root():
    return {"message": "Finance Tracker API is running"}


app.include_router(api_router, prefix=settings.API_PREFIX)


def run():
    import uvicorn

    uvicorn.run("finance_tracker.main:app", host=settings.HOST, port=settings.PORT, reload=settings.DEBUG)


if __name__ == "__main__":
    run()
