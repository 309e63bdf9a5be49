# app/main.py
import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from sqlalchemy import exc as sa_exc
from app.config import settings
from app.core.errors import format_validation_errors
from app.database import engine, AsyncSessionLocal, Base
from app.models import habit, user  # noqa: F401  register tables on Base.metadata
from app.routers import habits, completions, stats
from app.services.seed import seed_initial_data

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger("app")


app = FastAPI(title="Habit Tracker API", version="1.0")

# Include Routers
app.include_router(habits.router)
app.include_router(completions.router)
app.include_router(stats.router)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"message": exc.detail}, headers=exc.headers)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(status_code=400, content={"message": format_validation_errors(exc.errors())})


@app.exception_handler(sa_exc.SQLAlchemyError)
async def store_exception_handler(request: Request, exc: sa_exc.SQLAlchemyError):
    logger.exception("Store failure on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"message": "Failed to process request"})


# Create DB Tables (Alembic migrations describe the same schema for prod)
@app.on_event("startup")
async def startup_event():
    # ignore duplicate-object errors from previous partial runs.
    async with engine.begin() as conn:
        try:
            await conn.run_sync(Base.metadata.create_all)
        except sa_exc.IntegrityError as e:
            msg = str(getattr(e, "orig", e))
            if "duplicate key value violates unique constraint" in msg or "already exists" in msg:
                logger.warning("Ignored duplicate DDL error during create_all: %s", msg)
            else:
                raise

    if settings.SEED_DEMO_DATA:
        async with AsyncSessionLocal() as session:
            await seed_initial_data(session)

@app.get("/")
def read_root():
    return {"message": "Welcome to the Habit Tracker API"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host="0.0.0.0", port=8000, reload=True)
