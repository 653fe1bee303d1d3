import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
import uvicorn

import config
from database import init_db
from errors import FinanceTrackerError, InternalError, ValidationError
from router import router
from users import users_router

logger = logging.getLogger("finance-tracker")

init_db()

app = FastAPI(title="Personal Finance Tracker API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router, prefix="/api", tags=["expenses"])
app.include_router(users_router, prefix="/api/users", tags=["users"])


@app.exception_handler(FinanceTrackerError)
async def finance_tracker_error_handler(request: Request, exc: FinanceTrackerError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
):
    problems = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
        problems.append(f"{location}: {err.get('msg')}")
    error = ValidationError("; ".join(problems) or "Invalid request")
    logger.warning("Bad request to %s: %s", request.url.path, error.detail)
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


@app.exception_handler(SQLAlchemyError)
async def storage_error_handler(request: Request, exc: SQLAlchemyError):
    logger.exception("Storage failure on %s", request.url.path)
    error = InternalError("Storage failure")
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s", request.url.path)
    error = InternalError("Unexpected server error")
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


@app.get("/")
def home():
    return {"message": "Welcome to Personal Finance Tracker API"}


if __name__ == "__main__":
    uvicorn.run(app, host=config.HOST, port=config.PORT)
