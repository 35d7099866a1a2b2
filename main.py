import logging
import os

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException

from database import check_connection
from routers import (
    contacts,
    geo,
    loan_details,
    loan_payments,
    payment_log,
    properties,
    purchase_details,
    rent_log,
    reports,
    tenants,
    transactions,
)

# Load .env
load_dotenv()

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

# App instance
app = FastAPI(title="Portfolio Manager API")

# CORS
origins = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Error bodies are always {"error": ...}
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    detail = exc.detail
    if exc.status_code == 404 and detail == "Not Found":
        detail = "Route not found"
    return JSONResponse(status_code=exc.status_code, content={"error": detail}, headers=exc.headers)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    details = []
    for err in exc.errors():
        msg = err.get("msg", "Invalid value")
        if msg.startswith("Value error, "):
            msg = msg[len("Value error, "):]
        field = ".".join(str(part) for part in err.get("loc", ()) if part not in ("body", "query", "path"))
        details.append({"field": field, "message": msg, "type": err.get("type")})

    first = details[0] if details else {"field": "", "message": "Invalid request", "type": None}
    if first["field"] and first["type"] != "value_error":
        message = f"{first['field']}: {first['message']}"
    else:
        message = first["message"]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": message, "details": details},
    )


@app.exception_handler(IntegrityError)
async def integrity_error_handler(request: Request, exc: IntegrityError):
    logger.warning("Integrity error on %s %s: %s", request.method, request.url.path, exc.orig)
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={"error": "Record conflicts with an existing entry"},
    )


# 500 Fallback Middleware
@app.middleware("http")
async def server_error_middleware(request: Request, call_next):
    try:
        return await call_next(request)
    except Exception:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"error": "Internal server error"})


app.include_router(properties.router)
app.include_router(geo.router)
app.include_router(purchase_details.router)
app.include_router(loan_details.router)
app.include_router(loan_payments.router)
app.include_router(rent_log.router, prefix="/api/rentlog")
app.include_router(rent_log.router, prefix="/api/rentroll", include_in_schema=False)
app.include_router(payment_log.router)
app.include_router(transactions.router)
app.include_router(contacts.router)
app.include_router(tenants.router)
app.include_router(reports.router)


@app.get("/health")
def health():
    if check_connection():
        return {"status": "ok"}
    return JSONResponse(status_code=500, content={"status": "error", "db": False})


if __name__ == "__main__":
    port = int(os.getenv("PORT", 3000))
    uvicorn.run("main:app", host="0.0.0.0", port=port, reload=True)
