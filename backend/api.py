"""FastAPI entrypoint for the transactions HTTP endpoints."""

from __future__ import annotations

import logging
import time

from fastapi import FastAPI, Query
from fastapi.requests import Request
from fastapi.responses import JSONResponse, Response
from fastapi.middleware.cors import CORSMiddleware

from backend.factory import build_transaction_service
from backend.services.transaction_service import TransactionNotFoundError, TransactionService
from shared.config import ApiSettings
from shared.models import Transaction, TransactionPayload


logger = logging.getLogger(__name__)


# Process-wide store, seeded once at import and shared by every request.
_transaction_service = build_transaction_service()
logger.info("transaction_store_seeded count=%s", len(_transaction_service.list_transactions()))


def get_transaction_service() -> TransactionService:
    """Return the process-wide transaction service."""

    return _transaction_service


settings = ApiSettings.from_env()

app = FastAPI(title="Transactions API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_transaction_requests(request: Request, call_next):
    """Emit one access line per request with its status and duration."""

    started = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception:
        logger.exception("request_crashed %s %s", request.method, request.url.path)
        raise

    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info(
        "request_handled %s %s status=%s duration_ms=%.1f",
        request.method,
        request.url.path,
        response.status_code,
        elapsed_ms,
    )
    return response


@app.exception_handler(TransactionNotFoundError)
async def transaction_not_found(request: Request, exc: TransactionNotFoundError) -> Response:
    """Answer a miss on a transaction id with an empty 404."""

    logger.info("transaction_not_found transaction_id=%s method=%s", exc.transaction_id, request.method)
    return Response(status_code=404)


@app.exception_handler(Exception)
async def internal_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error("request_failed %s %s error=%r", request.method, request.url.path, exc, exc_info=exc)
    return JSONResponse(status_code=500, content={"detail": "Internal Server Error"})


@app.get("/health")
def health() -> dict[str, object]:
    """Liveness probe reporting how many transactions are currently stored."""

    return {"status": "ok", "transactions": len(get_transaction_service().list_transactions())}


@app.get("/api/transactions", response_model=list[Transaction])
def list_transactions(transaction_type: str | None = Query(default=None, alias="type")) -> list[Transaction]:
    """List all transactions, optionally filtered by ``?type=income|expense``."""

    return get_transaction_service().list_transactions(transaction_type)


@app.get("/api/transactions/{transaction_id}", response_model=Transaction)
def get_transaction(transaction_id: int) -> Transaction:
    """Return one transaction, or an empty 404 when the id is unknown."""

    return get_transaction_service().get_transaction(transaction_id)


@app.post("/api/transactions", response_model=Transaction, status_code=201)
def create_transaction(payload: TransactionPayload) -> Transaction:
    """Store a new transaction under a freshly minted id; any body id is ignored."""

    return get_transaction_service().create_transaction(payload)


@app.put("/api/transactions/{transaction_id}", response_model=Transaction)
def update_transaction(transaction_id: int, payload: TransactionPayload) -> Transaction:
    """Replace type, amount, description and date of an existing transaction."""

    return get_transaction_service().update_transaction(transaction_id, payload)


@app.delete("/api/transactions/{transaction_id}", status_code=204, response_class=Response)
def delete_transaction(transaction_id: int) -> Response:
    """Remove a transaction permanently; its id is never reissued."""

    get_transaction_service().delete_transaction(transaction_id)
    return Response(status_code=204)
