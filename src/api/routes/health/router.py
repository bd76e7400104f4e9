"""Endpoints de health check."""

from __future__ import annotations

import asyncio
import time
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any, Literal

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

router = APIRouter()


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    service: str
    timestamp: str
    version: str = "1.0.0"


@dataclass(frozen=True, slots=True)
class DependencyCheck:
    """Resultado de checagem de dependência."""

    status: Literal["ok", "failed"]
    latency_ms: float | None = None
    error: str | None = None

    def as_dict(self) -> dict[str, Any]:
        return {
            "status": self.status,
            "latency_ms": self.latency_ms,
            "error": self.error,
        }


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness: verifica se o serviço está rodando."""
    return HealthResponse(
        status="healthy",
        service="inbound-relay",
        timestamp=datetime.now(UTC).isoformat(),
    )


@router.get("/ready")
async def readiness_check(request: Request) -> JSONResponse:
    """Readiness: fila de relay acessível e worker de entrega ativo."""
    deps = getattr(request.app.state, "relay", None)
    queue_check = await _check_queue(getattr(deps, "publisher", None))
    worker_check = _check_worker(getattr(deps, "worker", None))

    ready = queue_check.status == "ok" and worker_check.status == "ok"
    payload = {
        "status": "ready" if ready else "not_ready",
        "checks": {
            "queue": queue_check.as_dict(),
            "delivery_worker": worker_check.as_dict(),
        },
        "timestamp": datetime.now(UTC).isoformat(),
    }
    return JSONResponse(content=payload, status_code=200 if ready else 503)


async def _check_queue(publisher: Any | None) -> DependencyCheck:
    if publisher is None:
        return DependencyCheck(status="failed", error="not_configured")
    started_at = time.perf_counter()
    try:
        alive = await asyncio.wait_for(publisher.ping(), timeout=2.0)
    except TimeoutError:
        return DependencyCheck(status="failed", error="timeout")
    if not alive:
        return DependencyCheck(status="failed", error="unreachable")
    latency_ms = (time.perf_counter() - started_at) * 1000
    return DependencyCheck(status="ok", latency_ms=round(latency_ms, 2))


def _check_worker(worker: Any | None) -> DependencyCheck:
    if worker is None:
        return DependencyCheck(status="failed", error="not_configured")
    if not worker.running:
        return DependencyCheck(status="failed", error="not_running")
    return DependencyCheck(status="ok")
