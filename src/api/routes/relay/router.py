"""Router do relay — agrega webhook e provisionamento."""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.relay.message import router as message_router
from api.routes.relay.provisioning import router as provisioning_router

router = APIRouter()

router.include_router(message_router)
router.include_router(provisioning_router)
