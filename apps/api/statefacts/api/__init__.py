from __future__ import annotations

from fastapi import APIRouter

from statefacts.api import routes_funfacts, routes_states

router = APIRouter()
router.include_router(routes_states.router)
router.include_router(routes_funfacts.router)
