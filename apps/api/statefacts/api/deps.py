from __future__ import annotations

"""Dependencies handing the app-scoped registry and fact store to routes."""

from fastapi import Request

from statefacts.services.fact_store import FactStore
from statefacts.services.reference import StateRegistry


def get_registry(request: Request) -> StateRegistry:
    return request.app.state.registry


def get_fact_store(request: Request) -> FactStore:
    return request.app.state.fact_store
