from __future__ import annotations

from fastapi import Request

from bgremover.services.temp_store import TempStore


def get_temp_store(request: Request) -> TempStore:
    store = getattr(request.app.state, "temp_store", None)
    if store is None:
        raise RuntimeError("Temp store not initialized")
    return store
