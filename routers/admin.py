from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from bank import reload_bank
from deps.auth import require_admin

logger = logging.getLogger("practice-grading.admin")

router = APIRouter(prefix="/admin", tags=["admin"], dependencies=[Depends(require_admin)])


@router.post("/reload")
def reload_content():
    counts = reload_bank()
    logger.info("content bank reloaded by admin: %s", counts)
    return {"ok": True, **counts}
