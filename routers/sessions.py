from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, status

from schemas.session import CreateSession, SessionOut
from services.dependencies import get_session_id_generator
from utils.ids import SessionIdGenerator


logger = logging.getLogger(__name__)
router = APIRouter(tags=["sessions"])


@router.post("/session", response_model=SessionOut, status_code=status.HTTP_201_CREATED)
# Issue a fresh session id for the given account.
def new_session(
    payload: CreateSession,
    generator: SessionIdGenerator = Depends(get_session_id_generator),
):
    session_id = generator.generate_session_id(payload.account_name)
    logger.info("Issued session %s", session_id)
    return {"session_id": session_id, "account_name": payload.account_name}
