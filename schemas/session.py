# Pydantic schemas describing session issue payloads.
from __future__ import annotations

from pydantic import BaseModel, StrictStr


# Incoming payload for a new session; any string is accepted, empty included.
class CreateSession(BaseModel):
    account_name: StrictStr = ""


# Shape of the issued session returned from the API.
class SessionOut(BaseModel):
    session_id: str
    account_name: str
