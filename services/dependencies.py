# Provide cached dependency factories for the FastAPI app.
from functools import lru_cache

from utils.ids import SessionIdGenerator


# One generator per process so every request draws from the same counter.
@lru_cache
def get_session_id_generator() -> SessionIdGenerator:
    return SessionIdGenerator()
