from pydantic import BaseModel


class RelayResponse(BaseModel):
    ok: bool
    status: int
    upstream: str

class RelayErrorResponse(BaseModel):
    ok: bool = False
    message: str
