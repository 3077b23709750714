"""Message Schemas: sign/verify request bodies and their responses.

Invariants:
    - message is any UTF-8 string, empty included; it is echoed back unchanged
    - secret, pubkey and signature stay opaque strings until core decodes them
"""

from pydantic import BaseModel, StrictStr

from solbridge.schemas.instruction import RequestModel


class SignMessageRequest(RequestModel):
    secret: StrictStr
    message: StrictStr


class SignMessageResponse(BaseModel):
    signature: str
    public_key: str
    message: str


class VerifyMessageRequest(RequestModel):
    pubkey: StrictStr
    signature: StrictStr
    message: StrictStr


class VerifyMessageResponse(BaseModel):
    valid: bool
    message: str
    pubkey: str
