"""Keypair Schemas: response for keypair generation."""

from pydantic import BaseModel


class KeypairResponse(BaseModel):
    pubkey: str
    secret: str
