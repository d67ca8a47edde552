"""
Envelope returned by mutations and by every failure.
"""
from pydantic import BaseModel


class Message(BaseModel):
    message: str
