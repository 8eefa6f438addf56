# customer_api/models/messages.py

from typing import Any, List

from pydantic import BaseModel


class MessageOut(BaseModel):
    message: str


class ErrorOut(BaseModel):
    message: str
    error: str


class ValidationErrorOut(BaseModel):
    message: str
    errors: List[Any]


class PageIndexOut(BaseModel):
    message: str
    index: int
