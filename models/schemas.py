from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, EmailStr
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class TokenOut(CamelModel):
    id: int
    token: str
    is_used: bool
    created_at: datetime


class TokenVerify(CamelModel):
    token: Optional[str] = None


class UserRegister(CamelModel):
    name: str
    email: EmailStr
    phone_no: Optional[str] = None
    current_qualification: Optional[str] = None
    access_token: str


class UserOut(CamelModel):
    id: int
    name: str
    email: EmailStr
    phone_no: Optional[str] = None
    current_qualification: Optional[str] = None
    access_token: str
    created_at: datetime


class ResponseIn(CamelModel):
    # Optional so that missing fields are reported as 400, not 422
    access_token: Optional[str] = None
    section: Optional[str] = None
    answers: Optional[Any] = None


class ResponseOut(CamelModel):
    id: int
    access_token: str
    section: str
    answers: Any
    created_at: datetime


class ReportIn(CamelModel):
    access_token: Optional[str] = None
    mode: str = "manual"
    pdf_data: Optional[str] = None
    variant: Optional[str] = None
