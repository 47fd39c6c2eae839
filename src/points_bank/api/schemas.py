from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, StrictInt, StrictStr


class RegisterIn(BaseModel):
    email: str = Field("", examples=["test@example.com"])
    password: str = Field("", examples=["password123"])
    first_name: str = ""
    last_name: str = ""
    phone: str = ""
    birthday: str = Field("", examples=["1990-01-01"])  # YYYY-MM-DD
    member_id: str = Field("", examples=["LBK001234"])


class RegisterOut(BaseModel):
    id: int
    email: str
    member_id: str


class LoginIn(BaseModel):
    email: str = ""
    password: str = ""


class LoginOut(BaseModel):
    token: str


class ProfileOut(BaseModel):
    id: int
    email: str
    first_name: str
    last_name: str
    phone: str
    birthday: str
    member_id: str
    member_tier: str
    points: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class TransferIn(BaseModel):
    to_member_id: StrictStr = Field("", examples=["LBK002345"])
    amount: StrictInt = Field(0, examples=[1000])


class RecipientOut(BaseModel):
    member_id: str
    first_name: str
    last_name: str


class TransferOut(BaseModel):
    message: str
    transaction_id: int
    remaining_points: int
    transferred_amount: int
    recipient: RecipientOut


class TransactionOut(BaseModel):
    id: int
    contact_name: str
    contact_member_id: str
    amount: int
    type: str
    status: str
    date: str
    time: str


class RecentTransactionsOut(BaseModel):
    transactions: List[TransactionOut]


class PublicProfileOut(BaseModel):
    member_id: str
    first_name: str
    last_name: str
    member_tier: str


class ErrorOut(BaseModel):
    error: str
