from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel
import datetime
from decimal import Decimal
from typing import List, Optional


class CamelModel(BaseModel):
    """Snake_case attributes in Python, camelCase keys on the wire."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


# Requests


class UserCreate(CamelModel):
    name: Optional[str] = None
    email: str
    password: str
    created_at: Optional[datetime.datetime] = None


class ExpenseUpdate(CamelModel):
    amount: Decimal = Field(max_digits=12, decimal_places=2)
    category: str
    description: str
    date: datetime.date


class ExpenseCreate(ExpenseUpdate):
    user_id: int


# Responses


class ExpenseView(CamelModel):
    id: int
    amount: float
    category: Optional[str] = None
    description: Optional[str] = None
    date: Optional[datetime.date] = None
    user_id: int


class UserSummary(CamelModel):
    id: int
    name: Optional[str] = None
    email: str
    created_at: Optional[datetime.datetime] = None


class UserDetail(UserSummary):
    expenses: List[ExpenseView] = []
