from pydantic import BaseModel, Field
from datetime import datetime
from typing import Literal, Optional

StockStatus = Literal["in_stock", "low_stock", "out_of_stock"]


class PartCreate(BaseModel):
    name: str
    reference: str = Field(min_length=1, max_length=50)
    category: str
    stock: int = Field(default=0, ge=0)
    min_stock: int = Field(default=5, ge=0)
    unit_price: int = Field(ge=0)        # cents


class PartUpdate(BaseModel):
    name: Optional[str] = None
    reference: Optional[str] = Field(default=None, min_length=1, max_length=50)
    category: Optional[str] = None
    stock: Optional[int] = Field(default=None, ge=0)
    min_stock: Optional[int] = Field(default=None, ge=0)
    unit_price: Optional[int] = Field(default=None, ge=0)


class PartOut(BaseModel):
    id: int
    name: str
    reference: str
    category: str
    stock: int
    min_stock: int
    unit_price: int
    created_at: datetime

    class Config:
        from_attributes = True


class PartWithStatus(PartOut):
    status: StockStatus
