from pydantic import Field, AliasChoices
from typing import Optional
from watertrack.schemas.base import CamelModel, DateTimeField

# Older client builds send the icon as "iconName"
_ICON = AliasChoices("icon", "iconName")


# Categories
class CategoryCreate(CamelModel):
    name: str = Field(min_length=1)
    icon: Optional[str] = Field(default=None, validation_alias=_ICON)


class CategoryUpdate(CamelModel):
    name: Optional[str] = Field(default=None, min_length=1)
    icon: Optional[str] = Field(default=None, validation_alias=_ICON)


# Devices
class DeviceCreate(CamelModel):
    name: str = Field(min_length=1)
    description: Optional[str] = None
    category_id: int


class DeviceUpdate(CamelModel):
    name: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    category_id: Optional[int] = None


# Usages
class UsageCreate(CamelModel):
    device_id: int
    value: float = Field(ge=0, allow_inf_nan=False)
    notes: Optional[str] = None
    timestamp: Optional[DateTimeField] = None


class UsageUpdate(CamelModel):
    device_id: Optional[int] = None
    value: Optional[float] = Field(default=None, ge=0, allow_inf_nan=False)
    notes: Optional[str] = None
    timestamp: Optional[DateTimeField] = None


# Bills
class BillCreate(CamelModel):
    amount: float = Field(ge=0, allow_inf_nan=False)
    due_date: DateTimeField
    water_used: float = Field(ge=0, allow_inf_nan=False)
    bill_period_start: Optional[DateTimeField] = None
    bill_period_end: Optional[DateTimeField] = None


class BillUpdate(CamelModel):
    amount: Optional[float] = Field(default=None, ge=0, allow_inf_nan=False)
    due_date: Optional[DateTimeField] = None
    water_used: Optional[float] = Field(default=None, ge=0, allow_inf_nan=False)
    bill_period_start: Optional[DateTimeField] = None
    bill_period_end: Optional[DateTimeField] = None


class MarkPaidRequest(CamelModel):
    paid_date: Optional[DateTimeField] = None
