from datetime import datetime, timezone
from typing import Annotated
from pydantic import BaseModel, ConfigDict, BeforeValidator, AfterValidator
from pydantic.alias_generators import to_camel


def _expand_date_only(value):
    # "2024-05-01" -> midnight of that day
    if isinstance(value, str) and len(value) == 10:
        return f"{value}T00:00:00"
    return value


def _to_naive_utc(value: datetime) -> datetime:
    if value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


DateTimeField = Annotated[datetime, BeforeValidator(_expand_date_only), AfterValidator(_to_naive_utc)]


class CamelModel(BaseModel):
    """Accepts both the mobile client's camelCase keys and snake_case keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
