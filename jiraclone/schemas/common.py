# jiraclone/schemas/common.py
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class AppBaseModel(BaseModel):
    """Parent of every API model: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
        from_attributes=True,
        alias_generator=to_camel,
    )


def not_blank(v: Optional[str], field: str = "value") -> Optional[str]:
    """Reject empty / whitespace-only strings. None passes through."""
    if v is not None and not v.strip():
        raise ValueError(f"{field} must not be blank")
    return v
