from typing import Optional
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Base DTO: camelCase on the wire, snake_case accepted on input"""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


def validate_url_scheme(value: str, schemes: Optional[tuple], message: str) -> str:
    """Check ``value`` is an absolute URL, using one of ``schemes`` when given"""
    parsed = urlparse(value)
    if not parsed.scheme or not parsed.netloc:
        raise ValueError(message)
    if schemes is not None and parsed.scheme not in schemes:
        raise ValueError(message)
    return value
