from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict

T = TypeVar("T")


class Data(BaseModel, Generic[T]):
    """The `{"data": ...}` envelope wrapped around most Headless API responses"""
    model_config = ConfigDict(frozen = True)

    data: T
