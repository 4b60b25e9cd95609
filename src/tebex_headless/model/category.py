from typing import Literal

from tebex_headless.model.base_item import BaseItem
from tebex_headless.model.package import Package

DisplayType = Literal["grid", "list"]


class Category(BaseItem):
    description: str
    parent: "Category | None"
    order: int
    packages: list[Package]
    display_type: DisplayType
    slug: str | None
