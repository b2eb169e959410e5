"""Category table for the storefront's top navigation."""

from collections.abc import Mapping
from types import MappingProxyType

# Subcategories are not linked from the top menu; reach them via their parent.
SUBCATEGORY_PARENTS: Mapping[str, str] = MappingProxyType({
    "Notebooks": "Computers",
    "Desktops": "Computers",
    "Accessories": "Computers",
    "Camera, photo": "Electronics",
    "Cell phones": "Electronics",
})


class CategoryTable:
    """Read-only lookup of subcategory -> parent category."""

    def __init__(self, parents: Mapping[str, str] = SUBCATEGORY_PARENTS):
        self._parents = MappingProxyType(dict(parents))

    def parent_of(self, category: str) -> str | None:
        return self._parents.get(category)

    def is_subcategory(self, category: str) -> bool:
        return category in self._parents

    def subcategories_of(self, parent: str) -> list[str]:
        return [name for name, p in self._parents.items() if p == parent]

    def __contains__(self, category: object) -> bool:
        return category in self._parents

    def __len__(self) -> int:
        return len(self._parents)
