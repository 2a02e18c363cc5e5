"""Restaurant catalogue: dishes, categories and menus."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from ..models import Payload, as_body
from ._base import Resource


class DishesResource(Resource):
    def list(self, params: Optional[Mapping[str, Any]] = None) -> Any:
        return self._api.get("/dishes", params)

    def get(self, dish_id: Any) -> Any:
        return self._api.get(f"/dishes/{dish_id}")

    def search(self, query: str) -> Any:
        return self._api.get("/dishes/search", {"q": query})


class CategoriesResource(Resource):
    def list(self, params: Optional[Mapping[str, Any]] = None) -> Any:
        return self._api.get("/categories", params)

    def get(self, category_id: Any) -> Any:
        return self._api.get(f"/categories/{category_id}")

    def dishes(self, category_id: Any) -> Any:
        return self._api.get(f"/categories/{category_id}/dishes")


class MenusResource(Resource):
    def list(self) -> Any:
        return self._api.get("/menus")

    def get(self, menu_id: Any) -> Any:
        """Return the menu itself, unwrapped from ``{"menu": ...}``."""
        data = self._api.get(f"/menus/{menu_id}")
        return data.get("menu") if isinstance(data, dict) else None

    def by_type(self, menu_type: str) -> Any:
        return self._api.get(f"/menus/type/{menu_type}")

    def create(self, data: Payload) -> Any:
        return self._api.post("/menus", as_body(data))

    def update(self, menu_id: Any, data: Payload) -> Any:
        return self._api.put(f"/menus/{menu_id}", as_body(data))

    def delete(self, menu_id: Any) -> Any:
        return self._api.delete(f"/menus/{menu_id}")
