"""Favorites, reviews, loyalty points and the contact form."""

from __future__ import annotations

from typing import Any

from ..models import FavoritesList, Payload, as_body
from ._base import Resource


class FavoritesResource(Resource):
    def list(self) -> FavoritesList:
        return FavoritesList.model_validate(self._api.get("/favorites"))

    def add(self, dish_id: Any) -> Any:
        return self._api.post("/favorites", {"dishId": dish_id})

    def remove(self, dish_id: Any) -> Any:
        return self._api.delete(f"/favorites/{dish_id}")

    def is_favorite(self, dish_id: Any) -> bool:
        data = self._api.get(f"/favorites/check/{dish_id}")
        return bool(data.get("isFavorite")) if isinstance(data, dict) else False

    def count(self) -> int:
        data = self._api.get("/favorites/count")
        return int(data.get("count") or 0) if isinstance(data, dict) else 0


class ReviewsResource(Resource):
    def create(self, dish_id: Any, data: Payload) -> Any:
        return self._api.post("/reviews", {"dishId": dish_id, **as_body(data)})

    def mine(self) -> Any:
        return self._api.get("/reviews/my")

    def for_dish(self, dish_id: Any) -> Any:
        return self._api.get(f"/reviews/dish/{dish_id}")

    def update(self, review_id: Any, data: Payload) -> Any:
        return self._api.put(f"/reviews/{review_id}", as_body(data))

    def delete(self, review_id: Any) -> Any:
        return self._api.delete(f"/reviews/{review_id}")


class LoyaltyResource(Resource):
    def points(self) -> Any:
        return self._api.get("/loyalty/points")

    def history(self) -> Any:
        return self._api.get("/loyalty/history")

    def redeem(self, reward_id: Any) -> Any:
        return self._api.post("/loyalty/redeem", {"rewardId": reward_id})


class ContactResource(Resource):
    def send(self, message: Payload) -> Any:
        return self._api.post("/contact", as_body(message))
