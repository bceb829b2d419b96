"""Pydantic models for Monzo API request bodies."""

from typing import Any

from pydantic import BaseModel


class Receipt(BaseModel):
    """A transaction receipt, sent as JSON to /transaction-receipts.

    Items are passed through untouched so amounts and quantities keep the
    exact JSON types the caller supplied.
    """

    transaction_id: str
    external_id: str
    items: list[dict[str, Any]]
    tax: int | None = None

    def to_body(self) -> dict[str, Any]:
        """Serialize for the API, leaving out tax when unset."""
        body: dict[str, Any] = {
            "transaction_id": self.transaction_id,
            "external_id": self.external_id,
            "items": self.items,
        }
        if self.tax is not None:
            body["tax"] = self.tax
        return body


class FeedItem(BaseModel):
    """A basic feed item shown in the Monzo app."""

    account_id: str
    title: str
    body: str
    image_url: str | None = None
    url: str | None = None

    def to_form(self) -> dict[str, str]:
        """Flatten into Monzo's bracketed form fields."""
        form = {
            "account_id": self.account_id,
            "type": "basic",
            "params[title]": self.title,
            "params[body]": self.body,
        }
        if self.image_url:
            form["params[image_url]"] = self.image_url
        if self.url:
            form["url"] = self.url
        return form
