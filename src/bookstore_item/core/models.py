"""Data models for a bookstore catalog record."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Any

import structlog

from . import validators
from .config import ISBN_SEARCH_BASE_URL, ISNI_BASE_URL, default_currency
from .errors import InvalidArgumentError, InvalidStateError

log = structlog.get_logger()

NO_ISNI_MARKER = "ISNI IS NOT SET"


@dataclass
class ListingOptions:
    """Optional author and commercial fields for a new record."""

    isni: str | None = None
    published: date | None = None
    book_binding: str | None = None
    price: Decimal | int | str = Decimal("0.00")
    currency: str | None = None
    amount: int = 0


def _to_price(value: Any) -> Decimal:
    if isinstance(value, bool):
        raise InvalidArgumentError("price", value, "must be a decimal amount")
    if isinstance(value, float):
        value = str(value)
    try:
        price = Decimal(value)
    except (InvalidOperation, TypeError, ValueError) as e:
        raise InvalidArgumentError("price", value, "must be a decimal amount") from e
    if not price.is_finite():
        raise InvalidArgumentError("price", value, "must be a finite amount")
    return price


class BookRecord:
    """A single bookstore item with its author identity, pricing and stock level.

    Author name, ISNI and ISBN are fixed once the record exists. Everything
    else can be reassigned; each setter checks the same rules the
    constructor does and leaves the old value in place when it rejects.
    """

    def __init__(
        self,
        author_name: str,
        title: str,
        publisher: str,
        isbn: str,
        *,
        isni: str | None = None,
        published: date | None = None,
        book_binding: str | None = None,
        price: Decimal | int | str = Decimal("0.00"),
        currency: str | None = None,
        amount: int = 0,
    ) -> None:
        self._author_name = validators.require_text(author_name, "author_name")
        self.title = title
        self.publisher = publisher
        self._isbn = validators.require_isbn(isbn)
        self._isni = validators.require_isni(isni) if isni is not None else None

        self.published = published
        self.book_binding = book_binding
        self.currency = currency if currency is not None else default_currency()
        self._price = Decimal("0.00")
        self.price = price
        self._amount = 0
        self.amount = amount

        log.debug("book_record_created", isbn=self._isbn, has_isni=self.has_isni)

    @classmethod
    def from_options(
        cls,
        author_name: str,
        title: str,
        publisher: str,
        isbn: str,
        options: ListingOptions | None = None,
    ) -> BookRecord:
        """Build a record from the required fields plus a ``ListingOptions``."""
        if options is None:
            options = ListingOptions()
        return cls(
            author_name,
            title,
            publisher,
            isbn,
            isni=options.isni,
            published=options.published,
            book_binding=options.book_binding,
            price=options.price,
            currency=options.currency,
            amount=options.amount,
        )

    @property
    def author_name(self) -> str:
        return self._author_name

    @property
    def isni(self) -> str | None:
        """International Standard Name Identifier of the author, if known."""
        return self._isni

    @property
    def has_isni(self) -> bool:
        return self._isni is not None

    @property
    def isbn(self) -> str:
        return self._isbn

    @property
    def title(self) -> str:
        return self._title

    @title.setter
    def title(self, value: str) -> None:
        self._title = validators.require_text(value, "title")

    @property
    def publisher(self) -> str:
        return self._publisher

    @publisher.setter
    def publisher(self, value: str) -> None:
        self._publisher = validators.require_text(value, "publisher")

    @property
    def book_binding(self) -> str:
        return self._book_binding

    @book_binding.setter
    def book_binding(self, value: str | None) -> None:
        self._book_binding = value if value is not None else ""

    @property
    def price(self) -> Decimal:
        return self._price

    @price.setter
    def price(self, value: Decimal | int | str) -> None:
        self._price = validators.require_non_negative(_to_price(value), "price")

    @property
    def currency(self) -> str:
        return self._currency

    @currency.setter
    def currency(self, value: str) -> None:
        self._currency = validators.require_currency(value)

    @property
    def amount(self) -> int:
        """Number of copies in stock."""
        return self._amount

    @amount.setter
    def amount(self, value: int) -> None:
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidArgumentError("amount", value, "must be an integer")
        self._amount = validators.require_non_negative(value, "amount")

    def get_isni_uri(self) -> str:
        """Link to the author's page on isni.org."""
        if self._isni is None:
            raise InvalidStateError("record has no ISNI")
        return f"{ISNI_BASE_URL}{self._isni}"

    def get_isbn_search_uri(self) -> str:
        """Link to this edition on isbnsearch.org."""
        return f"{ISBN_SEARCH_BASE_URL}{self._isbn}"

    def describe(self) -> str:
        isni = self._isni if self._isni is not None else NO_ISNI_MARKER
        return f"{self.title}, {self.author_name}, {isni}, {self.price} {self.currency}, {self.amount}"

    def _fields(self) -> tuple:
        return (
            self._author_name,
            self._isni,
            self._title,
            self._publisher,
            self._isbn,
            self.published,
            self._book_binding,
            self._price,
            self._currency,
            self._amount,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BookRecord):
            return NotImplemented
        return self._fields() == other._fields()

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        return (
            f"BookRecord(author_name={self._author_name!r}, title={self._title!r}, "
            f"isbn={self._isbn!r}, isni={self._isni!r})"
        )
