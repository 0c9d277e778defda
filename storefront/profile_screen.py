"""
Mount lifecycle of the staff profile screen.

On each activation the screen checks the session role and, for staff, loads
the product list it displays. Streamlit specifics (page switching, toasts,
session_state) are injected so the lifecycle runs the same under test.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional, Protocol, Sequence, Tuple

from storefront.auth import ROLE_STAFF
from storefront.session import SessionContext

logger = logging.getLogger(__name__)

MAX_DISPLAYED_PRODUCTS = 20
LOAD_PRODUCTS_ERROR = "Unable to load products"
REQUIRED_ROLE = ROLE_STAFF

ProductFetch = Callable[[], Optional[Sequence[Any]]]


class Navigator(Protocol):
    def go_home(self) -> None:
        ...


class Notifier(Protocol):
    def error(self, message: str) -> None:
        ...


@dataclass(frozen=True)
class ProductFetchOutcome:
    products: Tuple[Any, ...] = ()
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, result: Optional[Sequence[Any]]) -> "ProductFetchOutcome":
        if not result:
            return cls(products=())
        return cls(products=tuple(list(result)[:MAX_DISPLAYED_PRODUCTS]))

    @classmethod
    def failure(cls, error: BaseException) -> "ProductFetchOutcome":
        return cls(products=(), error=error)


def fetch_product_summaries(fetch: ProductFetch) -> ProductFetchOutcome:
    """Call the retrieval collaborator once. Never raises."""
    try:
        result = fetch()
    except Exception as e:
        logger.exception("Error fetching products")
        return ProductFetchOutcome.failure(e)
    return ProductFetchOutcome.success(result)


@dataclass(frozen=True)
class ProfileViewState:
    authorized: bool
    products: Tuple[Any, ...] = ()
    load_failed: bool = False

    @classmethod
    def unauthorized(cls) -> "ProfileViewState":
        return cls(authorized=False)


class ProfileScreen:
    def __init__(
        self,
        session: SessionContext,
        fetch_products: ProductFetch,
        navigator: Navigator,
        notifier: Notifier,
    ):
        self.session = session
        self.fetch_products = fetch_products
        self.navigator = navigator
        self.notifier = notifier

    def authorize(self) -> bool:
        """Redirect home unless the session carries the staff role."""
        if self.session.has_role(REQUIRED_ROLE):
            return True

        logger.info("Redirecting non-staff session (role=%s) to home", self.session.role)
        self.navigator.go_home()
        return False

    def mount(self) -> ProfileViewState:
        if not self.authorize():
            return ProfileViewState.unauthorized()

        outcome = fetch_product_summaries(self.fetch_products)
        if not outcome.ok:
            self.notifier.error(LOAD_PRODUCTS_ERROR)

        return ProfileViewState(
            authorized=True,
            products=outcome.products,
            load_failed=not outcome.ok,
        )
