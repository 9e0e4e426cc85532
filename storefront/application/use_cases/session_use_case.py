"""
Session use case

Owns the authenticated identity and ties the cart's lifetime to it.
"""

import logging
from typing import Callable, Optional

from storefront.domain.entities.cart_entity import CartLedger
from storefront.domain.entities.favorites_entity import FavoritesSet
from storefront.domain.entities.identity_entity import Identity
from storefront.infrastructure.utilities.exceptions import InvalidCredentialsError


class SessionBinder:
    """
    Two states: anonymous and authenticated.

    Binding rule: a login whose username differs from the current one
    (including the first login from anonymous) empties the cart. Logging in
    again as the same user keeps it. Logout empties both the cart and the
    favorites; a user-change login leaves favorites alone.
    """

    def __init__(
        self,
        cart: CartLedger,
        favorites: FavoritesSet,
        on_cart_reset: Optional[Callable[[], None]] = None,
    ):
        self._cart = cart
        self._favorites = favorites
        self._on_cart_reset = on_cart_reset
        self._identity: Optional[Identity] = None
        self._logger = logging.getLogger(self.__class__.__name__)

    @property
    def identity(self) -> Optional[Identity]:
        return self._identity

    def is_authenticated(self) -> bool:
        return self._identity is not None

    def login(self, username: str, password: str) -> Identity:
        """Authenticate via the mock pass-through and apply the binding rule"""
        if not isinstance(username, str) or not isinstance(password, str):
            raise InvalidCredentialsError()
        if not username or not password:
            raise InvalidCredentialsError()

        identity = Identity.from_credentials(username, password)
        previous = self._identity.username if self._identity else None

        if previous != identity.username:
            self._logger.info(
                "User changed from %s to %s, resetting cart", previous, identity.username
            )
            self._reset_cart()
        else:
            self._logger.info("User %s logged in again, cart kept", identity.username)

        self._identity = identity
        return identity

    def logout(self) -> None:
        """Drop the identity and wipe cart and favorites"""
        username = self._identity.username if self._identity else None
        self._identity = None
        self._reset_cart()
        self._favorites.clear()
        self._logger.info("User %s logged out", username)

    def restore(self, identity: Optional[Identity]) -> None:
        """Reinstall a persisted identity without applying the binding rule"""
        self._identity = identity

    def _reset_cart(self) -> None:
        self._cart.clear()
        if self._on_cart_reset is not None:
            self._on_cart_reset()
