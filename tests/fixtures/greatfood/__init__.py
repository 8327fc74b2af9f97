"""
Great Food Ltd API consumer used by the integration tests.
"""

from .api_requests import (
    GetMenuProductsRequest,
    GetMenusRequest,
    GetTokenRequest,
    UpdateProductRequest,
)
from .connector import AuthenticationError, GreatFoodConnector
from .models import Menu, Product
from .service import MenuService

__all__ = [
    "AuthenticationError",
    "GetMenuProductsRequest",
    "GetMenusRequest",
    "GetTokenRequest",
    "GreatFoodConnector",
    "Menu",
    "MenuService",
    "Product",
    "UpdateProductRequest",
]
