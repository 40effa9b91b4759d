from .user import User
from .store import Store, StoreStatus
from .product import Product

__all__ = ['User', 'Store', 'StoreStatus', 'Product']
