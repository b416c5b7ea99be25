"""
Error handling middleware package for Shop Service.
"""

from .error_handler import ShopServiceErrorHandler, setup_shop_error_handling

__all__ = ["ShopServiceErrorHandler", "setup_shop_error_handling"]
