"""
Repository Layer - Data Access

This layer wraps every Supabase table call and returns domain models.
Repositories keep query-builder details out of business logic.

Author: FastDeal
Date: 2026-10-19
"""
from storefront.repositories.product_repository import ProductRepository
from storefront.repositories.category_repository import CategoryRepository
from storefront.repositories.order_repository import OrderRepository
from storefront.repositories.profile_repository import ProfileRepository
from storefront.repositories.user_role_repository import UserRoleRepository

__all__ = [
    'ProductRepository',
    'CategoryRepository',
    'OrderRepository',
    'ProfileRepository',
    'UserRoleRepository',
]
