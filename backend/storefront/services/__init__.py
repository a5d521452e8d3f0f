"""
Service Layer - storefront and back-office operations
"""
