"""
Domain-level exceptions

User-input problems raised by services. The API layer turns them into 400/404
responses whose detail is the message shown to the shopper or admin.
"""


class StorefrontError(ValueError):
    """Base class for user-facing validation errors"""


class NotFoundError(StorefrontError):
    """A requested record does not exist"""


class CheckoutError(StorefrontError):
    """The checkout form or cart cannot be turned into an order"""


class ProductFormError(StorefrontError):
    """The admin product form failed validation"""


class SignUpError(StorefrontError):
    """The sign-up form failed validation or the account could not be created"""


class AuthenticationError(StorefrontError):
    """Sign in failed"""


class CartError(StorefrontError):
    """The product cannot be put in the cart"""
