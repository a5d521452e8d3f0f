"""
Share Service

Links and ready-to-paste texts for sharing a product on social media or
asking about it over WhatsApp.
"""
from urllib.parse import quote

from storefront.core.config import settings
from storefront.domain.product import Product
from storefront.services.catalog_service import format_price

FACEBOOK_SHARER_URL = "https://www.facebook.com/sharer/sharer.php?u="
WHATSAPP_URL = "https://wa.me/?text="


def product_url(product: Product) -> str:
    return f"{settings.PUBLIC_SITE_URL.rstrip('/')}/product/{product.slug}"


def facebook_post_text(product: Product) -> str:
    url = product_url(product)
    return (
        f"Check out {product.name}!\n\n"
        f"Price: {settings.CURRENCY_LABEL} {product.price:.2f}\n\n"
        f"{product.description or ''}\n\n"
        f"Shop now: {url}"
    )


def facebook_share_url(product: Product) -> str:
    return FACEBOOK_SHARER_URL + quote(product_url(product), safe="")


def whatsapp_inquiry_text(product: Product) -> str:
    return (
        f"Hi! I'm interested in {product.name}\n"
        f"Price: {format_price(product.price)}\n"
        f"Link: {product_url(product)}"
    )


def share_links(product: Product) -> dict:
    """Everything the product page and the stock table offer for sharing"""
    inquiry = whatsapp_inquiry_text(product)
    return {
        "product_url": product_url(product),
        "facebook_post_text": facebook_post_text(product),
        "facebook_share_url": facebook_share_url(product),
        "whatsapp_text": inquiry,
        "whatsapp_url": WHATSAPP_URL + quote(inquiry, safe=""),
    }
