"""
Inventory Service

Stock levels for the back-office: per-product status labels, summary cards,
stock updates and the spreadsheet export.
"""
import io
import logging
from decimal import Decimal
from typing import Dict, List, Optional

from openpyxl import Workbook
from openpyxl.styles import Font, PatternFill, Alignment, Border, Side

from storefront.core.config import settings
from storefront.domain.exceptions import NotFoundError
from storefront.domain.product import Product
from storefront.repositories.product_repository import ProductRepository

logger = logging.getLogger(__name__)

OUT_OF_STOCK = "Out of Stock"
LOW_STOCK = "Low Stock"
MEDIUM_STOCK = "Medium Stock"
IN_STOCK = "In Stock"


def stock_status(quantity: int) -> str:
    """Label shown next to a product's stock level"""
    if quantity == 0:
        return OUT_OF_STOCK
    if quantity < settings.LOW_STOCK_THRESHOLD:
        return LOW_STOCK
    if quantity < settings.MEDIUM_STOCK_THRESHOLD:
        return MEDIUM_STOCK
    return IN_STOCK


def stock_value(product: Product) -> Decimal:
    return product.price * product.stock_quantity


def stock_row(product: Product) -> Dict:
    return {
        "id": product.id,
        "name": product.name,
        "slug": product.slug,
        "category": product.category.name if product.category else "N/A",
        "price": float(product.price),
        "stock_quantity": product.stock_quantity,
        "status": stock_status(product.stock_quantity),
        "stock_value": float(stock_value(product)),
    }


def stock_summary(products: List[Product]) -> Dict:
    """Totals for the stock page cards"""
    return {
        "total_products": len(products),
        "out_of_stock": sum(1 for p in products if p.stock_quantity == 0),
        "low_stock": sum(1 for p in products if 0 < p.stock_quantity < settings.LOW_STOCK_THRESHOLD),
        "total_stock_value": float(sum((stock_value(p) for p in products), Decimal("0"))),
    }


class InventoryService:
    """Service for inventory business logic"""

    def __init__(self, product_repo: Optional[ProductRepository] = None):
        self.product_repo = product_repo or ProductRepository()

    def get_stock_levels(self) -> Dict:
        products = self.product_repo.find_active()
        return {
            "summary": stock_summary(products),
            "products": [stock_row(p) for p in products],
        }

    def update_stock(self, product_id: str, stock_quantity: int) -> Product:
        product = self.product_repo.update_stock(product_id, stock_quantity)
        if not product:
            raise NotFoundError(f"Product {product_id} not found")

        logger.info(f"Stock for {product.name} set to {stock_quantity}")
        return product

    def export_stock_workbook(self) -> io.BytesIO:
        """Stock table as an .xlsx workbook"""
        products = self.product_repo.find_active()

        wb = Workbook()
        ws = wb.active
        ws.title = "Stock"

        header_fill = PatternFill(start_color="366092", end_color="366092", fill_type="solid")
        header_font = Font(color="FFFFFF", bold=True, size=12)
        border = Border(
            left=Side(style='thin'),
            right=Side(style='thin'),
            top=Side(style='thin'),
            bottom=Side(style='thin')
        )

        headers = ["Product", "Category", "Price", "Stock", "Status", "Value"]
        for col_num, header in enumerate(headers, 1):
            cell = ws.cell(row=1, column=col_num, value=header)
            cell.fill = header_fill
            cell.font = header_font
            cell.alignment = Alignment(horizontal='center', vertical='center')
            cell.border = border

        for row_num, product in enumerate(products, 2):
            row = stock_row(product)
            data = [
                row["name"],
                row["category"],
                row["price"],
                row["stock_quantity"],
                row["status"],
                row["stock_value"],
            ]

            for col_num, value in enumerate(data, 1):
                cell = ws.cell(row=row_num, column=col_num, value=value)
                cell.border = border
                cell.alignment = Alignment(horizontal='left', vertical='center')

                if col_num in [3, 6]:
                    cell.alignment = Alignment(horizontal='right', vertical='center')
                    cell.number_format = '#,##0.00'
                elif col_num == 4:
                    cell.alignment = Alignment(horizontal='right', vertical='center')
                    cell.number_format = '#,##0'

        ws.column_dimensions['A'].width = 40
        ws.column_dimensions['B'].width = 20
        ws.column_dimensions['C'].width = 14
        ws.column_dimensions['D'].width = 10
        ws.column_dimensions['E'].width = 16
        ws.column_dimensions['F'].width = 16

        # Freeze header row
        ws.freeze_panes = 'A2'

        excel_file = io.BytesIO()
        wb.save(excel_file)
        excel_file.seek(0)

        return excel_file
