"""Mock product catalog"""

from typing import Any, Optional
from ..models.product import Product, ProductCategory

APPAREL_SIZES = ["XS", "S", "M", "L", "XL"]

# Catalog records arrive with display prices; Product normalizes them.
CATALOG: list[dict[str, Any]] = [
    {
        "id": "prod-001",
        "name": "Banarasi Silk Saree",
        "brand": "Kashi Weaves",
        "slug": "banarasi-silk-saree",
        "description": "Handwoven pure silk with zari border.",
        "category": ProductCategory.SAREES,
        "image_url": "/images/banarasi-saree.jpg",
        "sizes": ["Free Size"],
        "price": "₹2,500",
        "original_price": "₹3,200",
    },
    {
        "id": "prod-002",
        "name": "Chanderi Anarkali Kurta",
        "brand": "Rangmanch",
        "slug": "chanderi-anarkali-kurta",
        "description": "Flared chanderi kurta with gota detailing.",
        "category": ProductCategory.KURTAS,
        "image_url": "/images/anarkali-kurta.jpg",
        "sizes": APPAREL_SIZES,
        "price": "₹1,899",
        "original_price": "₹2,499",
    },
    {
        "id": "prod-003",
        "name": "Mirrorwork Bridal Lehenga",
        "brand": "Gulmohar",
        "slug": "mirrorwork-bridal-lehenga",
        "description": "Raw silk lehenga with hand mirrorwork and net dupatta.",
        "category": ProductCategory.LEHENGAS,
        "image_url": "/images/bridal-lehenga.jpg",
        "sizes": APPAREL_SIZES,
        "price": "₹18,500",
        "original_price": "₹22,000",
    },
    {
        "id": "prod-004",
        "name": "Ivory Brocade Sherwani",
        "brand": "Nawabi",
        "slug": "ivory-brocade-sherwani",
        "description": "Brocade sherwani with churidar and stole.",
        "category": ProductCategory.SHERWANIS,
        "image_url": "/images/brocade-sherwani.jpg",
        "sizes": ["38", "40", "42", "44"],
        "price": "₹12,999",
    },
    {
        "id": "prod-005",
        "name": "Block Print Cotton Kurta",
        "brand": "Indigo Lane",
        "slug": "block-print-cotton-kurta",
        "description": "Hand block printed cotton, everyday fit.",
        "category": ProductCategory.KURTAS,
        "image_url": "/images/cotton-kurta.jpg",
        "sizes": APPAREL_SIZES,
        "price": 899,
        "original_price": 1199,
    },
    {
        "id": "prod-006",
        "name": "Kundan Jhumka Earrings",
        "brand": "Meenakari House",
        "slug": "kundan-jhumka-earrings",
        "description": "Gold-plated kundan jhumkas with pearl drops.",
        "category": ProductCategory.ACCESSORIES,
        "image_url": "/images/kundan-jhumka.jpg",
        "sizes": [],
        "price": "₹1,250.00",
    },
    {
        "id": "prod-007",
        "name": "Kanjeevaram Silk Saree",
        "brand": "Kashi Weaves",
        "slug": "kanjeevaram-silk-saree",
        "description": "Temple border Kanjeevaram in pure mulberry silk.",
        "category": ProductCategory.SAREES,
        "image_url": "/images/kanjeevaram-saree.jpg",
        "sizes": ["Free Size"],
        "price": "₹7,800",
        "original_price": "₹9,500",
    },
    {
        "id": "prod-008",
        "name": "Embroidered Nehru Jacket",
        "brand": "Nawabi",
        "slug": "embroidered-nehru-jacket",
        "description": "Jacquard Nehru jacket with thread embroidery.",
        "category": ProductCategory.SHERWANIS,
        "image_url": "/images/nehru-jacket.jpg",
        "sizes": ["38", "40", "42", "44"],
        "price": "₹3,499",
    },
    {
        "id": "prod-009",
        "name": "Phulkari Dupatta",
        "brand": "Rangmanch",
        "slug": "phulkari-dupatta",
        "description": "Hand embroidered Phulkari on georgette.",
        "category": ProductCategory.ACCESSORIES,
        "image_url": "/images/phulkari-dupatta.jpg",
        "sizes": [],
        "price": "₹1,150",
    },
    {
        "id": "prod-010",
        "name": "Pastel Organza Lehenga",
        "brand": "Gulmohar",
        "slug": "pastel-organza-lehenga",
        "description": "Lightweight organza lehenga for day functions.",
        "category": ProductCategory.LEHENGAS,
        "image_url": "/images/organza-lehenga.jpg",
        "sizes": APPAREL_SIZES,
        "price": "₹9,999",
        "original_price": "₹12,499",
        "in_stock": False,
    },
]


class ProductDatabase:
    """In-memory product catalog keyed by slug"""

    def __init__(self, records: Optional[list[dict[str, Any]]] = None):
        self.products: dict[str, Product] = {}
        for record in records if records is not None else CATALOG:
            product = Product(**record)
            self.products[product.slug] = product

    def get_product(self, slug: str) -> Optional[Product]:
        """Get a product by slug"""
        return self.products.get(slug)

    def get_product_by_id(self, product_id: str) -> Optional[Product]:
        return next((p for p in self.products.values() if p.id == product_id), None)

    def list_products(
        self,
        category: Optional[ProductCategory] = None,
        brand: Optional[str] = None,
    ) -> list[Product]:
        """List products, optionally filtered"""
        results = list(self.products.values())

        if category:
            results = [p for p in results if p.category == category]

        if brand:
            brand_lower = brand.lower()
            results = [p for p in results if p.brand.lower() == brand_lower]

        return results
