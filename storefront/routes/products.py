"""Product API routes for the storefront"""

from typing import Optional
from fastapi import APIRouter, HTTPException, Query, Depends

from ..models.product import Product, ProductCategory, ProductListResponse
from ..core.dependencies import Storefront, get_storefront

router = APIRouter(prefix="/api/products", tags=["Products"])


@router.get("", response_model=ProductListResponse)
async def list_products(
    category: Optional[ProductCategory] = Query(None, description="Filter by category"),
    brand: Optional[str] = Query(None, description="Filter by brand"),
    store: Storefront = Depends(get_storefront),
):
    """List catalog products"""
    products = store.products.list_products(category=category, brand=brand)
    return ProductListResponse(products=products, total=len(products))


@router.get("/categories", response_model=list[str])
async def list_categories():
    """List all product categories"""
    return [c.value for c in ProductCategory]


@router.get("/{slug}", response_model=Product)
async def get_product(slug: str, store: Storefront = Depends(get_storefront)):
    """Get a product by slug"""
    product = store.products.get_product(slug)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return product
