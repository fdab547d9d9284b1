"""Home-trial API routes for the storefront"""

from typing import Optional
from fastapi import APIRouter, HTTPException, Depends

from ..models.trial import AddToTrialRequest, TrialResponse
from ..core.dependencies import Storefront, get_storefront

router = APIRouter(prefix="/api/trial", tags=["Home Trial"])


def trial_response(
    store: Storefront,
    added: Optional[bool] = None,
    message: Optional[str] = None,
) -> TrialResponse:
    trial = store.trial
    return TrialResponse(
        items=trial.items,
        item_count=trial.item_count,
        is_valid_trial=trial.is_valid_trial,
        phase=trial.phase,
        selection_message=trial.selection_message,
        added=added,
        message=message,
    )


@router.get("", response_model=TrialResponse)
async def get_trial(store: Storefront = Depends(get_storefront)):
    """Get the home-trial bag"""
    return trial_response(store)


@router.post("/items", response_model=TrialResponse)
async def add_to_trial(
    request: AddToTrialRequest,
    store: Storefront = Depends(get_storefront),
):
    """
    Add an item to the home-trial bag.

    A full bag or a repeated product and size is not an error: the bag is
    returned unchanged with added=false and a message for the buyer.
    """
    product = store.products.get_product(request.slug)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")

    if not product.offers_size(request.size):
        raise HTTPException(
            status_code=400,
            detail=f"Size {request.size} not available. Available: {', '.join(product.sizes)}",
        )

    was_full = store.trial.is_full
    if store.trial.add_to_trial(product, request.size):
        message = f"Added {product.name} ({request.size}) to Home Trial bag"
        return trial_response(store, added=True, message=message)

    if was_full:
        message = f"Maximum {store.trial.max_items} items allowed for Home Trial"
    else:
        message = f"{product.name} ({request.size}) is already in your Home Trial bag"
    return trial_response(store, added=False, message=message)


@router.delete("/items/{product_id}/{size}", response_model=TrialResponse)
async def remove_from_trial(
    product_id: str,
    size: str,
    store: Storefront = Depends(get_storefront),
):
    """Remove an item from the home-trial bag"""
    removed = store.trial.remove_from_trial(product_id, size)
    return trial_response(store, message="Item removed" if removed else "Item not in bag")


@router.delete("", response_model=TrialResponse)
async def clear_trial(store: Storefront = Depends(get_storefront)):
    """Empty the home-trial bag"""
    store.trial.clear_trial()
    return trial_response(store, message="Home Trial bag cleared")
