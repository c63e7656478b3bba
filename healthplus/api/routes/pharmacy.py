"""Pharmacy routes: product listing, cart and checkout."""

from fastapi import APIRouter, Depends, Query
from fastapi.encoders import jsonable_encoder

from healthplus.api.dependencies import get_context
from healthplus.api.presenters import present_result
from healthplus.api.schemas.portal import CartItemBody, CheckoutBody
from healthplus.application import PortalContext
from healthplus.application.use_cases import (
    AddToCartUseCase,
    CheckoutRequest,
    CheckoutUseCase,
    ClearCartUseCase,
    DecrementCartLineUseCase,
    RemoveFromCartUseCase,
)
from healthplus.domain import selectors

router = APIRouter()


@router.get("/products")
async def list_products(
    category: str | None = Query(None, description="Filter by category, e.g. monitoring"),
    context: PortalContext = Depends(get_context),  # noqa: B008
):
    products = [p for p in context.store.snapshot.products if category is None or p.category == category]
    return {"data": jsonable_encoder(products), "total": len(products)}


@router.get("/cart")
async def get_cart(context: PortalContext = Depends(get_context)):  # noqa: B008
    snapshot = context.store.snapshot
    return {
        "lines": [
            {"product_id": line.product_id, "quantity": line.quantity, "total": line.total}
            for line in selectors.cart_lines(snapshot)
        ],
        "total": selectors.cart_total(snapshot),
        "item_count": selectors.cart_item_count(snapshot),
    }


@router.post("/cart/items")
async def add_to_cart(body: CartItemBody, context: PortalContext = Depends(get_context)):  # noqa: B008
    return present_result(await AddToCartUseCase(context).execute(body.product_id, body.quantity))


@router.post("/cart/items/{product_id}/decrement")
async def decrement_cart_line(product_id: str, context: PortalContext = Depends(get_context)):  # noqa: B008
    return present_result(await DecrementCartLineUseCase(context).execute(product_id))


@router.delete("/cart/items/{product_id}")
async def remove_from_cart(product_id: str, context: PortalContext = Depends(get_context)):  # noqa: B008
    return present_result(await RemoveFromCartUseCase(context).execute(product_id))


@router.delete("/cart")
async def clear_cart(context: PortalContext = Depends(get_context)):  # noqa: B008
    return present_result(await ClearCartUseCase(context).execute())


@router.post("/checkout")
async def checkout(body: CheckoutBody, context: PortalContext = Depends(get_context)):  # noqa: B008
    request = CheckoutRequest(
        address=body.address,
        city=body.city,
        pincode=body.pincode,
        payment_method=body.payment_method,
    )
    return present_result(await CheckoutUseCase(context).execute(request))
