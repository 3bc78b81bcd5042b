# storefront/routers/cart.py
import uuid

from fastapi import APIRouter, Depends, Response, status
from sqlmodel import Session

from storefront.core.sessions import get_cart_session_id
from storefront.database import get_session
from storefront.repositories.cart_repo import CartRepository
from storefront.repositories.product_repo import ProductRepository
from storefront.schemas.cart import (
    CartItemCreate,
    CartItemRead,
    CartItemUpdate,
    CartItemWithProduct,
    CartSummary,
)
from storefront.services.cart_service import CartService

router = APIRouter(prefix="/cart", tags=["Cart"])

cart_repo = CartRepository()
product_repo = ProductRepository()
service = CartService(cart_repo, product_repo)


@router.get("", response_model=list[CartItemWithProduct])
def get_cart(
    session: Session = Depends(get_session),
    session_id: str = Depends(get_cart_session_id),
):
    """
    List the items in the current browser session's cart.

    Items whose product was deleted or deactivated have `product: null`.
    """
    return service.list_items(session, session_id)


@router.get("/summary", response_model=CartSummary)
def get_cart_summary(
    session: Session = Depends(get_session),
    session_id: str = Depends(get_cart_session_id),
):
    """
    Cart items plus `item_count` and `total` priced at current product prices.
    """
    return service.get_summary(session, session_id)


@router.post("", response_model=CartItemRead, status_code=status.HTTP_201_CREATED)
def add_to_cart(
    payload: CartItemCreate,
    session: Session = Depends(get_session),
    session_id: str = Depends(get_cart_session_id),
):
    """
    Add a product to the cart.

    Adding a product that is already in the cart increases its quantity.
    Returns the stored cart row.
    """
    return service.add_item(session, session_id, payload.product_id, payload.quantity)


@router.put("/{product_id}", response_model=CartItemRead)
def update_cart_item(
    product_id: uuid.UUID,
    payload: CartItemUpdate,
    session: Session = Depends(get_session),
    session_id: str = Depends(get_cart_session_id),
):
    """
    Set the quantity of a product in the cart.

    404 if the product is not in the cart.
    """
    return service.update_quantity(
        session=session,
        session_id=session_id,
        product_id=product_id,
        quantity=payload.quantity,
    )


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_cart_item(
    product_id: uuid.UUID,
    session: Session = Depends(get_session),
    session_id: str = Depends(get_cart_session_id),
):
    """
    Remove a product from the cart (no error if it is not there).
    """
    service.remove_item(session, session_id, product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
def clear_cart(
    session: Session = Depends(get_session),
    session_id: str = Depends(get_cart_session_id),
):
    """
    Clear the entire cart.
    """
    service.clear_cart(session, session_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
