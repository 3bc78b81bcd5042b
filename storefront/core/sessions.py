# storefront/core/sessions.py
import uuid

from fastapi import Request

# Key inside the signed session cookie (SessionMiddleware)
CART_SESSION_KEY = "cart_session_id"


def get_cart_session_id(request: Request) -> str:
    """
    FastAPI dependency returning the opaque cart session key.

    A new random key is issued on first use and stored in the session
    cookie, so later requests from the same browser share the cart.
    """
    session_id = request.session.get(CART_SESSION_KEY)
    if not session_id:
        session_id = str(uuid.uuid4())
        request.session[CART_SESSION_KEY] = session_id
    return session_id
