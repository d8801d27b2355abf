from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Awaitable, Callable

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field
from returns.result import Success

from foodhub_cart.adapters.outbound.session_identity import SessionIdentityProvider
from foodhub_cart.core.domain.model.cart import CartSnapshot
from foodhub_cart.core.domain.model.errors import (
    CartError,
    CatalogError,
    MenuItemNotFound,
    NotAuthenticated,
    RestaurantNotFound,
    SubmissionError,
    SubmissionInProgress,
    SubmissionTimeout,
    ValidationError,
)
from foodhub_cart.core.domain.model.identity import Identity
from foodhub_cart.core.domain.model.menu import MenuItem, Restaurant
from foodhub_cart.core.domain.model.submission import OrderStatus
from foodhub_cart.core.ports.inbound.browse_menu import (
    BrowseMenuUseCase,
    GetRestaurantQuery,
)
from foodhub_cart.core.ports.inbound.manage_cart import (
    AddItemCommand,
    ManageCartUseCase,
    SetQuantityCommand,
)
from foodhub_cart.core.ports.inbound.submit_order import (
    SubmissionView,
    SubmitOrderUseCase,
)

# ---- HTTP DTOs (adapter layer) ---------------------------------------------


class MenuItemOut(BaseModel):
    id: int
    name: str
    price: str
    description: str | None = None


class RestaurantSummaryOut(BaseModel):
    id: int
    name: str
    cuisine: str
    location: str
    rating: str | None = None


class RestaurantOut(RestaurantSummaryOut):
    menu: list[MenuItemOut]


class AddItemRequest(BaseModel):
    restaurant_id: int = Field(gt=0, examples=[1])
    menu_item_id: int = Field(gt=0, examples=[2])


class SetQuantityRequest(BaseModel):
    # zero or below removes the line
    quantity: int = Field(examples=[3])


class LineItemOut(BaseModel):
    id: int
    name: str
    price: str
    quantity: int
    line_total: str


class CartOut(BaseModel):
    items: list[LineItemOut]
    subtotal: str
    item_count: int
    currency: str


class OrderStatusOut(BaseModel):
    kind: str
    message: str


class SubmissionOut(BaseModel):
    state: str
    status: OrderStatusOut | None = None


class CheckoutResponse(SubmissionOut):
    order_id: str


class LoginRequest(BaseModel):
    user_id: str = Field(min_length=1, examples=["u-1"])
    name: str = Field(min_length=1, examples=["Asha"])
    token: str | None = None


class ErrorResponse(BaseModel):
    type: str
    message: str
    details: list[dict[str, Any]] | None = None


# ---- mapping helpers -------------------------------------------------------


def _map_error_to_http(err: CartError) -> tuple[int, ErrorResponse]:
    body = ErrorResponse(type=type(err).__name__, message=str(err))

    if isinstance(err, NotAuthenticated):
        return 401, body
    if isinstance(err, ValidationError):
        return 400, body
    if isinstance(err, (RestaurantNotFound, MenuItemNotFound)):
        return 404, body
    if isinstance(err, SubmissionInProgress):
        return 409, body
    if isinstance(err, SubmissionTimeout):
        return 504, body
    if isinstance(err, (SubmissionError, CatalogError)):
        return 502, body
    return 500, body


def _menu_item_out(item: MenuItem) -> MenuItemOut:
    return MenuItemOut(
        id=item.id,
        name=item.name,
        price=str(item.price.amount),
        description=item.description,
    )


def _restaurant_summary(r: Restaurant) -> RestaurantSummaryOut:
    return RestaurantSummaryOut(
        id=r.id,
        name=r.name,
        cuisine=r.cuisine,
        location=r.location,
        rating=str(r.rating) if r.rating is not None else None,
    )


def _restaurant_out(r: Restaurant) -> RestaurantOut:
    return RestaurantOut(
        **_restaurant_summary(r).model_dump(),
        menu=[_menu_item_out(mi) for mi in r.menu],
    )


def _cart_out(snapshot: CartSnapshot) -> CartOut:
    return CartOut(
        items=[
            LineItemOut(
                id=it.id,
                name=it.name,
                price=str(it.price.amount),
                quantity=it.quantity,
                line_total=str(it.line_total().amount),
            )
            for it in snapshot.items
        ],
        subtotal=str(snapshot.subtotal.amount),
        item_count=snapshot.item_count,
        currency=snapshot.subtotal.currency,
    )


def _status_out(status: OrderStatus | None) -> OrderStatusOut | None:
    if status is None:
        return None
    return OrderStatusOut(kind=status.kind.value, message=status.message)


def _submission_out(view: SubmissionView) -> SubmissionOut:
    return SubmissionOut(state=view.state.value, status=_status_out(view.status))


# ---- app factory -----------------------------------------------------------


def create_app(
    browse_menu_uc: BrowseMenuUseCase,
    manage_cart_uc: ManageCartUseCase,
    submit_order_uc: SubmitOrderUseCase,
    identity: SessionIdentityProvider,
    on_shutdown: Callable[[], Awaitable[None]] | None = None,
) -> FastAPI:
    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        yield
        if on_shutdown is not None:
            await on_shutdown()

    app = FastAPI(title="foodhub_cart", lifespan=lifespan)

    # --- exception handlers -------------------------------------------------

    @app.exception_handler(CartError)
    async def handle_domain_error(_: Request, exc: CartError) -> JSONResponse:
        status, body = _map_error_to_http(exc)
        return JSONResponse(status_code=status, content=body.model_dump())

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        _: Request, exc: RequestValidationError
    ) -> JSONResponse:
        body = ErrorResponse(
            type="RequestValidationError",
            message="invalid request",
            details=[{"loc": list(e["loc"]), "msg": e["msg"]} for e in exc.errors()],
        )
        return JSONResponse(status_code=400, content=body.model_dump())

    @app.exception_handler(Exception)
    async def handle_unexpected(_: Request, exc: Exception) -> JSONResponse:
        body = ErrorResponse(type=type(exc).__name__, message="internal server error")
        return JSONResponse(status_code=500, content=body.model_dump())

    # --- routes: catalog ----------------------------------------------------
    # every handler is async so the cart and session are only touched on the loop

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/restaurants", response_model=list[RestaurantSummaryOut])
    async def list_restaurants() -> Any:
        result = await browse_menu_uc.list_restaurants()
        if isinstance(result, Success):
            return [_restaurant_summary(r) for r in result.unwrap()]
        raise result.failure()

    @app.get(
        "/restaurants/{restaurant_id}",
        response_model=RestaurantOut,
        responses={404: {"model": ErrorResponse}, 502: {"model": ErrorResponse}},
    )
    async def get_restaurant(restaurant_id: int) -> Any:
        result = await browse_menu_uc.get_restaurant(
            GetRestaurantQuery(restaurant_id=restaurant_id)
        )
        if isinstance(result, Success):
            return _restaurant_out(result.unwrap())
        raise result.failure()

    # --- routes: cart -------------------------------------------------------

    @app.get("/cart", response_model=CartOut)
    async def view_cart() -> Any:
        return _cart_out(manage_cart_uc.view())

    @app.post(
        "/cart/items",
        response_model=CartOut,
        responses={404: {"model": ErrorResponse}},
    )
    async def add_item(req: AddItemRequest) -> Any:
        result = await manage_cart_uc.add_item(
            AddItemCommand(
                restaurant_id=req.restaurant_id, menu_item_id=req.menu_item_id
            )
        )
        if isinstance(result, Success):
            return _cart_out(result.unwrap())
        raise result.failure()

    @app.put("/cart/items/{menu_item_id}", response_model=CartOut)
    async def set_quantity(menu_item_id: int, req: SetQuantityRequest) -> Any:
        snapshot = manage_cart_uc.set_quantity(
            SetQuantityCommand(menu_item_id=menu_item_id, quantity=req.quantity)
        )
        return _cart_out(snapshot)

    @app.delete("/cart/items/{menu_item_id}", response_model=CartOut)
    async def remove_item(menu_item_id: int) -> Any:
        return _cart_out(manage_cart_uc.remove_item(menu_item_id))

    # --- routes: checkout ---------------------------------------------------

    @app.post(
        "/cart/checkout",
        response_model=CheckoutResponse,
        status_code=201,
        responses={
            400: {"model": ErrorResponse},
            401: {"model": ErrorResponse},
            409: {"model": ErrorResponse},
            502: {"model": ErrorResponse},
            504: {"model": ErrorResponse},
        },
    )
    async def checkout() -> Any:
        result = await submit_order_uc.submit()
        if isinstance(result, Success):
            view = _submission_out(submit_order_uc.view())
            return CheckoutResponse(
                **view.model_dump(), order_id=result.unwrap().order_id
            )
        raise result.failure()

    @app.get("/cart/status", response_model=SubmissionOut)
    async def order_status() -> Any:
        return _submission_out(submit_order_uc.view())

    # --- routes: session ----------------------------------------------------

    @app.post("/session/login", status_code=204)
    async def login(req: LoginRequest) -> None:
        identity.login(Identity(user_id=req.user_id, name=req.name, token=req.token))

    @app.post("/session/logout", status_code=204)
    async def logout() -> None:
        identity.logout()

    return app
