"""Order tracking API endpoints."""

from fastapi import APIRouter
from pydantic import BaseModel, Field

from nuggets.core.modules.order.models import Order, OrderPatch
from nuggets.web.deps import AppDep, AuthTokenDep
from nuggets.web.openapi import ErrorResponse, OkResponse

router: APIRouter = APIRouter(tags=["orders"])


class CreateOrderRequest(BaseModel):
    """Request to create a new order."""

    client: str = Field("", description="Client name, required")
    title: str = Field("", description="Commission title, required")
    status: str | None = Field(None, description="Initial status, defaults to 'Queued'")


class OrderListResponse(BaseModel):
    ok: bool = True
    orders: list[Order]


class OrderResponse(BaseModel):
    ok: bool = True
    order: Order


@router.get(
    "/api/orders",
    summary="List orders",
    description="Get every order, newest first. Requires a client or admin session.",
    operation_id="listOrders",
    responses={
        200: {"description": "All orders"},
        401: {"model": ErrorResponse, "description": "Not authenticated"},
    },
)
async def list_orders(app: AppDep, auth_token: AuthTokenDep) -> OrderListResponse:
    return OrderListResponse(orders=await app.get_orders(auth_token))


@router.post(
    "/api/orders",
    summary="Create order",
    description="Add a new order at the top of the board. Admin only.",
    operation_id="createOrder",
    status_code=201,
    responses={
        201: {"description": "Order created"},
        400: {"model": ErrorResponse, "description": "Missing client or title"},
        401: {"model": ErrorResponse, "description": "Admin session required"},
    },
)
async def create_order(request: CreateOrderRequest, app: AppDep, auth_token: AuthTokenDep) -> OrderResponse:
    order = await app.create_order(auth_token, request.client, request.title, request.status)
    return OrderResponse(order=order)


@router.patch(
    "/api/orders/{order_id}",
    summary="Update order",
    description="Update any subset of client, title and status. The timestamp is always refreshed. Admin only.",
    operation_id="updateOrder",
    responses={
        200: {"description": "Order updated"},
        400: {"model": ErrorResponse, "description": "Empty client or title"},
        401: {"model": ErrorResponse, "description": "Admin session required"},
        404: {"model": ErrorResponse, "description": "Order not found"},
    },
)
async def update_order(order_id: str, patch: OrderPatch, app: AppDep, auth_token: AuthTokenDep) -> OrderResponse:
    return OrderResponse(order=await app.update_order(auth_token, order_id, patch))


@router.delete(
    "/api/orders/{order_id}",
    summary="Delete order",
    description="Permanently delete an order. Admin only.",
    operation_id="deleteOrder",
    responses={
        200: {"description": "Order deleted"},
        401: {"model": ErrorResponse, "description": "Admin session required"},
        404: {"model": ErrorResponse, "description": "Order not found"},
    },
)
async def delete_order(order_id: str, app: AppDep, auth_token: AuthTokenDep) -> OkResponse:
    await app.delete_order(auth_token, order_id)
    return OkResponse()
