"""
Cart tools
"""

import logging
from typing import Any, Dict, List

from fakestore_mcp.services.fakestore.api_client import FakeStoreClient
from fakestore_mcp.services.fakestore.errors import ValidationError
from fakestore_mcp.tools.registry import ToolDefinition, id_schema, list_schema, object_schema, prop
from fakestore_mcp.tools.validators import (
    build_list_params,
    validate_positive_integer,
    validate_string,
)

logger = logging.getLogger(__name__)

CART_PRODUCTS_SCHEMA = {
    "type": "array",
    "items": object_schema(
        {
            "productId": prop("integer", "Product ID"),
            "quantity": prop("integer", "Product quantity"),
        },
        required=["productId", "quantity"],
    ),
}


def validate_cart_products(products: Any) -> List[Dict[str, int]]:
    """Check a cart line list and return it as {productId, quantity} dicts"""
    if not isinstance(products, list) or not products:
        raise ValidationError("Products must be a non-empty array")

    lines = []
    for index, item in enumerate(products, 1):
        if not isinstance(item, dict):
            raise ValidationError(f"Product {index}: must be an object with productId and quantity")
        validate_positive_integer(item.get("productId"), f"Product {index}: productId")
        validate_positive_integer(item.get("quantity"), f"Product {index}: quantity")
        lines.append({"productId": item["productId"], "quantity": item["quantity"]})
    return lines


async def get_all_carts(client: FakeStoreClient, args: Dict[str, Any]) -> List[Dict]:
    params = build_list_params(args)
    return await client.get("/carts", params)


async def get_cart_by_id(client: FakeStoreClient, args: Dict[str, Any]) -> Dict:
    cart_id = args.get("id")
    validate_positive_integer(cart_id, "Cart ID")
    return await client.get(f"/carts/{cart_id}")


async def get_user_carts(client: FakeStoreClient, args: Dict[str, Any]) -> List[Dict]:
    user_id = args.get("userId")
    validate_positive_integer(user_id, "User ID")
    return await client.get(f"/carts/user/{user_id}")


async def add_cart(client: FakeStoreClient, args: Dict[str, Any]) -> Dict:
    """Add a cart (simulation).

    Args:
        userId: Owner of the cart
        date: Cart date, e.g. 2024-01-01
        products: Non-empty list of {productId, quantity}
    """
    user_id = args.get("userId")
    validate_positive_integer(user_id, "User ID")
    validate_string(args.get("date"), "Date")
    products = validate_cart_products(args.get("products"))

    logger.info(f"Adding cart: user={user_id}, lines={len(products)}")
    return await client.post("/carts", {
        "userId": user_id,
        "date": args["date"],
        "products": products,
    })


async def update_cart(client: FakeStoreClient, args: Dict[str, Any]) -> Dict:
    cart_id = args.get("id")
    validate_positive_integer(cart_id, "Cart ID")

    body: Dict[str, Any] = {}
    if args.get("userId") is not None:
        validate_positive_integer(args["userId"], "User ID")
        body["userId"] = args["userId"]
    if args.get("date") is not None:
        validate_string(args["date"], "Date")
        body["date"] = args["date"]
    if args.get("products") is not None:
        body["products"] = validate_cart_products(args["products"])

    logger.info(f"Updating cart {cart_id}: fields={sorted(body)}")
    return await client.put(f"/carts/{cart_id}", body)


async def delete_cart(client: FakeStoreClient, args: Dict[str, Any]) -> Dict:
    cart_id = args.get("id")
    validate_positive_integer(cart_id, "Cart ID")
    logger.info(f"Deleting cart {cart_id}")
    return await client.delete(f"/carts/{cart_id}")


cart_tools = [
    ToolDefinition(
        name="fakestore_get_carts",
        description="Get all carts from the store. Optionally limit results and sort.",
        input_schema=list_schema("carts", "Sort carts (asc or desc)"),
        handler=get_all_carts,
    ),
    ToolDefinition(
        name="fakestore_get_cart",
        description="Get a single cart by its ID",
        input_schema=id_schema("Cart ID"),
        handler=get_cart_by_id,
    ),
    ToolDefinition(
        name="fakestore_get_user_carts",
        description="Get all carts belonging to a specific user",
        input_schema=id_schema("User ID", key="userId"),
        handler=get_user_carts,
    ),
    ToolDefinition(
        name="fakestore_add_cart",
        description="Add a new cart (simulation - does not persist)",
        input_schema=object_schema(
            {
                "userId": prop("integer", "User ID who owns the cart"),
                "date": prop("string", "Cart date in ISO format (e.g., 2024-01-01)"),
                "products": dict(CART_PRODUCTS_SCHEMA, description="Array of products in the cart"),
            },
            required=["userId", "date", "products"],
        ),
        handler=add_cart,
    ),
    ToolDefinition(
        name="fakestore_update_cart",
        description="Update an existing cart (simulation - does not persist)",
        input_schema=object_schema(
            {
                "id": prop("integer", "Cart ID to update"),
                "userId": prop("integer", "New user ID"),
                "date": prop("string", "New cart date"),
                "products": dict(CART_PRODUCTS_SCHEMA, description="New products array"),
            },
            required=["id"],
        ),
        handler=update_cart,
    ),
    ToolDefinition(
        name="fakestore_delete_cart",
        description="Delete a cart (simulation - does not persist)",
        input_schema=id_schema("Cart ID to delete"),
        handler=delete_cart,
    ),
]
