"""
Product tools
"""

import logging
from typing import Any, Dict, List

from fakestore_mcp.services.fakestore.api_client import FakeStoreClient
from fakestore_mcp.tools.registry import ToolDefinition, id_schema, list_schema, object_schema, prop
from fakestore_mcp.tools.validators import (
    build_list_params,
    sanitize_path_segment,
    validate_positive_integer,
    validate_positive_number,
    validate_string,
    validate_url,
)

logger = logging.getLogger(__name__)

# (argument, label) for the string fields of a product
_TEXT_FIELDS = (
    ("title", "Title"),
    ("description", "Description"),
    ("category", "Category"),
)


async def get_all_products(client: FakeStoreClient, args: Dict[str, Any]) -> List[Dict]:
    """Get all products, optionally limited and sorted"""
    params = build_list_params(args)
    return await client.get("/products", params)


async def get_product_by_id(client: FakeStoreClient, args: Dict[str, Any]) -> Dict:
    product_id = args.get("id")
    validate_positive_integer(product_id, "Product ID")
    return await client.get(f"/products/{product_id}")


async def get_categories(client: FakeStoreClient, args: Dict[str, Any]) -> List[str]:
    return await client.get("/products/categories")


async def get_products_by_category(client: FakeStoreClient, args: Dict[str, Any]) -> List[Dict]:
    category = args.get("category")
    validate_string(category, "Category")
    return await client.get(f"/products/category/{sanitize_path_segment(category)}")


async def add_product(client: FakeStoreClient, args: Dict[str, Any]) -> Dict:
    """Add a product (simulation, the upstream does not persist it).

    Args:
        title: Product title
        price: Positive price
        description: Product description
        image: http(s) image URL
        category: Product category
    """
    validate_string(args.get("title"), "Title")
    validate_positive_number(args.get("price"), "Price")
    validate_string(args.get("description"), "Description")
    validate_url(args.get("image"), "Image URL")
    validate_string(args.get("category"), "Category")

    body = {key: args[key] for key in ("title", "price", "description", "image", "category")}
    logger.info(f"Adding product: title='{body['title']}', category={body['category']}")
    return await client.post("/products", body)


async def update_product(client: FakeStoreClient, args: Dict[str, Any]) -> Dict:
    """Update a product (simulation). Only the supplied fields are validated and sent."""
    product_id = args.get("id")
    validate_positive_integer(product_id, "Product ID")

    body: Dict[str, Any] = {}
    for key, label in _TEXT_FIELDS:
        if args.get(key) is not None:
            validate_string(args[key], label)
            body[key] = args[key]
    if args.get("price") is not None:
        validate_positive_number(args["price"], "Price")
        body["price"] = args["price"]
    if args.get("image") is not None:
        validate_url(args["image"], "Image URL")
        body["image"] = args["image"]

    logger.info(f"Updating product {product_id}: fields={sorted(body)}")
    return await client.put(f"/products/{product_id}", body)


async def delete_product(client: FakeStoreClient, args: Dict[str, Any]) -> Dict:
    product_id = args.get("id")
    validate_positive_integer(product_id, "Product ID")
    logger.info(f"Deleting product {product_id}")
    return await client.delete(f"/products/{product_id}")


product_tools = [
    ToolDefinition(
        name="fakestore_get_products",
        description="Get all products from the store. Optionally limit results and sort by price.",
        input_schema=list_schema("products", "Sort products by price (asc or desc)"),
        handler=get_all_products,
    ),
    ToolDefinition(
        name="fakestore_get_product",
        description="Get a single product by its ID",
        input_schema=id_schema("Product ID"),
        handler=get_product_by_id,
    ),
    ToolDefinition(
        name="fakestore_get_categories",
        description="Get all available product categories",
        input_schema=object_schema({}),
        handler=get_categories,
    ),
    ToolDefinition(
        name="fakestore_get_products_by_category",
        description="Get all products in a specific category",
        input_schema=object_schema(
            {"category": prop("string", "Product category name")},
            required=["category"],
        ),
        handler=get_products_by_category,
    ),
    ToolDefinition(
        name="fakestore_add_product",
        description="Add a new product to the store (simulation - does not persist)",
        input_schema=object_schema(
            {
                "title": prop("string", "Product title"),
                "price": prop("number", "Product price"),
                "description": prop("string", "Product description"),
                "image": prop("string", "Product image URL"),
                "category": prop("string", "Product category"),
            },
            required=["title", "price", "description", "image", "category"],
        ),
        handler=add_product,
    ),
    ToolDefinition(
        name="fakestore_update_product",
        description="Update an existing product (simulation - does not persist)",
        input_schema=object_schema(
            {
                "id": prop("integer", "Product ID to update"),
                "title": prop("string", "New product title"),
                "price": prop("number", "New product price"),
                "description": prop("string", "New product description"),
                "image": prop("string", "New product image URL"),
                "category": prop("string", "New product category"),
            },
            required=["id"],
        ),
        handler=update_product,
    ),
    ToolDefinition(
        name="fakestore_delete_product",
        description="Delete a product (simulation - does not persist)",
        input_schema=id_schema("Product ID to delete"),
        handler=delete_product,
    ),
]
