"""
User tools

Users are accepted as flat arguments and sent upstream with nested
name / address / geolocation objects.
"""

import logging
from typing import Any, Dict, List

from fakestore_mcp.services.fakestore.api_client import FakeStoreClient
from fakestore_mcp.tools.registry import ToolDefinition, id_schema, list_schema, object_schema, prop
from fakestore_mcp.tools.validators import (
    build_list_params,
    validate_email,
    validate_positive_integer,
    validate_string,
)

logger = logging.getLogger(__name__)

ACCOUNT_FIELDS = ("email", "username", "password", "phone")
NAME_FIELDS = ("firstname", "lastname")
ADDRESS_FIELDS = ("city", "street", "number", "zipcode")
GEOLOCATION_FIELDS = ("lat", "long")

USER_FIELDS = (
    "email", "username", "password",
    "firstname", "lastname",
    "city", "street", "number", "zipcode",
    "lat", "long",
    "phone",
)

# Human readable labels used in validation messages
LABELS = {
    "email": "Email",
    "username": "Username",
    "password": "Password",
    "phone": "Phone",
    "firstname": "First name",
    "lastname": "Last name",
    "city": "City",
    "street": "Street",
    "number": "Street number",
    "zipcode": "ZIP code",
    "lat": "Latitude",
    "long": "Longitude",
}

FIELD_DESCRIPTIONS = {
    "email": "User email address",
    "username": "Username",
    "password": "User password",
    "firstname": "First name",
    "lastname": "Last name",
    "city": "City",
    "street": "Street name",
    "number": "Street number",
    "zipcode": "ZIP code",
    "lat": "Latitude",
    "long": "Longitude",
    "phone": "Phone number",
}


def _validate_field(key: str, value: Any):
    if key == "email":
        validate_email(value)
    elif key == "number":
        validate_positive_integer(value, LABELS[key])
    else:
        validate_string(value, LABELS[key])


def _pick(args: Dict[str, Any], keys) -> Dict[str, Any]:
    return {key: args[key] for key in keys if args.get(key) is not None}


def build_user_body(args: Dict[str, Any]) -> Dict[str, Any]:
    """Nest the supplied flat fields the way the upstream stores users.

    Absent fields are left out at every level, so a partial argument bag
    gives a partial body.
    """
    body = _pick(args, ACCOUNT_FIELDS)

    name = _pick(args, NAME_FIELDS)
    if name:
        body["name"] = name

    address = _pick(args, ADDRESS_FIELDS)
    geolocation = _pick(args, GEOLOCATION_FIELDS)
    if geolocation:
        address["geolocation"] = geolocation
    if address:
        body["address"] = address

    return body


async def get_all_users(client: FakeStoreClient, args: Dict[str, Any]) -> List[Dict]:
    params = build_list_params(args)
    return await client.get("/users", params)


async def get_user_by_id(client: FakeStoreClient, args: Dict[str, Any]) -> Dict:
    user_id = args.get("id")
    validate_positive_integer(user_id, "User ID")
    return await client.get(f"/users/{user_id}")


async def add_user(client: FakeStoreClient, args: Dict[str, Any]) -> Dict:
    """Add a user (simulation). Every field is required."""
    for key in USER_FIELDS:
        _validate_field(key, args.get(key))

    logger.info(f"Adding user: username='{args['username']}'")
    return await client.post("/users", build_user_body(args))


async def update_user(client: FakeStoreClient, args: Dict[str, Any]) -> Dict:
    """Update a user (simulation). Only the supplied fields are validated and sent."""
    user_id = args.get("id")
    validate_positive_integer(user_id, "User ID")

    for key in USER_FIELDS:
        if args.get(key) is not None:
            _validate_field(key, args[key])

    body = build_user_body(args)
    logger.info(f"Updating user {user_id}: fields={sorted(body)}")
    return await client.put(f"/users/{user_id}", body)


async def delete_user(client: FakeStoreClient, args: Dict[str, Any]) -> Dict:
    user_id = args.get("id")
    validate_positive_integer(user_id, "User ID")
    logger.info(f"Deleting user {user_id}")
    return await client.delete(f"/users/{user_id}")


def _user_properties(prefix: str = "") -> Dict[str, Any]:
    properties = {}
    for key in USER_FIELDS:
        description = FIELD_DESCRIPTIONS[key]
        if prefix:
            # keep acronyms such as "ZIP" intact
            if not description[:2].isupper():
                description = description[0].lower() + description[1:]
            description = f"{prefix} {description}"
        properties[key] = prop("integer" if key == "number" else "string", description)
    return properties


user_tools = [
    ToolDefinition(
        name="fakestore_get_users",
        description="Get all users from the store. Optionally limit results and sort.",
        input_schema=list_schema("users", "Sort users (asc or desc)"),
        handler=get_all_users,
    ),
    ToolDefinition(
        name="fakestore_get_user",
        description="Get a single user by their ID",
        input_schema=id_schema("User ID"),
        handler=get_user_by_id,
    ),
    ToolDefinition(
        name="fakestore_add_user",
        description="Add a new user (simulation - does not persist)",
        input_schema=object_schema(_user_properties(), required=list(USER_FIELDS)),
        handler=add_user,
    ),
    ToolDefinition(
        name="fakestore_update_user",
        description="Update an existing user (simulation - does not persist)",
        input_schema=object_schema(
            {"id": prop("integer", "User ID to update"), **_user_properties(prefix="New")},
            required=["id"],
        ),
        handler=update_user,
    ),
    ToolDefinition(
        name="fakestore_delete_user",
        description="Delete a user (simulation - does not persist)",
        input_schema=id_schema("User ID to delete"),
        handler=delete_user,
    ),
]
