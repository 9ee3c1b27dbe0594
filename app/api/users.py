"""
app/api/users.py

Purpose: Users resource routes

- Binds HTTP verbs and paths to UserController methods
- Reads raw JSON bodies so field validation stays in the service
- /users/stats is declared before /users/{user_id}
"""

import json
from typing import Any, Dict

from fastapi import APIRouter, Depends, Request

from app.api.user_controller import UserController
from app.core.exceptions import InvalidJSONError
from app.core.logging import get_logger

logger = get_logger(__name__)
router = APIRouter()


def get_user_controller(request: Request) -> UserController:
    """
    Returns the controller wired up by the application factory.
    """
    return request.app.state.user_controller


async def read_json_object(request: Request) -> Dict[str, Any]:
    """
    Parses the request body as a JSON object. An empty body is an empty object.

    Raises:
        InvalidJSONError: If the body is not valid JSON or not an object
    """
    body = await request.body()
    if not body.strip():
        return {}

    try:
        payload = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.warning(f"Rejected malformed JSON body: {e}")
        raise InvalidJSONError()

    if not isinstance(payload, dict):
        logger.warning(f"Rejected non-object JSON body: {type(payload).__name__}")
        raise InvalidJSONError()

    return payload


@router.get("/health")
async def health_check(controller: UserController = Depends(get_user_controller)):
    return await controller.health_check()


@router.get("/users/stats")
async def get_user_stats(controller: UserController = Depends(get_user_controller)):
    return await controller.get_user_stats()


@router.get("/users")
async def get_all_users(controller: UserController = Depends(get_user_controller)):
    return await controller.get_all_users()


@router.get("/users/{user_id}")
async def get_user(user_id: str, controller: UserController = Depends(get_user_controller)):
    return await controller.get_user_by_id(user_id)


@router.post("/users")
async def create_user(
    payload: Dict[str, Any] = Depends(read_json_object),
    controller: UserController = Depends(get_user_controller),
):
    return await controller.create_user(payload)


@router.put("/users/{user_id}")
async def update_user(
    user_id: str,
    payload: Dict[str, Any] = Depends(read_json_object),
    controller: UserController = Depends(get_user_controller),
):
    return await controller.update_user(user_id, payload)


@router.delete("/users/{user_id}")
async def delete_user(user_id: str, controller: UserController = Depends(get_user_controller)):
    return await controller.delete_user(user_id)
