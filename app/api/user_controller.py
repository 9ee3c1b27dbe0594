"""
app/api/user_controller.py

Purpose: HTTP mapping for user operations

- Turns ServiceResult envelopes into status codes and JSON bodies
- Reports exceptions raised by the service as 500s
- No business logic lives here
"""

from typing import Any, Awaitable, Callable, Dict, Optional

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from app.core.logging import get_logger
from app.schemas.response import ServiceResult
from app.services.user_service import DUPLICATE_EMAIL, USER_NOT_FOUND, UserService
from utils.time_utils import format_timestamp

logger = get_logger(__name__)


def _success(result: ServiceResult, status_code: int = 200, include_data: bool = True) -> JSONResponse:
    content = {"success": True}
    if include_data:
        content["data"] = result.data
    content["message"] = result.message
    return JSONResponse(status_code=status_code, content=jsonable_encoder(content))


def _failure(result: ServiceResult, status_code: int) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": result.error, "message": result.message},
    )


def _internal_error(exc: Exception, message: str = "Internal server error") -> JSONResponse:
    return JSONResponse(
        status_code=500,
        content={"success": False, "error": str(exc), "message": message},
    )


class UserController:
    """
    Maps user service results onto HTTP responses.
    """

    def __init__(self, user_service: UserService):
        self.user_service = user_service

    async def _call(
        self,
        operation: str,
        call: Callable[[], Awaitable[ServiceResult]],
        on_success: Callable[[ServiceResult], JSONResponse],
        failure_status: Callable[[Optional[str]], int],
    ) -> JSONResponse:
        try:
            result = await call()
        except Exception as e:
            logger.error(f"Unhandled error in {operation}: {e}", exc_info=True)
            return _internal_error(e)

        if result.success:
            return on_success(result)
        return _failure(result, failure_status(result.error))

    async def get_all_users(self) -> JSONResponse:
        """GET /users"""
        return await self._call(
            "get_all_users",
            self.user_service.get_all_users,
            _success,
            lambda error: 500,
        )

    async def get_user_by_id(self, user_id: str) -> JSONResponse:
        """GET /users/{user_id}"""
        return await self._call(
            "get_user_by_id",
            lambda: self.user_service.get_user_by_id(user_id),
            _success,
            lambda error: 404 if error == USER_NOT_FOUND else 400,
        )

    async def create_user(self, data: Dict[str, Any]) -> JSONResponse:
        """POST /users"""
        return await self._call(
            "create_user",
            lambda: self.user_service.create_user(data),
            lambda result: _success(result, status_code=201),
            lambda error: 409 if error == DUPLICATE_EMAIL else 400,
        )

    async def update_user(self, user_id: str, patch: Dict[str, Any]) -> JSONResponse:
        """PUT /users/{user_id}"""

        def failure_status(error: Optional[str]) -> int:
            if error == USER_NOT_FOUND:
                return 404
            if error == DUPLICATE_EMAIL:
                return 409
            return 400

        return await self._call(
            "update_user",
            lambda: self.user_service.update_user(user_id, patch),
            _success,
            failure_status,
        )

    async def delete_user(self, user_id: str) -> JSONResponse:
        """DELETE /users/{user_id}"""
        return await self._call(
            "delete_user",
            lambda: self.user_service.delete_user(user_id),
            lambda result: _success(result, include_data=False),
            lambda error: 404 if error == USER_NOT_FOUND else 400,
        )

    async def get_user_stats(self) -> JSONResponse:
        """GET /users/stats"""
        return await self._call(
            "get_user_stats",
            self.user_service.get_user_stats,
            _success,
            lambda error: 500,
        )

    async def health_check(self) -> JSONResponse:
        """GET /health"""
        try:
            return JSONResponse(
                status_code=200,
                content={
                    "success": True,
                    "message": "API is healthy",
                    "timestamp": format_timestamp(),
                },
            )
        except Exception as e:
            logger.error(f"Health check failed: {e}", exc_info=True)
            return _internal_error(e, message="Health check failed")
