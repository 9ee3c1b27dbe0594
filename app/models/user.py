"""
app/models/user.py

Purpose: User record model

- Server-generated id and timestamps
- Name, email and age as accepted by validation
- camelCase aliases for the JSON representation
"""

from datetime import datetime
from typing import Union

from pydantic import BaseModel, Field


class User(BaseModel):
    """
    A stored user record.

    Attributes use snake_case in Python and serialize as camelCase
    (``createdAt``/``updatedAt``) in API responses.
    """
    id: str = Field(..., description="Server-generated unique identifier")
    name: str = Field(..., description="Display name, 2-100 characters")
    email: str = Field(..., description="Unique email address")
    age: Union[int, float] = Field(..., description="Age between 0 and 150")
    created_at: datetime = Field(..., alias="createdAt")
    updated_at: datetime = Field(..., alias="updatedAt")

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "id": "4f9a2c1e-6a0b-4d7e-9b7a-2f1c3d4e5f60",
                "name": "John Doe",
                "email": "john@example.com",
                "age": 30,
                "createdAt": "2023-01-01T00:00:00+00:00",
                "updatedAt": "2023-01-01T00:00:00+00:00"
            }
        }
