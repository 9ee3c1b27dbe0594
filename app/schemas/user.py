"""
app/schemas/user.py

Purpose: User-facing payload schemas

- Aggregate statistics over the stored users
"""

from typing import Union

from pydantic import BaseModel, Field


class UserStats(BaseModel):
    """
    Aggregates over every stored user. All values are 0 when there are no users.
    """
    total_users: int = Field(..., alias="totalUsers")
    average_age: float = Field(..., alias="averageAge")
    youngest_user: Union[int, float] = Field(..., alias="youngestUser")
    oldest_user: Union[int, float] = Field(..., alias="oldestUser")

    class Config:
        populate_by_name = True
