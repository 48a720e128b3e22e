"""Request schemas for Points API

Pydantic models for validating incoming HTTP requests.
"""

from pydantic import BaseModel, Field


class VerifyRequestSchema(BaseModel):
    """
    Request schema for checking a balance

    Used for POST /points/verify endpoint.
    """

    user_id: str = Field(
        ...,
        min_length=1,
        description="User identity (required, non-empty)"
    )

    required_points: int = Field(
        ...,
        ge=0,
        description="Points the user must hold (must be >= 0)"
    )


class DebitRequestSchema(BaseModel):
    """
    Request schema for debiting points

    Used for POST /points/debit endpoint.
    """

    user_id: str = Field(
        ...,
        min_length=1,
        description="User identity (required, non-empty)"
    )

    amount: int = Field(
        ...,
        gt=0,
        description="Points to remove (must be > 0)"
    )

    description: str = Field(
        ...,
        description="Free-text reason for the spend (e.g., 'Photo Editing'), may be empty"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "user_id": "5f0c1a9e-2b7d-4c1e-9a0b-3d2e1f4a5b6c",
                "amount": 35,
                "description": "Photo Editing"
            }
        }
