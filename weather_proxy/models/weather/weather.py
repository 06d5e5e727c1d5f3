from pydantic import BaseModel, Field


class CityRequiredResponse(BaseModel):
    """Body returned when the city query parameter is missing."""

    error: str = Field(..., description="Validation error message", examples=["City is required"])
