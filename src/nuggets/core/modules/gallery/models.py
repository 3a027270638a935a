from pydantic import BaseModel, Field


class GalleryItem(BaseModel):
    """A past-work image."""

    file: str = Field(..., description="Image filename")
    url: str = Field(..., description="Public URL of the image")
    id: str = Field(..., description="Filename without extension, used in /past-work/{id}")
