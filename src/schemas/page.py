"""Page-level schemas."""

from pathlib import Path

from pydantic import BaseModel, Field


class PageBlock(BaseModel):
    """One page of the document body.

    Sizes are in reference pixels (96 per inch); conversion to drawing
    units happens when the block is serialized.

    Attributes:
        vector_id: Relationship id of the SVG image
        raster_id: Relationship id of the PNG fallback
        width: Intrinsic page width in pixels
        height: Intrinsic page height in pixels
    """

    vector_id: int = Field(ge=0)
    raster_id: int = Field(ge=0)
    width: float
    height: float

    model_config = {"frozen": True}


class PackageSize(BaseModel):
    """Document-wide page geometry, in reference pixels.

    Taken from the first page only; later pages with a different size are
    still laid out on this geometry.
    """

    width: float
    height: float

    model_config = {"frozen": True}


class PageAsset(BaseModel):
    """A page registered with the package workspace.

    Attributes:
        vector_path: Location of the SVG inside the workspace media directory
        raster_path: Location of the rendered PNG fallback
        width: Intrinsic width in pixels
        height: Intrinsic height in pixels
        vector_id: Identifier allocated for the SVG
        raster_id: Identifier allocated for the PNG
    """

    vector_path: Path
    raster_path: Path
    width: float
    height: float
    vector_id: int
    raster_id: int

    @property
    def size(self) -> PackageSize:
        return PackageSize(width=self.width, height=self.height)
