"""Tests for schema models."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from schemas import ConversionResult, MediaKind, PackageSize, PageAsset, PageBlock, RelationshipEntry


class TestRelationshipEntry:
    def test_rid(self):
        entry = RelationshipEntry(id=12, target="media/6.png", media_kind=MediaKind.RASTER)
        assert entry.rid == "rId12"

    def test_negative_id_rejected(self):
        with pytest.raises(ValidationError):
            RelationshipEntry(id=-1, target="media/x.svg", media_kind=MediaKind.VECTOR)

    def test_media_kind_content_types(self):
        assert MediaKind.VECTOR.content_type == "image/svg+xml"
        assert MediaKind.RASTER.content_type == "image/png"

    def test_media_kind_from_value(self):
        assert MediaKind("svg") is MediaKind.VECTOR


class TestPageModels:
    def test_page_block_frozen(self):
        block = PageBlock(vector_id=0, raster_id=1, width=10, height=20)
        with pytest.raises(ValidationError):
            block.width = 30

    def test_page_asset_size(self):
        asset = PageAsset(
            vector_path=Path("media/1.svg"),
            raster_path=Path("media/1.png"),
            width=720,
            height=1018,
            vector_id=0,
            raster_id=1,
        )
        assert asset.size == PackageSize(width=720, height=1018)


class TestConversionResult:
    def test_serializes(self):
        result = ConversionResult(
            source=Path("in.pdf"),
            destination=Path("out.docx"),
            page_count=1,
            page_size=PackageSize(width=720, height=1018),
            relationships=[
                RelationshipEntry(id=0, target="media/1.svg", media_kind=MediaKind.VECTOR),
            ],
        )
        data = result.model_dump(mode="json")
        assert data["relationships"][0]["media_kind"] == "svg"
        assert data["page_size"] == {"width": 720.0, "height": 1018.0}
