"""Content builder for the ``word/document.xml`` body.

Each page becomes one paragraph holding a single inline drawing. The drawing
fills with the PNG fallback and layers the SVG on top through the Office 2016
``svgBlip`` extension, so viewers without SVG support still show the page.
"""

import logging

from lxml import etree

from schemas.page import PageBlock

from ..units import to_drawing_unit
from .compiler import FragmentCompiler

logger = logging.getLogger(__name__)

W_NS = "http://schemas.openxmlformats.org/wordprocessingml/2006/main"
WP_NS = "http://schemas.openxmlformats.org/drawingml/2006/wordprocessingDrawing"
A_NS = "http://schemas.openxmlformats.org/drawingml/2006/main"
PIC_NS = "http://schemas.openxmlformats.org/drawingml/2006/picture"
R_NS = "http://schemas.openxmlformats.org/officeDocument/2006/relationships"
ASVG_NS = "http://schemas.microsoft.com/office/drawing/2016/SVG/main"

SVG_BLIP_EXTENSION_URI = "{96DAC541-7B7A-43D3-8B79-37D633B846F1}"

NSMAP = {
    "w": W_NS,
    "wp": WP_NS,
    "a": A_NS,
    "pic": PIC_NS,
    "r": R_NS,
    "asvg": ASVG_NS,
}


def rid(identifier: int) -> str:
    return f"rId{identifier}"


class ContentBuilder(FragmentCompiler):
    """Ordered, append-only sequence of page blocks.

    Block order is reading order and must match source page order.
    """

    def __init__(self) -> None:
        self._blocks: list[PageBlock] = []

    def append_page(
        self, vector_id: int, raster_id: int, width_px: float, height_px: float
    ) -> PageBlock:
        """Append one page referencing its SVG and PNG relationships.

        Args:
            vector_id: Relationship id of the SVG
            raster_id: Relationship id of the PNG fallback
            width_px: Page width in reference pixels
            height_px: Page height in reference pixels

        Returns:
            The appended PageBlock
        """
        block = PageBlock(
            vector_id=vector_id,
            raster_id=raster_id,
            width=width_px,
            height=height_px,
        )
        self._blocks.append(block)
        logger.debug(
            f"Appended page block {len(self._blocks)} "
            f"({rid(vector_id)}, {rid(raster_id)})"
        )
        return block

    @property
    def blocks(self) -> tuple[PageBlock, ...]:
        return tuple(self._blocks)

    def referenced_ids(self) -> list[int]:
        """All relationship ids referenced by the body, vector before raster."""
        ids = []
        for block in self._blocks:
            ids.extend((block.vector_id, block.raster_id))
        return ids

    def serialize(self) -> str:
        return "".join(
            etree.tostring(self.build_block(block), encoding="unicode")
            for block in self._blocks
        )

    def build_block(self, block: PageBlock) -> etree._Element:
        """Build the ``w:p`` element for a single page."""
        cx = str(to_drawing_unit(block.width))
        cy = str(to_drawing_unit(block.height))

        p = etree.Element(f"{{{W_NS}}}p", nsmap=NSMAP)

        p_pr = etree.SubElement(p, f"{{{W_NS}}}pPr")
        etree.SubElement(p_pr, f"{{{W_NS}}}widowControl")
        jc = etree.SubElement(p_pr, f"{{{W_NS}}}jc")
        jc.set(f"{{{W_NS}}}val", "left")

        run = etree.SubElement(p, f"{{{W_NS}}}r")
        r_pr = etree.SubElement(run, f"{{{W_NS}}}rPr")
        etree.SubElement(r_pr, f"{{{W_NS}}}noProof")

        drawing = etree.SubElement(run, f"{{{W_NS}}}drawing")
        inline = etree.SubElement(drawing, f"{{{WP_NS}}}inline")
        for side in ("distT", "distB", "distL", "distR"):
            inline.set(side, "0")

        extent = etree.SubElement(inline, f"{{{WP_NS}}}extent")
        extent.set("cx", cx)
        extent.set("cy", cy)

        effect_extent = etree.SubElement(inline, f"{{{WP_NS}}}effectExtent")
        for side in ("l", "t", "r", "b"):
            effect_extent.set(side, "0")

        # docPr ids only need to be unique per drawing; reuse the vector id
        doc_pr = etree.SubElement(inline, f"{{{WP_NS}}}docPr")
        doc_pr.set("id", str(block.vector_id))
        doc_pr.set("name", str(block.vector_id))

        frame_pr = etree.SubElement(inline, f"{{{WP_NS}}}cNvGraphicFramePr")
        locks = etree.SubElement(frame_pr, f"{{{A_NS}}}graphicFrameLocks")
        locks.set("noChangeAspect", "1")

        graphic = etree.SubElement(inline, f"{{{A_NS}}}graphic")
        graphic_data = etree.SubElement(graphic, f"{{{A_NS}}}graphicData")
        graphic_data.set("uri", PIC_NS)
        self._build_picture(graphic_data, block, cx, cy)

        return p

    def _build_picture(
        self, parent: etree._Element, block: PageBlock, cx: str, cy: str
    ) -> etree._Element:
        """Build the ``pic:pic`` element with the raster fill and SVG extension."""
        pic = etree.SubElement(parent, f"{{{PIC_NS}}}pic")

        nv_pic_pr = etree.SubElement(pic, f"{{{PIC_NS}}}nvPicPr")
        c_nv_pr = etree.SubElement(nv_pic_pr, f"{{{PIC_NS}}}cNvPr")
        c_nv_pr.set("id", "1")
        c_nv_pr.set("name", "")
        etree.SubElement(nv_pic_pr, f"{{{PIC_NS}}}cNvPicPr")

        blip_fill = etree.SubElement(pic, f"{{{PIC_NS}}}blipFill")
        blip = etree.SubElement(blip_fill, f"{{{A_NS}}}blip")
        blip.set(f"{{{R_NS}}}embed", rid(block.raster_id))

        ext_lst = etree.SubElement(blip, f"{{{A_NS}}}extLst")
        ext = etree.SubElement(ext_lst, f"{{{A_NS}}}ext")
        ext.set("uri", SVG_BLIP_EXTENSION_URI)
        svg_blip = etree.SubElement(ext, f"{{{ASVG_NS}}}svgBlip")
        svg_blip.set(f"{{{R_NS}}}embed", rid(block.vector_id))

        stretch = etree.SubElement(blip_fill, f"{{{A_NS}}}stretch")
        etree.SubElement(stretch, f"{{{A_NS}}}fillRect")

        sp_pr = etree.SubElement(pic, f"{{{PIC_NS}}}spPr")
        xfrm = etree.SubElement(sp_pr, f"{{{A_NS}}}xfrm")
        off = etree.SubElement(xfrm, f"{{{A_NS}}}off")
        off.set("x", "0")
        off.set("y", "0")
        xfrm_ext = etree.SubElement(xfrm, f"{{{A_NS}}}ext")
        xfrm_ext.set("cx", cx)
        xfrm_ext.set("cy", cy)

        geom = etree.SubElement(sp_pr, f"{{{A_NS}}}prstGeom")
        geom.set("prst", "rect")
        etree.SubElement(geom, f"{{{A_NS}}}avLst")

        return pic

    def __len__(self) -> int:
        return len(self._blocks)
