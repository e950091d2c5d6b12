"""
Palette catalog API endpoints.
List, fetch, create and track usage of stored palettes.
"""
from typing import List

from fastapi import APIRouter, HTTPException

from palettelab.config import config
from palettelab.schemas import MessageResponse, Palette, PaletteCreate
from palettelab.services.storage import get_storage
from palettelab.utils.logging import get_logger
from palettelab.utils.metrics import get_metrics

router = APIRouter(prefix="/api/palettes", tags=["palettes"])


@router.get("", response_model=List[Palette])
def list_palettes():
    """All stored palettes in creation order."""
    return get_storage().list_palettes()


@router.get("/trending", response_model=List[Palette])
def trending_palettes():
    """Most used palettes."""
    return get_storage().trending_palettes(limit=config.TRENDING_PALETTES_LIMIT)


@router.get("/{palette_id}", response_model=Palette)
def get_palette(palette_id: int):
    palette = get_storage().get_palette(palette_id)
    if palette is None:
        raise HTTPException(status_code=404, detail="Palette not found")
    return palette


@router.post("", response_model=Palette, status_code=201)
def create_palette(body: PaletteCreate):
    """
    Store a new palette.

    Colors are canonicalized to lowercase #rrggbb; malformed colors are
    rejected with 422 by request validation.
    """
    palette = get_storage().create_palette(body)
    get_metrics().increment("palettes_created_total")
    get_logger().info("Palette created", extra={"palette_id": palette.id, "colors": len(palette.colors)})
    return palette


@router.post("/{palette_id}/use", response_model=MessageResponse)
def use_palette(palette_id: int):
    """Increment a palette's usage count."""
    if get_storage().increment_palette_usage(palette_id) is None:
        raise HTTPException(status_code=404, detail="Palette not found")
    return MessageResponse(message="Usage updated")
