"""
Gradient catalog API endpoints.
List, fetch, create and track usage of stored gradients, and build gradient CSS.
"""
from typing import List

from fastapi import APIRouter, HTTPException

from palettelab.config import config
from palettelab.schemas import (
    Gradient, GradientCreate, GradientCSSResponse, GradientSpec, MessageResponse
)
from palettelab.services.colors.gradients import (
    GradientStop, build_gradient_css, css_declaration, next_stop_position
)
from palettelab.services.storage import get_storage
from palettelab.utils.logging import get_logger
from palettelab.utils.metrics import get_metrics

router = APIRouter(prefix="/api/gradients", tags=["gradients"])


def _css_response(spec: GradientSpec) -> GradientCSSResponse:
    stops = [GradientStop(color=stop.color, position=stop.position) for stop in spec.colors]
    css = build_gradient_css(stops, direction=spec.direction, kind=spec.type)
    return GradientCSSResponse(
        css=css,
        declaration=css_declaration(css),
        next_stop_position=next_stop_position(stops)
    )


@router.get("", response_model=List[Gradient])
def list_gradients():
    """All stored gradients in creation order."""
    return get_storage().list_gradients()


@router.get("/trending", response_model=List[Gradient])
def trending_gradients():
    """Most used gradients."""
    return get_storage().trending_gradients(limit=config.TRENDING_GRADIENTS_LIMIT)


@router.post("/css", response_model=GradientCSSResponse)
def preview_gradient_css(body: GradientSpec):
    """Build the CSS for an unsaved gradient."""
    return _css_response(body)


@router.get("/{gradient_id}", response_model=Gradient)
def get_gradient(gradient_id: int):
    gradient = get_storage().get_gradient(gradient_id)
    if gradient is None:
        raise HTTPException(status_code=404, detail="Gradient not found")
    return gradient


@router.get("/{gradient_id}/css", response_model=GradientCSSResponse)
def get_gradient_css(gradient_id: int):
    """CSS value and clipboard declaration of a stored gradient."""
    gradient = get_storage().get_gradient(gradient_id)
    if gradient is None:
        raise HTTPException(status_code=404, detail="Gradient not found")
    return _css_response(gradient)


@router.post("", response_model=Gradient, status_code=201)
def create_gradient(body: GradientCreate):
    """Store a new gradient."""
    gradient = get_storage().create_gradient(body)
    get_metrics().increment("gradients_created_total")
    get_logger().info("Gradient created", extra={"gradient_id": gradient.id, "stops": len(gradient.colors)})
    return gradient


@router.post("/{gradient_id}/use", response_model=MessageResponse)
def use_gradient(gradient_id: int):
    """Increment a gradient's usage count."""
    if get_storage().increment_gradient_usage(gradient_id) is None:
        raise HTTPException(status_code=404, detail="Gradient not found")
    return MessageResponse(message="Usage updated")
