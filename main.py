from dotenv import load_dotenv

# Load environment variables before the config class reads them
load_dotenv()

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from palettelab.api.colors import router as colors_router
from palettelab.api.gradients import router as gradients_router
from palettelab.api.palettes import router as palettes_router
from palettelab.config import config
from palettelab.schemas import HealthResponse
from palettelab.utils.logging import get_logger
from palettelab.utils.metrics import get_metrics


def validate_config() -> None:
    """Fail fast on extraction settings the extractor cannot honour."""
    if not config.validate_stride(config.EXTRACT_SAMPLE_STRIDE):
        raise RuntimeError(f"Invalid PALETTELAB_EXTRACT_SAMPLE_STRIDE: {config.EXTRACT_SAMPLE_STRIDE}")
    if not config.validate_quantization_step(config.EXTRACT_QUANTIZATION_STEP):
        raise RuntimeError(f"Invalid PALETTELAB_EXTRACT_QUANTIZATION_STEP: {config.EXTRACT_QUANTIZATION_STEP}")
    if not config.validate_max_colors(config.EXTRACT_MAX_COLORS):
        raise RuntimeError(f"Invalid PALETTELAB_EXTRACT_MAX_COLORS: {config.EXTRACT_MAX_COLORS}")


validate_config()
logger = get_logger()

app = FastAPI(
    title="PaletteLab Backend",
    description="Color conversion, contrast checking, palette generation and extraction API",
    version=config.VERSION
)

# Add CORS middleware with basic configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.allowed_origins(),
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)

app.include_router(palettes_router)
app.include_router(gradients_router)
app.include_router(colors_router)

logger.info("PaletteLab backend initialised", extra={"version": config.VERSION})


@app.get("/healthz", response_model=HealthResponse)
def health_check():
    """Health check endpoint"""
    return HealthResponse(status="ok", version=config.VERSION, service=config.SERVICE_NAME)


@app.get("/")
def root():
    """Root endpoint"""
    return {
        "message": "PaletteLab Backend API",
        "version": config.VERSION,
        "docs": "/docs"
    }


@app.get("/metrics")
def get_service_metrics():
    """In-process counters and timing statistics."""
    try:
        return get_metrics().get_summary()
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Failed to get metrics: {str(e)}")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=False)
