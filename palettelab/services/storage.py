"""
PaletteLab In-Memory Catalog Storage
Keeps palettes and gradients in process memory, keyed by integer id.
"""
from threading import Lock
from typing import Dict, List, Optional

from loguru import logger

from palettelab.config import config
from palettelab.schemas import Gradient, GradientCreate, Palette, PaletteCreate


SAMPLE_PALETTES = [
    {
        "name": "Modern Minimalist",
        "description": "Clean and sophisticated grayscale palette",
        "colors": ["#1a1a1a", "#666666", "#999999", "#cccccc", "#ffffff"],
        "tags": ["minimal", "grayscale", "clean"]
    },
    {
        "name": "Ocean Breeze",
        "description": "Calming blue tones inspired by the sea",
        "colors": ["#1e3a8a", "#2563eb", "#60a5fa", "#67e8f9", "#ecfeff"],
        "tags": ["blue", "ocean", "calming"]
    },
    {
        "name": "Sunset Warmth",
        "description": "Vibrant warm colors of golden hour",
        "colors": ["#ea580c", "#fb923c", "#fde047", "#f472b6", "#a855f7"],
        "tags": ["warm", "sunset", "vibrant"]
    },
    {
        "name": "Forest Fresh",
        "description": "Natural green tones from nature",
        "colors": ["#166534", "#16a34a", "#4ade80", "#bef264", "#f7fee7"],
        "tags": ["green", "nature", "fresh"]
    },
    {
        "name": "Royal Purple",
        "description": "Luxurious purple shades for elegance",
        "colors": ["#581c87", "#7c3aed", "#a855f7", "#c084fc", "#f3e8ff"],
        "tags": ["purple", "luxury", "elegant"]
    },
    {
        "name": "Autumn Vibes",
        "description": "Warm fall colors with earthy tones",
        "colors": ["#b91c1c", "#ea580c", "#eab308", "#f59e0b", "#fef3c7"],
        "tags": ["autumn", "warm", "earthy"]
    },
]

SAMPLE_GRADIENTS = [
    {
        "name": "Sunset Glow",
        "description": "Warm gradient from pink to yellow",
        "colors": [{"color": "#ec4899", "position": 0}, {"color": "#ef4444", "position": 50},
                   {"color": "#eab308", "position": 100}],
        "direction": 135,
        "type": "linear"
    },
    {
        "name": "Ocean Depth",
        "description": "Cool blue to green gradient",
        "colors": [{"color": "#4ade80", "position": 0}, {"color": "#3b82f6", "position": 100}],
        "direction": 45,
        "type": "linear"
    },
    {
        "name": "Cotton Candy",
        "description": "Soft purple to pink gradient",
        "colors": [{"color": "#a855f7", "position": 0}, {"color": "#ec4899", "position": 50},
                   {"color": "#ef4444", "position": 100}],
        "direction": 90,
        "type": "linear"
    },
    {
        "name": "Dark Matter",
        "description": "Deep black gradient with subtle variations",
        "colors": [{"color": "#374151", "position": 0}, {"color": "#111827", "position": 50},
                   {"color": "#000000", "position": 100}],
        "direction": 180,
        "type": "linear"
    },
]


class MemStorage:
    """Lock-guarded in-memory store for palettes and gradients."""

    def __init__(self, seed_samples: bool = True):
        self._lock = Lock()
        self._palettes: Dict[int, Palette] = {}
        self._gradients: Dict[int, Gradient] = {}
        self._next_palette_id = 1
        self._next_gradient_id = 1

        if seed_samples:
            self._seed()

    def _seed(self):
        """Load the sample catalog."""
        for data in SAMPLE_PALETTES:
            self.create_palette(PaletteCreate(**data))
        for data in SAMPLE_GRADIENTS:
            self.create_gradient(GradientCreate(**data))
        logger.debug(f"Seeded {len(SAMPLE_PALETTES)} palettes and {len(SAMPLE_GRADIENTS)} gradients")

    # Palettes

    def list_palettes(self) -> List[Palette]:
        with self._lock:
            return list(self._palettes.values())

    def get_palette(self, palette_id: int) -> Optional[Palette]:
        with self._lock:
            return self._palettes.get(palette_id)

    def create_palette(self, data: PaletteCreate) -> Palette:
        with self._lock:
            palette = Palette(id=self._next_palette_id, **data.model_dump())
            self._palettes[palette.id] = palette
            self._next_palette_id += 1
            return palette

    def increment_palette_usage(self, palette_id: int) -> Optional[Palette]:
        """Bump the usage count; None if the palette does not exist."""
        with self._lock:
            palette = self._palettes.get(palette_id)
            if palette is None:
                return None
            palette = palette.model_copy(update={"usage_count": palette.usage_count + 1})
            self._palettes[palette_id] = palette
            return palette

    def trending_palettes(self, limit: int = 6) -> List[Palette]:
        """Most used palettes first; ties keep creation order."""
        with self._lock:
            return sorted(self._palettes.values(), key=lambda p: -p.usage_count)[:limit]

    # Gradients

    def list_gradients(self) -> List[Gradient]:
        with self._lock:
            return list(self._gradients.values())

    def get_gradient(self, gradient_id: int) -> Optional[Gradient]:
        with self._lock:
            return self._gradients.get(gradient_id)

    def create_gradient(self, data: GradientCreate) -> Gradient:
        with self._lock:
            gradient = Gradient(id=self._next_gradient_id, **data.model_dump())
            self._gradients[gradient.id] = gradient
            self._next_gradient_id += 1
            return gradient

    def increment_gradient_usage(self, gradient_id: int) -> Optional[Gradient]:
        """Bump the usage count; None if the gradient does not exist."""
        with self._lock:
            gradient = self._gradients.get(gradient_id)
            if gradient is None:
                return None
            gradient = gradient.model_copy(update={"usage_count": gradient.usage_count + 1})
            self._gradients[gradient_id] = gradient
            return gradient

    def trending_gradients(self, limit: int = 4) -> List[Gradient]:
        """Most used gradients first; ties keep creation order."""
        with self._lock:
            return sorted(self._gradients.values(), key=lambda g: -g.usage_count)[:limit]


# Global storage instance
_storage: Optional[MemStorage] = None


def get_storage() -> MemStorage:
    """Get or create global storage instance."""
    global _storage
    if _storage is None:
        _storage = MemStorage(seed_samples=config.SEED_SAMPLE_DATA)
    return _storage


def reset_storage():
    """Drop the global storage so the next access starts fresh (for testing)."""
    global _storage
    _storage = None
