"""Encoding result for one image."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class EncodingResult:
    """Outcome of encoding a single image file."""
    
    path: str
    blurhash: Optional[str] = None
    width: int = 0
    height: int = 0
    components_x: int = 0
    components_y: int = 0
    
    # Runtime
    encode_time_ms: float = 0.0
    
    error: Optional[str] = None
    
    @property
    def ok(self) -> bool:
        return self.error is None
