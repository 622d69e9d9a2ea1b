"""Encoding parameters."""

from dataclasses import dataclass

from models.errors import ComponentsNumberInvalid
from utils.constants import (
    DEFAULT_COMPONENTS_X,
    DEFAULT_COMPONENTS_Y,
    MAX_COMPONENTS,
    MIN_COMPONENTS,
)


@dataclass(frozen=True)
class EncodingParams:
    """BlurHash component grid."""
    
    components_x: int = DEFAULT_COMPONENTS_X
    components_y: int = DEFAULT_COMPONENTS_Y
    
    def __post_init__(self):
        if not (MIN_COMPONENTS <= self.components_x <= MAX_COMPONENTS
                and MIN_COMPONENTS <= self.components_y <= MAX_COMPONENTS):
            raise ComponentsNumberInvalid(self.components_x, self.components_y)
    
    @property
    def hash_length(self) -> int:
        """Length of the hash string this grid produces."""
        return 6 + 2 * (self.components_x * self.components_y - 1)
