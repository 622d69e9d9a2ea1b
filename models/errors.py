"""Encoding errors."""


class EncodingError(ValueError):
    """Base class for invalid encode requests."""


class ComponentsNumberInvalid(EncodingError):
    """Component count outside 1-9 on either axis."""

    def __init__(self, components_x: int, components_y: int):
        super().__init__(
            f"Components must be 1-9 on each axis, got {components_x}x{components_y}"
        )
        self.components_x = components_x
        self.components_y = components_y


class BytesPerPixelMismatch(EncodingError):
    """Pixel buffer length does not match width * height * 4."""

    def __init__(self, length: int, width: int, height: int):
        super().__init__(
            f"Expected {width * height * 4} bytes for {width}x{height} RGBA, got {length}"
        )
        self.length = length
        self.width = width
        self.height = height


class ImageDimensionsInvalid(EncodingError):
    """Image has zero width or height."""

    def __init__(self, width: int, height: int):
        super().__init__(f"Image dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
