"""
SourceLoader - Opens, decodes and validates the input image.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from PIL import Image, UnidentifiedImageError

from .errors import DecodeError, DimensionMismatchError, UnsupportedFormatError


@dataclass(frozen=True)
class SourceImage:
    """
    A decoded input image, shared read-only by every worker.
    
    Attributes:
        path: Path the image was loaded from (also the cache identity)
        image: Decoded pixels, converted to RGBA
        format: Detected format ('PNG', 'JPEG' or 'GIF')
    """
    path: str
    image: Image.Image
    format: str
    
    @property
    def size(self) -> Tuple[int, int]:
        return self.image.size


class SourceLoader:
    """
    Loads the single source image a run is generated from.
    """
    
    SUPPORTED_FORMATS = ('PNG', 'JPEG', 'GIF')
    # Multi-picture JPEGs (camera output) report their own format name
    FORMAT_ALIASES = {'MPO': 'JPEG'}
    REQUIRED_SIZE = (1080, 1080)
    
    def __init__(
        self,
        required_size: Tuple[int, int] = REQUIRED_SIZE,
        logger: Optional[logging.Logger] = None
    ):
        self.required_size = tuple(required_size)
        self.logger = logger or logging.getLogger(__name__)
    
    def load(self, input_path: str) -> SourceImage:
        """
        Decode ``input_path`` and validate it.
        
        Checks, in order: the file decodes, its format is supported, its
        size matches ``required_size``.
        
        Raises:
            DecodeError, UnsupportedFormatError, DimensionMismatchError
        """
        try:
            with Image.open(input_path) as img:
                img.load()
                detected = self.FORMAT_ALIASES.get(img.format, img.format)
                decoded = img.convert('RGBA')
        except (OSError, UnidentifiedImageError, ValueError, Image.DecompressionBombError) as e:
            raise DecodeError('SourceLoader.load', f"failed to decode image {input_path}") from e
        
        if detected not in self.SUPPORTED_FORMATS:
            raise UnsupportedFormatError(
                'SourceLoader.load',
                f"unsupported image format {detected!r}; expected one of {', '.join(self.SUPPORTED_FORMATS)}"
            )
        
        if decoded.size != self.required_size:
            w, h = self.required_size
            raise DimensionMismatchError(
                'SourceLoader.load',
                f"image dimensions must be {w}x{h}, got {decoded.width}x{decoded.height}"
            )
        
        self.logger.debug(f"Loaded {input_path}: {detected} {decoded.width}x{decoded.height}")
        return SourceImage(path=str(input_path), image=decoded, format=detected)
