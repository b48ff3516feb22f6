"""
ResizeCompositor - Aspect-preserving scale-and-pad onto a transparent canvas.
"""

import logging
from typing import Optional, Tuple

from PIL import Image


class ResizeCompositor:
    """
    Scales an image to fit inside a target box and centers it on a fully
    transparent canvas of exactly the target size.
    """
    
    TRANSPARENT = (0, 0, 0, 0)
    
    def __init__(
        self,
        resample: int = Image.Resampling.LANCZOS,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize compositor.
        
        Args:
            resample: Pillow resampling filter (default: Lanczos)
            logger: Optional logger instance
        """
        self.resample = resample
        self.logger = logger or logging.getLogger(__name__)
    
    @staticmethod
    def scaled_size(src_size: Tuple[int, int], target_size: Tuple[int, int]) -> Tuple[int, int]:
        """
        Compute the largest size with the source's aspect ratio that fits
        in ``target_size``.
        
        The limiting dimension is taken exactly from the target and the
        other is derived by rounding, clamped to [1, target].
        """
        src_w, src_h = src_size
        width, height = target_size
        if width <= 0 or height <= 0:
            raise ValueError(f"target size must be positive, got {width}x{height}")
        if src_w <= 0 or src_h <= 0:
            raise ValueError(f"source size must be positive, got {src_w}x{src_h}")
        
        # width / src_w <= height / src_h, without floats
        if width * src_h <= height * src_w:
            new_w = width
            new_h = round(src_h * width / src_w)
            new_h = min(max(new_h, 1), height)
        else:
            new_h = height
            new_w = round(src_w * height / src_h)
            new_w = min(max(new_w, 1), width)
        return new_w, new_h
    
    @staticmethod
    def offsets(target_size: Tuple[int, int], scaled_size: Tuple[int, int]) -> Tuple[int, int]:
        """Top-left placement that centers ``scaled_size`` in ``target_size``."""
        return (
            (target_size[0] - scaled_size[0]) // 2,
            (target_size[1] - scaled_size[1]) // 2,
        )
    
    def composite(self, image: Image.Image, width: int, height: int) -> Image.Image:
        """
        Return a new RGBA image of exactly ``width`` x ``height``.
        
        ``image`` is never modified.
        """
        target = (width, height)
        new_size = self.scaled_size(image.size, target)
        
        source = image if image.mode == 'RGBA' else image.convert('RGBA')
        resized = source.resize(new_size, self.resample)
        
        canvas = Image.new('RGBA', target, self.TRANSPARENT)
        offset = self.offsets(target, new_size)
        canvas.alpha_composite(resized, dest=offset)
        
        self.logger.debug(
            f"Composited {image.width}x{image.height} -> {new_size[0]}x{new_size[1]} "
            f"at {offset} on {width}x{height}"
        )
        return canvas
