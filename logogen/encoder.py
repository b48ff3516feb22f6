"""
Encoder - Serializes composited images in the format named by the output path.
"""

import io
import logging
import os
import stat
import tempfile
from typing import Optional, Tuple

from PIL import Image

from .errors import FileIOError, UnsupportedOutputFormatError


def _current_umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask


class Encoder:
    """
    Encodes RGBA canvases as PNG, JPEG or GIF and writes them to disk.
    """
    
    FORMATS = {
        '.png': 'PNG',
        '.jpg': 'JPEG',
        '.jpeg': 'JPEG',
        '.gif': 'GIF',
    }
    
    def __init__(
        self,
        quality: int = 90,
        background: Tuple[int, int, int] = (255, 255, 255),
        file_mode: Optional[int] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize encoder.
        
        Args:
            quality: JPEG quality for output (default: 90)
            background: Colour transparent areas are flattened onto for JPEG
            file_mode: Permissions for new outputs (default: 0666 less the
                umask at construction)
            logger: Optional logger instance
        """
        self.quality = quality
        self.background = background
        self.file_mode = 0o666 & ~_current_umask() if file_mode is None else file_mode
        self.logger = logger or logging.getLogger(__name__)
    
    def format_for(self, output_path: str) -> str:
        """
        Determine output format from the file extension, case-insensitively.
        
        Raises:
            UnsupportedOutputFormatError: For any other extension
        """
        ext = os.path.splitext(output_path)[1].lower()
        try:
            return self.FORMATS[ext]
        except KeyError:
            raise UnsupportedOutputFormatError(
                'Encoder.format_for', f"unsupported output format: {ext or '(none)'}"
            ) from None
    
    def encode(self, image: Image.Image, output_format: str) -> bytes:
        """Encode ``image`` and return the file bytes."""
        output = io.BytesIO()
        
        if output_format == 'JPEG':
            self._flatten(image).save(output, format='JPEG', quality=self.quality)
        elif output_format == 'PNG':
            image.save(output, format='PNG')
        elif output_format == 'GIF':
            image.save(output, format='GIF')
        else:
            raise UnsupportedOutputFormatError('Encoder.encode', f"unsupported output format: {output_format}")
        
        return output.getvalue()
    
    def save(self, image: Image.Image, output_path: str) -> int:
        """
        Encode ``image`` and write it to ``output_path``.
        
        The bytes go to a temporary file in the same directory which is
        then renamed over the destination. A replaced file keeps its
        permissions; a new one gets ``file_mode``.
        
        Returns:
            Number of bytes written
        """
        output_format = self.format_for(output_path)
        data = self.encode(image, output_format)
        
        directory = os.path.dirname(os.path.abspath(output_path))
        try:
            fd, tmp_path = tempfile.mkstemp(dir=directory, prefix='.logogen_', suffix='.tmp')
        except OSError as e:
            raise FileIOError('Encoder.save', f"failed to create {output_path}") from e
        
        try:
            with os.fdopen(fd, 'wb') as f:
                f.write(data)
            os.chmod(tmp_path, self._mode_for(output_path))
            os.replace(tmp_path, output_path)
        except OSError as e:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise FileIOError('Encoder.save', f"failed to write {output_path}") from e
        
        self.logger.debug(f"Wrote {output_path} ({output_format}, {len(data)} bytes)")
        return len(data)
    
    def _mode_for(self, output_path: str) -> int:
        try:
            return stat.S_IMODE(os.stat(output_path).st_mode)
        except FileNotFoundError:
            return self.file_mode
    
    def _flatten(self, image: Image.Image) -> Image.Image:
        """Drop the alpha channel by pasting onto the background colour."""
        if image.mode in ('RGBA', 'LA', 'P'):
            rgba = image.convert('RGBA')
            background = Image.new('RGB', rgba.size, self.background)
            background.paste(rgba, mask=rgba.split()[-1])
            return background
        elif image.mode != 'RGB':
            return image.convert('RGB')
        return image
