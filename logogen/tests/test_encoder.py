"""Tests for Encoder class."""

import io
import os
import stat

import pytest
from PIL import Image

from logogen.encoder import Encoder
from logogen.errors import FileIOError, UnsupportedOutputFormatError


@pytest.fixture
def padded_canvas():
    """A 40x20 canvas: opaque red square centered between transparent margins."""
    canvas = Image.new('RGBA', (40, 20), (0, 0, 0, 0))
    canvas.paste(Image.new('RGBA', (20, 20), (255, 0, 0, 255)), (10, 0))
    return canvas


class TestEncoder:
    """Tests for Encoder class."""
    
    def test_init_defaults(self):
        """Test default initialization."""
        encoder = Encoder()
        
        assert encoder.quality == 90
        assert encoder.background == (255, 255, 255)
    
    @pytest.mark.parametrize('path, expected', [
        ('out/icon.png', 'PNG'),
        ('icon.PNG', 'PNG'),
        ('photo.jpg', 'JPEG'),
        ('photo.JPEG', 'JPEG'),
        ('anim.gif', 'GIF'),
    ])
    def test_format_for(self, path, expected):
        """Test format selection by extension."""
        assert Encoder().format_for(path) == expected
    
    @pytest.mark.parametrize('path', ['icon.bmp', 'icon.ico', 'icon.icns', 'icon'])
    def test_format_for_unsupported(self, path):
        """Test unknown extensions are rejected."""
        with pytest.raises(UnsupportedOutputFormatError):
            Encoder().format_for(path)
    
    def test_save_png_keeps_alpha(self, padded_canvas, tmp_path):
        """Test PNG output keeps size and transparent margins."""
        path = str(tmp_path / 'icon.png')
        
        written = Encoder().save(padded_canvas, path)
        
        assert written == os.path.getsize(path)
        with Image.open(path) as img:
            assert img.format == 'PNG'
            assert img.size == (40, 20)
            assert img.mode == 'RGBA'
            assert img.getpixel((0, 0))[3] == 0
            assert img.getpixel((39, 19))[3] == 0
            assert img.getpixel((20, 10)) == (255, 0, 0, 255)
    
    def test_save_jpeg_is_opaque(self, padded_canvas, tmp_path):
        """Test JPEG output has no alpha channel."""
        path = str(tmp_path / 'icon.jpg')
        
        Encoder().save(padded_canvas, path)
        
        with Image.open(path) as img:
            assert img.format == 'JPEG'
            assert img.mode == 'RGB'
            assert img.size == (40, 20)
            r, g, b = img.getpixel((1, 10))
            assert min(r, g, b) > 230
    
    def test_jpeg_background_colour(self, padded_canvas):
        """Test transparent areas are flattened onto the configured colour."""
        data = Encoder(background=(0, 0, 0)).encode(padded_canvas, 'JPEG')
        
        img = Image.open(io.BytesIO(data))
        assert max(img.getpixel((1, 10))) < 25
    
    def test_jpeg_quality_used(self, padded_canvas, mocker):
        """Test JPEG is written at the configured quality."""
        save = mocker.spy(Image.Image, 'save')
        
        Encoder(quality=90).encode(padded_canvas, 'JPEG')
        
        assert save.call_args.kwargs['quality'] == 90
    
    def test_save_gif(self, padded_canvas, tmp_path):
        """Test GIF output."""
        path = str(tmp_path / 'icon.gif')
        
        Encoder().save(padded_canvas, path)
        
        with Image.open(path) as img:
            assert img.format == 'GIF'
            assert img.size == (40, 20)
    
    def test_save_unsupported_creates_nothing(self, padded_canvas, tmp_path):
        """Test no file is created for an unknown extension."""
        with pytest.raises(UnsupportedOutputFormatError):
            Encoder().save(padded_canvas, str(tmp_path / 'icon.bmp'))
        
        assert os.listdir(tmp_path) == []
    
    def test_save_overwrites(self, padded_canvas, tmp_path):
        """Test an existing file is replaced."""
        path = tmp_path / 'icon.png'
        path.write_bytes(b'old contents')
        
        Encoder().save(padded_canvas, str(path))
        
        with Image.open(path) as img:
            assert img.size == (40, 20)
        assert os.listdir(tmp_path) == ['icon.png']
    
    def test_save_missing_directory(self, padded_canvas, tmp_path):
        """Test a missing output directory raises FileIOError."""
        with pytest.raises(FileIOError):
            Encoder().save(padded_canvas, str(tmp_path / 'missing' / 'icon.png'))
    
    def test_save_write_failure_leaves_no_temp_file(self, padded_canvas, tmp_path, mocker):
        """Test a failed rename cleans up the temporary file."""
        mocker.patch('logogen.encoder.os.replace', side_effect=OSError('read-only'))
        
        with pytest.raises(FileIOError):
            Encoder().save(padded_canvas, str(tmp_path / 'icon.png'))
        
        assert os.listdir(tmp_path) == []
    
    def test_new_file_follows_umask(self, padded_canvas, tmp_path):
        """Test a new output gets 0666 less the umask, like a plain open()."""
        previous = os.umask(0o022)
        try:
            encoder = Encoder()
        finally:
            os.umask(previous)
        path = tmp_path / 'icon.png'
        
        encoder.save(padded_canvas, str(path))
        
        assert stat.S_IMODE(os.stat(path).st_mode) == 0o644
    
    def test_explicit_file_mode(self, padded_canvas, tmp_path):
        """Test file_mode overrides the umask default."""
        path = tmp_path / 'icon.png'
        
        Encoder(file_mode=0o640).save(padded_canvas, str(path))
        
        assert stat.S_IMODE(os.stat(path).st_mode) == 0o640
    
    def test_replaced_file_keeps_mode(self, padded_canvas, tmp_path):
        """Test overwriting an output keeps its existing permissions."""
        path = tmp_path / 'icon.png'
        path.write_bytes(b'old contents')
        os.chmod(path, 0o604)
        
        Encoder(file_mode=0o600).save(padded_canvas, str(path))
        
        assert stat.S_IMODE(os.stat(path).st_mode) == 0o604
