"""
Pytest fixtures for logogen tests.
"""

import json
import logging

import pytest
from PIL import Image


def _save_image(path, size=(1080, 1080), mode='RGB', color='red', format=None):
    img = Image.new(mode, size, color=color)
    img.save(path, format=format)
    return str(path)


@pytest.fixture
def make_image(tmp_path):
    """Fixture returning a factory that writes a test image into tmp_path."""
    def factory(name='source.png', **kwargs):
        return _save_image(tmp_path / name, **kwargs)
    return factory


@pytest.fixture
def source_png_path(make_image):
    """Fixture providing an opaque 1080x1080 PNG."""
    return make_image('source.png')


@pytest.fixture
def source_image(source_png_path):
    """Fixture providing a loaded 1080x1080 SourceImage."""
    from logogen.source_loader import SourceLoader
    
    return SourceLoader().load(source_png_path)


@pytest.fixture
def sample_catalog():
    """Fixture providing a square and a tall target."""
    from logogen.dimension_catalog import DimensionCatalog
    from logogen.dimension_spec import DimensionSpec
    
    return DimensionCatalog([
        DimensionSpec(width=100, height=100, name='a.png'),
        DimensionSpec(width=50, height=200, name='b.png'),
    ])


@pytest.fixture
def catalog_file(tmp_path, sample_catalog):
    """Fixture providing the sample catalog written as JSON."""
    filepath = tmp_path / 'dimensions.json'
    filepath.write_text(json.dumps([
        {'width': s.width, 'height': s.height, 'name': s.name} for s in sample_catalog
    ]))
    return str(filepath)


@pytest.fixture
def cache(tmp_path, logger):
    """Fixture providing a CompletionCache rooted in tmp_path."""
    from logogen.completion_cache import CompletionCache
    
    return CompletionCache(root=str(tmp_path / 'cache'), logger=logger)


@pytest.fixture
def orchestrator(cache, logger):
    """Fixture providing an Orchestrator using the temporary cache."""
    from logogen.orchestrator import Orchestrator
    
    return Orchestrator(cache=cache, max_workers=4, logger=logger)


@pytest.fixture
def output_dir(tmp_path):
    return str(tmp_path / 'output')


@pytest.fixture
def logger():
    """Fixture providing a logger."""
    return logging.getLogger('test')
