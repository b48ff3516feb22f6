"""
DimensionCatalog - Ordered list of target dimensions.
"""

import json
from pathlib import Path
from typing import Iterable, Iterator, List

from .dimension_spec import DimensionSpec
from .errors import ConfigError


# Desktop and store icon set; the ICNS/ICO entries of the old hard-coded
# list are left out because the encoder does not write those formats.
DEFAULT_DIMENSIONS = (
    (310, 310, 'Square310x310Logo.png'),
    (284, 284, 'Square284x284Logo.png'),
    (150, 150, 'Square150x150Logo.png'),
    (142, 142, 'Square142x142Logo.png'),
    (107, 107, 'Square107x107Logo.png'),
    (89, 89, 'Square89x89Logo.png'),
    (71, 71, 'Square71x71Logo.png'),
    (44, 44, 'Square44x44Logo.png'),
    (30, 30, 'Square30x30Logo.png'),
    (512, 512, 'icon.png'),
    (256, 256, '128x128@2x.png'),
    (50, 50, 'StoreLogo.png'),
    (128, 128, '128x128.png'),
    (32, 32, '32x32.png'),
)


class DimensionCatalog:
    """
    Ordered, read-only list of DimensionSpec entries.
    
    Order is preserved exactly as supplied. Duplicate names are not
    rejected; the later entry overwrites the earlier one's output.
    """
    
    def __init__(self, specs: Iterable[DimensionSpec]):
        self._specs = tuple(specs)
    
    @property
    def specs(self) -> tuple:
        return self._specs
    
    @property
    def names(self) -> List[str]:
        return [spec.name for spec in self._specs]
    
    @property
    def is_empty(self) -> bool:
        return not self._specs
    
    def __len__(self) -> int:
        return len(self._specs)
    
    def __iter__(self) -> Iterator[DimensionSpec]:
        return iter(self._specs)
    
    @classmethod
    def from_records(cls, records) -> 'DimensionCatalog':
        """Create from parsed ``{width, height, name}`` records."""
        if not isinstance(records, list):
            raise ConfigError(
                'DimensionCatalog.from_records',
                f"expected a list of dimension records, got {type(records).__name__}"
            )
        
        specs = []
        for index, record in enumerate(records):
            try:
                specs.append(DimensionSpec.from_dict(record))
            except ConfigError as e:
                raise ConfigError('DimensionCatalog.from_records', f"invalid record #{index}") from e
        return cls(specs)
    
    @classmethod
    def load(cls, filepath: str) -> 'DimensionCatalog':
        """Load a catalog from a JSON file."""
        path = Path(filepath)
        try:
            with open(path, 'r') as f:
                data = json.load(f)
        except OSError as e:
            raise ConfigError('DimensionCatalog.load', f"failed to read config file {filepath}") from e
        except ValueError as e:
            raise ConfigError('DimensionCatalog.load', f"failed to parse config file {filepath}") from e
        
        return cls.from_records(data)
    
    @classmethod
    def default(cls) -> 'DimensionCatalog':
        """Build the standard icon set."""
        return cls(DimensionSpec(width=w, height=h, name=name) for w, h, name in DEFAULT_DIMENSIONS)
