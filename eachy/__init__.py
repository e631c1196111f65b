r"""
'   ___   __ _  ___ | |__   _   _
'  / _ \ / _` |/ __|| '_ \ | | | |
' |  __/| (_| || (__ | | | || |_| |
'  \___| \__,_| \___||_| |_| \__, |
'                            |___/

implement each(visit), get everything else.
"""
import logging

# expose the main classes
from .enumerable import Enumerable, IEnumerable

# expose the factory functions
from .factories import (
    IterableEnumerable,
    EachEnumerable,
    from_iterable,
    from_each,
    from_range,
    repeat,
    empty,
    generate,
    eachy,
    E,
)

# expose supporting types
from .types import Chunk, Key, MISSING, STOP, Traversable

# expose the error taxonomy
from .errors import (
    EnumerableError,
    EmptyError,
    NotFoundError,
    ArgumentError,
    ComparisonError,
    IdentityError,
    ZipIndexError,
    SampleIndexError,
)

# expose configuration
from .config import EachyConfig, configure, get_config

logging.getLogger(__name__).addHandler(logging.NullHandler())

# define what `import *` does
__all__ = [
    "Enumerable",
    "IEnumerable",
    "IterableEnumerable",
    "EachEnumerable",
    "from_iterable",
    "from_each",
    "from_range",
    "repeat",
    "empty",
    "generate",
    "eachy",
    "E",
    "Chunk",
    "Key",
    "MISSING",
    "STOP",
    "Traversable",
    "EnumerableError",
    "EmptyError",
    "NotFoundError",
    "ArgumentError",
    "ComparisonError",
    "IdentityError",
    "ZipIndexError",
    "SampleIndexError",
    "EachyConfig",
    "configure",
    "get_config",
]
