__path__ = __import__("pkgutil").extend_path(__path__, __name__)  # NOQA: F-821
__title__ = 'trieparse'
__license__ = 'MIT'
__version__ = "0.1.0"

from .charmap import *
from .faults import *
from .parser import *
from .targets import *
from .trie import *
from .utils import *

VersionInfo = __import__("collections").namedtuple("VersionInfo", (
    "major",
    "minor",
    "micro",
    "releaselevel",
    "serial",
    "metadata"
))

version_info = VersionInfo(0, 1, 0, "final", 0, "")

__all__ = (
    "__path__",
    "__title__",
    "__license__",
    "__version__",
    "version_info"
)

# Character index function
__all__ += charmap.__all__  # type: ignore[attr-defined]
# Faults and their codes
__all__ += faults.__all__  # type: ignore[attr-defined]
# Parser engine and registration builder
__all__ += parser.__all__  # type: ignore[attr-defined]
# Bound target kinds
__all__ += targets.__all__  # type: ignore[attr-defined]
# Trie nodes and walk
__all__ += trie.__all__  # type: ignore[attr-defined]
# Sentinel and helpers
__all__ += utils.__all__  # type: ignore[attr-defined]
