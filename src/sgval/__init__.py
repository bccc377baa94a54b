"""sgval - Structural validation for subgraph manifests.

sgval checks a parsed subgraph manifest against the rules an indexing
engine relies on (handler targets, block handler filters and counts) before
the manifest is registered for execution.
"""

__version__ = "0.1.0"
__description__ = "Structural validation for subgraph manifests"

from sgval.config import SgvalConfig
from sgval.models import SubgraphManifest
from sgval.validation import ManifestValidationError, ManifestValidator, validate_manifest

__all__ = [
    "__version__",
    "__description__",
    "SgvalConfig",
    "SubgraphManifest",
    "ManifestValidator",
    "ManifestValidationError",
    "validate_manifest",
]
