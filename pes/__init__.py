"""Person Enrichment Service - people records enriched with age, gender and nationality guesses."""

__version__ = "0.1.0"

# Core exports
from .core.models import *

# Conditional imports based on available extras
try:
    from .api import *
except ImportError:
    pass
