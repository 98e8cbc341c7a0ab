from .loader import apply_overrides, load_config
from .schema import IcConfig, InfojennConfig, SimilarityConfig

__all__ = [
    "load_config",
    "apply_overrides",
    "IcConfig",
    "InfojennConfig",
    "SimilarityConfig",
]
