# urlspecs/preprocessing/__init__.py

from .normalizer import NormalizedUrl, normalize
from .domain import DomainInfo, decompose, is_ip_literal
from .char_stats import (
    CharacterStats,
    scan,
    continuation_rate,
    unescape_for_special_count,
)
from .url_processing import (
    FEATURE_NAMES,
    FeatureVector,
    URLFeatureExtractor,
    assemble,
    extract,
    round_ratio,
)

__all__ = [
    # normalizer
    "NormalizedUrl",
    "normalize",
    # domain
    "DomainInfo",
    "decompose",
    "is_ip_literal",
    # character statistics
    "CharacterStats",
    "scan",
    "continuation_rate",
    "unescape_for_special_count",
    # assembly
    "FEATURE_NAMES",
    "FeatureVector",
    "URLFeatureExtractor",
    "assemble",
    "extract",
    "round_ratio",
]
