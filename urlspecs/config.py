# urlspecs/config.py

import os
from typing import Optional, Tuple


def _env_bool(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_decimals(name: str, default: Optional[int]) -> Optional[int]:
    value = os.environ.get(name)
    if value is None:
        return default
    if value.strip().lower() in {"", "none", "off"}:
        return None
    return int(value)


# Normalization.
DEFAULT_SCHEME = os.environ.get("URLSPECS_DEFAULT_SCHEME", "https")

# Ratio rounding: half-up to this many decimal places, None keeps full precision.
# Applies to LetterRatioInURL, DegitRatioInURL, SpecialCharRatioInURL and
# CharContinuationRate alike.
RATIO_DECIMALS: Optional[int] = _env_decimals("URLSPECS_RATIO_DECIMALS", 3)

# Domain decomposition.
# "host" keeps the full hostname (www. included), "registrable" keeps label + suffix.
DOMAIN_POLICIES = ("host", "registrable")
DOMAIN_POLICY = os.environ.get("URLSPECS_DOMAIN_POLICY", "host")

USE_PUBLIC_SUFFIX_LIST = _env_bool("URLSPECS_USE_PUBLIC_SUFFIX_LIST", True)
# Empty tuple: use the snapshot bundled with tldextract, never fetch.
SUFFIX_LIST_URLS: Tuple[str, ...] = tuple(
    u for u in os.environ.get("URLSPECS_SUFFIX_LIST_URLS", "").split(",") if u.strip()
)
INCLUDE_PSL_PRIVATE_DOMAINS = False

# Special characters are counted after stripping scheme/www and decoding %XX and
# HTML entities.
DECODE_BEFORE_SPECIAL_COUNT = _env_bool("URLSPECS_DECODE_SPECIALS", True)

# Characters a host may never contain (WHATWG forbidden host code points).
FORBIDDEN_HOST_CHARS = set("\x00\t\n\r #/:<>?@[\\]^|%")

# Remote prediction service.
PREDICTION_API_URL = os.environ.get(
    "URLSPECS_PREDICTION_API_URL",
    "https://dss.ga-fl.net/public/api/v1/OnlyURLSpecs/prediction/predict",
)
REQUEST_TIMEOUT = float(os.environ.get("URLSPECS_REQUEST_TIMEOUT", "10"))

# Logging.
LOG_LEVEL = os.environ.get("URLSPECS_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
