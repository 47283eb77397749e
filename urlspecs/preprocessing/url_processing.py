# urlspecs/preprocessing/url_processing.py

import logging
import math
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Tuple

from sklearn.base import BaseEstimator, TransformerMixin

from ..config import (
    DECODE_BEFORE_SPECIAL_COUNT,
    DEFAULT_SCHEME,
    DOMAIN_POLICY,
    RATIO_DECIMALS,
)
from .char_stats import CharacterStats, scan, unescape_for_special_count
from .domain import DomainInfo, decompose
from .normalizer import NormalizedUrl, normalize

logger = logging.getLogger(__name__)

# Attribute name -> field name expected by the prediction service, in schema order.
FEATURE_SCHEMA: Tuple[Tuple[str, str], ...] = (
    ("url", "URL"),
    ("url_length", "URLLength"),
    ("domain", "Domain"),
    ("domain_length", "DomainLength"),
    ("is_domain_ip", "IsDomainIP"),
    ("tld", "TLD"),
    ("tld_length", "TLDLength"),
    ("no_of_subdomain", "NoOfSubDomain"),
    ("no_of_letters", "NoOfLettersInURL"),
    ("letter_ratio", "LetterRatioInURL"),
    ("no_of_digits", "NoOfDegitsInURL"),
    ("digit_ratio", "DegitRatioInURL"),
    ("no_of_equals", "NoOfEqualsInURL"),
    ("no_of_qmark", "NoOfQMarkInURL"),
    ("no_of_ampersand", "NoOfAmpersandInURL"),
    ("no_of_other_special_chars", "NoOfOtherSpecialCharsInURL"),
    ("special_char_ratio", "SpecialCharRatioInURL"),
    ("char_continuation_rate", "CharContinuationRate"),
)
FEATURE_NAMES: List[str] = [name for _, name in FEATURE_SCHEMA]


@dataclass(frozen=True)
class FeatureVector:
    """
    Lexical features of one URL.

    Ratio fields (letter_ratio, digit_ratio, special_char_ratio and
    char_continuation_rate) share one rounding policy: half-up to
    RATIO_DECIMALS places, or full precision when that is None.
    """
    url: str
    url_length: int
    domain: str
    domain_length: int
    is_domain_ip: int
    tld: str
    tld_length: int
    no_of_subdomain: int
    no_of_letters: int
    letter_ratio: float
    no_of_digits: int
    digit_ratio: float
    no_of_equals: int
    no_of_qmark: int
    no_of_ampersand: int
    no_of_other_special_chars: int
    special_char_ratio: float
    char_continuation_rate: float

    def as_dict(self) -> Dict[str, Any]:
        """Fields keyed by their service names, in schema order."""
        return {name: getattr(self, attr) for attr, name in FEATURE_SCHEMA}


def round_ratio(value: float, decimals: Optional[int] = RATIO_DECIMALS) -> float:
    """Round half-up (0.0005 -> 0.001), or return `value` untouched when decimals is None."""
    if decimals is None:
        return value
    scale = 10 ** decimals
    return math.floor(value * scale + 0.5) / scale


def assemble(
    normalized: NormalizedUrl,
    domain_info: DomainInfo,
    stats: CharacterStats,
    special_stats: Optional[CharacterStats] = None,
    ratio_decimals: Optional[int] = RATIO_DECIMALS,
) -> FeatureVector:
    """
    Combine the normalized URL, its domain split and its character statistics.

    `special_stats`, when given, supplies NoOfOtherSpecialCharsInURL (typically
    the scan of the decoded URL); every other count comes from `stats`.
    """
    url_length = len(normalized.url)
    other_specials = (special_stats or stats).other_specials
    special_total = other_specials + stats.delimiters

    def ratio(count: int) -> float:
        return round_ratio(count / url_length, ratio_decimals) if url_length > 0 else 0.0

    return FeatureVector(
        url=normalized.url,
        url_length=url_length,
        domain=domain_info.domain,
        domain_length=len(domain_info.domain),
        is_domain_ip=int(domain_info.is_ip),
        tld=domain_info.tld,
        tld_length=len(domain_info.tld),
        no_of_subdomain=domain_info.subdomain_count,
        no_of_letters=stats.letters,
        letter_ratio=ratio(stats.letters),
        no_of_digits=stats.digits,
        digit_ratio=ratio(stats.digits),
        no_of_equals=stats.equals_signs,
        no_of_qmark=stats.question_marks,
        no_of_ampersand=stats.ampersands,
        no_of_other_special_chars=other_specials,
        special_char_ratio=ratio(special_total),
        char_continuation_rate=round_ratio(stats.continuation_rate, ratio_decimals),
    )


def extract(
    raw_url: str,
    default_scheme: str = DEFAULT_SCHEME,
    domain_policy: str = DOMAIN_POLICY,
    ratio_decimals: Optional[int] = RATIO_DECIMALS,
    decode_specials: bool = DECODE_BEFORE_SPECIAL_COUNT,
) -> FeatureVector:
    """
    Full pipeline: normalize -> decompose host / scan characters -> assemble.

    Pure and reentrant. Raises InvalidUrlError for empty or unparseable input;
    no FeatureVector is produced in that case.
    """
    normalized = normalize(raw_url, default_scheme=default_scheme)
    domain_info = decompose(normalized.host, policy=domain_policy)
    stats = scan(normalized.url)
    special_stats = scan(unescape_for_special_count(normalized.url)) if decode_specials else None

    fv = assemble(normalized, domain_info, stats, special_stats, ratio_decimals)
    logger.debug("Extracted features for %s: %s", normalized.url, fv)
    return fv


class URLFeatureExtractor(BaseEstimator, TransformerMixin):
    """
    Lexical URL features as a scikit-learn transformer.

    transform(X) expects X to be an iterable of URL strings and returns a list
    of dicts keyed by the service field names, suitable for a DictVectorizer
    (string fields such as Domain and TLD become one-hot columns there).
    The URL itself is left out unless include_url=True.
    Invalid URLs raise InvalidUrlError.
    """

    def __init__(
        self,
        default_scheme: str = DEFAULT_SCHEME,
        domain_policy: str = DOMAIN_POLICY,
        ratio_decimals: Optional[int] = RATIO_DECIMALS,
        decode_specials: bool = DECODE_BEFORE_SPECIAL_COUNT,
        include_url: bool = False,
    ):
        self.default_scheme = default_scheme
        self.domain_policy = domain_policy
        self.ratio_decimals = ratio_decimals
        self.decode_specials = decode_specials
        self.include_url = include_url

    def fit(self, X: Iterable, y=None):
        # stateless
        return self

    def transform(self, X: Iterable) -> List[Dict[str, Any]]:
        features = []
        for url in X:
            fv = extract(
                url,
                default_scheme=self.default_scheme,
                domain_policy=self.domain_policy,
                ratio_decimals=self.ratio_decimals,
                decode_specials=self.decode_specials,
            )
            row = fv.as_dict()
            if not self.include_url:
                row.pop("URL")
            features.append(row)
        return features

    def get_feature_names_out(self, input_features=None) -> List[str]:
        if self.include_url:
            return list(FEATURE_NAMES)
        return [name for name in FEATURE_NAMES if name != "URL"]
