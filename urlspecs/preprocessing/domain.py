# urlspecs/preprocessing/domain.py

import logging
import re
from dataclasses import dataclass
from functools import lru_cache
from typing import List, Optional

import tldextract

from ..config import (
    DOMAIN_POLICIES,
    DOMAIN_POLICY,
    INCLUDE_PSL_PRIVATE_DOMAINS,
    SUFFIX_LIST_URLS,
    USE_PUBLIC_SUFFIX_LIST,
)
from ..errors import InvalidHostError

logger = logging.getLogger(__name__)

_OCTET = r"(25[0-5]|2[0-4]\d|1\d\d|[1-9]?\d)"
IPV4_RE = re.compile(rf"^{_OCTET}(\.{_OCTET}){{3}}$")


@dataclass(frozen=True)
class DomainInfo:
    domain: str
    tld: str
    subdomain_count: int
    is_ip: bool
    registrable_domain: str = ""


@lru_cache(maxsize=1)
def get_suffix_extractor() -> tldextract.TLDExtract:
    """Public Suffix List matcher, built once per process and shared read-only."""
    extractor = tldextract.TLDExtract(
        cache_dir=None,
        suffix_list_urls=SUFFIX_LIST_URLS,
        fallback_to_snapshot=True,
        include_psl_private_domains=INCLUDE_PSL_PRIVATE_DOMAINS,
    )
    logger.info(
        "Public suffix list ready (%s)",
        ", ".join(SUFFIX_LIST_URLS) if SUFFIX_LIST_URLS else "bundled snapshot",
    )
    return extractor


def is_ip_literal(host: str) -> bool:
    """Dotted-quad IPv4 with octets 0-255, or anything containing ':' (IPv6)."""
    return bool(IPV4_RE.match(host)) or ":" in host


def _labels(host: str) -> List[str]:
    return [label for label in host.split(".") if label]


def _naive_split(host: str, labels: List[str], policy: str) -> DomainInfo:
    if len(labels) < 2:
        return DomainInfo(domain=host, tld="", subdomain_count=0, is_ip=False)
    registrable = ".".join(labels[-2:])
    return DomainInfo(
        domain=registrable if policy == "registrable" else host,
        tld=labels[-1],
        subdomain_count=max(0, len(labels) - 2),
        is_ip=False,
        registrable_domain=registrable,
    )


def decompose(
    host: str,
    policy: str = DOMAIN_POLICY,
    use_suffix_list: Optional[bool] = None,
) -> DomainInfo:
    """
    Split a host into TLD, registrable domain and subdomain label count.

    IP literals short-circuit with an empty TLD. Other hosts go through the
    Public Suffix List; hosts whose suffix is unknown (or every host, when the
    list is disabled) use the last label as TLD. A single-label host such as
    `localhost` always yields an empty TLD and no subdomains.
    """
    if policy not in DOMAIN_POLICIES:
        raise ValueError(f"Unknown domain policy {policy!r}, expected one of {DOMAIN_POLICIES}")
    if not host or not host.strip("."):
        raise InvalidHostError("Empty host")

    if is_ip_literal(host):
        return DomainInfo(domain=host, tld="", subdomain_count=0, is_ip=True)

    labels = _labels(host)
    if len(labels) < 2:
        return DomainInfo(domain=host, tld="", subdomain_count=0, is_ip=False)

    if use_suffix_list is None:
        use_suffix_list = USE_PUBLIC_SUFFIX_LIST
    if not use_suffix_list:
        return _naive_split(host, labels, policy)

    parts = get_suffix_extractor()(host)
    if not parts.suffix:
        logger.debug("Suffix of %r not in public suffix list, using last label", host)
        return _naive_split(host, labels, policy)

    registrable = f"{parts.domain}.{parts.suffix}" if parts.domain else ""
    subdomains = _labels(parts.subdomain)
    return DomainInfo(
        domain=registrable if policy == "registrable" and registrable else host,
        tld=parts.suffix,
        subdomain_count=len(subdomains),
        is_ip=False,
        registrable_domain=registrable,
    )
