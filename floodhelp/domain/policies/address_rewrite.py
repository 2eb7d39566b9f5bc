"""Address rewrite policy — pure text transforms for Thai postal addresses.

Informal addresses typed by field workers often fail to geocode verbatim.
Each strategy below rewrites the address into a simpler query; the
resolver tries them in ``STRATEGY_ORDER`` until the provider finds a match.

Every builder returns ``None`` when its precondition fails (no postal code,
no district marker, ...) so the resolver can skip it without a network call.
No I/O happens in this module.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass

from floodhelp.domain.value_objects.enums import GeocodeStrategy

POSTAL_CODE_RE = re.compile(r"\d{5}")
TRAILING_POSTAL_CODE_RE = re.compile(r"\s*\d{5}\s*$")

# Formal locality words → standard abbreviations, applied in order.
FORMAL_TERM_ABBREVIATIONS: list[tuple[re.Pattern[str], str]] = [
    (re.compile("ตำบล"), "ต."),  # sub-district
    (re.compile("อำเภอ"), "อ."),  # district
    (re.compile("จังหวัด"), "จ."),  # province
    (re.compile("ถนน"), "ถ."),  # road
]

# House/unit number, optional road marker, then one bare word.
STREET_RE = re.compile(r"^[\d/\-]+\s*(?:ถ\.|ถนน)?\s*(\S+)")
DISTRICT_RE = re.compile(r"(?:อ\.|อำเภอ)(\S+)")
DISTRICT_PREFIX = "อ."
LOCALITY_RE = re.compile(r"(?:อ\.|อำเภอ|ต\.|ตำบล)(\S+)")
_FORMAL_LOCALITY_WORD_RE = re.compile("ตำบล|อำเภอ")
_ABBREVIATED_LOCALITY_PREFIX_RE = re.compile(r"^(อ\.|ต\.)")


@dataclass(frozen=True)
class StreetDistrict:
    street: str
    district: str

    @property
    def query(self) -> str:
        return f"{self.street} {DISTRICT_PREFIX}{self.district}"


@dataclass(frozen=True)
class Locality:
    matched: str
    name: str

    @property
    def query(self) -> str:
        remainder = _FORMAL_LOCALITY_WORD_RE.sub("", self.matched, count=1)
        remainder = _ABBREVIATED_LOCALITY_PREFIX_RE.sub("", remainder)
        return f"{remainder} {self.name}"


def has_postal_code(address: str) -> bool:
    return POSTAL_CODE_RE.search(address) is not None


def strip_postal_code(address: str) -> str:
    """Remove a trailing 5-digit postal code and the whitespace around it."""
    return TRAILING_POSTAL_CODE_RE.sub("", address, count=1)


def abbreviate_formal_terms(address: str) -> str:
    """Replace formal locality words with abbreviations and drop the postal code."""
    for pattern, replacement in FORMAL_TERM_ABBREVIATIONS:
        address = pattern.sub(replacement, address)
    return strip_postal_code(address)


def extract_street_district(address: str) -> StreetDistrict | None:
    """Pick out the leading street part and the district name.

    Both parts are required; a partial match returns None.
    """
    street = STREET_RE.search(address)
    district = DISTRICT_RE.search(address)
    if not street or not district:
        return None
    return StreetDistrict(street=street.group(0), district=district.group(1))


def extract_locality(address: str) -> Locality | None:
    """Return the first district / sub-district name in the address."""
    match = LOCALITY_RE.search(address)
    if not match:
        return None
    return Locality(matched=match.group(0), name=match.group(1))


# ─── Strategy query builders ────────────────────────────────────────


def exact_query(address: str) -> str | None:
    return address


def postal_stripped_query(address: str) -> str | None:
    if not has_postal_code(address):
        return None
    return strip_postal_code(address)


def abbreviated_query(address: str) -> str | None:
    abbreviated = abbreviate_formal_terms(address)
    # Identical text was already tried as the exact query
    return abbreviated if abbreviated != address else None


def street_district_query(address: str) -> str | None:
    parts = extract_street_district(address)
    return parts.query if parts else None


def locality_query(address: str) -> str | None:
    locality = extract_locality(address)
    return locality.query if locality else None


STRATEGY_ORDER: list[tuple[GeocodeStrategy, Callable[[str], str | None]]] = [
    (GeocodeStrategy.EXACT, exact_query),
    (GeocodeStrategy.STRIP_POSTAL_CODE, postal_stripped_query),
    (GeocodeStrategy.ABBREVIATE, abbreviated_query),
    (GeocodeStrategy.STREET_DISTRICT, street_district_query),
    (GeocodeStrategy.LOCALITY, locality_query),
]
