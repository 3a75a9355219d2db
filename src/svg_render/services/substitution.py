"""Whitelist-guarded placeholder substitution for SVG documents."""

import re
from typing import Dict, Mapping, NamedTuple, Tuple


# Replacement values may only contain these characters, so no markup or
# script can be injected through a placeholder.
ALLOWED_VALUE_PATTERN = re.compile(r"[A-Za-z0-9°%.,\-_#]*")

APOSTROPHE = "'"


class SubstitutionResult(NamedTuple):
    """Rendered document plus the placeholders that were applied or rejected."""
    document: str
    applied: Tuple[str, ...]
    rejected: Tuple[str, ...]


def is_allowed_value(value: str) -> bool:
    """Check a replacement value against the character whitelist."""
    return ALLOWED_VALUE_PATTERN.fullmatch(value) is not None


def strip_apostrophes(document: str) -> str:
    """Remove every apostrophe from the document."""
    return document.replace(APOSTROPHE, "")


def apply_substitutions(document: str, replacements: Mapping[str, str]) -> SubstitutionResult:
    """
    Replace every occurrence of each placeholder with its value.
    
    Values failing the whitelist are skipped and their placeholder is left in
    place. All accepted placeholders are replaced in one pass over the original
    document, so inserted values are never scanned again. Where placeholders
    overlap, the longest one wins.
    
    Args:
        document: SVG markup to transform
        replacements: Mapping of placeholder to replacement value
        
    Returns:
        SubstitutionResult with the new document and the placeholders
        that were applied and rejected
    """
    accepted: Dict[str, str] = {}
    rejected = []
    
    for placeholder, value in replacements.items():
        if not placeholder:
            continue
        if is_allowed_value(value):
            accepted[placeholder] = value
        else:
            rejected.append(placeholder)
    
    if not accepted:
        return SubstitutionResult(document, (), tuple(rejected))
    
    pattern = re.compile(
        "|".join(re.escape(p) for p in sorted(accepted, key=len, reverse=True))
    )
    rendered = pattern.sub(lambda match: accepted[match.group(0)], document)
    
    return SubstitutionResult(rendered, tuple(accepted), tuple(rejected))
