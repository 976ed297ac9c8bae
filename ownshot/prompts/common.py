# FILE: ownshot/prompts/common.py
"""
Shared helpers for prompt builders: enum phrase lookup, slider tiers, assembly
"""
from typing import Iterable, Mapping, Optional, Sequence, Tuple

from ownshot.models.common import require_option


def describe(table: Mapping[str, str], value: str, field: str) -> str:
    """
    Phrase for an enum value

    Raises UnknownOptionError instead of emitting nothing for a value the
    table does not know.
    """
    return require_option(table, value, field)


def tier(value: int, bounds: Sequence[Tuple[int, str]], top: str) -> str:
    """
    Bucket a slider value into a phrase

    bounds are ascending inclusive upper limits: the first (upper, phrase)
    with value <= upper wins, anything above the last bound gets top.
    """
    for upper, phrase in bounds:
        if value <= upper:
            return phrase
    return top


def join_sections(sections: Iterable[Optional[str]], separator: str) -> str:
    """Join the non-empty sections in the order given"""
    return separator.join(section for section in sections if section)


def prompt_preview(prompt: str, max_length: int = 200) -> str:
    """Shortened prompt for UI display and logs"""
    if len(prompt) <= max_length:
        return prompt
    return prompt[:max_length] + "..."
