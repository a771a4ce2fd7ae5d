"""Document Numbering

Sequential human-facing numbers of the form "{prefix}-{padded}-{suffix}".
Each (prefix, suffix) pair is its own sequence.
"""

import re
from typing import Iterable, Optional

DEFAULT_PAD_WIDTH = 3


def format_document_number(prefix: str, sequence: int, suffix: str, pad_width: int = DEFAULT_PAD_WIDTH) -> str:
    return f"{prefix}-{sequence:0{pad_width}d}-{suffix}"


def parse_sequence(document_number: Optional[str], prefix: str, suffix: str) -> Optional[int]:
    """
    Extract the sequence component of a document number

    Returns None when the number does not belong to the (prefix, suffix)
    sequence or is malformed.
    """
    if not isinstance(document_number, str):
        return None
    pattern = rf"{re.escape(prefix)}-([0-9]+)-{re.escape(suffix)}"
    match = re.fullmatch(pattern, document_number)
    if not match:
        return None
    return int(match.group(1))


def next_document_number(
    existing_numbers: Iterable[str],
    prefix: str,
    suffix: str,
    pad_width: int = DEFAULT_PAD_WIDTH,
) -> str:
    """
    Compute the next document number for a (prefix, suffix) sequence

    Args:
        existing_numbers: Every document number currently in the collection
        prefix: Number prefix of the new document (e.g., "INV")
        suffix: Number suffix of the new document (e.g., "2024")
        pad_width: Minimum digits of the sequence component

    Returns:
        A number one past the highest in the sequence, guaranteed absent
        from existing_numbers
    """
    if pad_width < 1:
        raise ValueError(f"pad_width must be >= 1, got {pad_width}")

    taken = {number for number in existing_numbers if isinstance(number, str)}

    sequences = [parse_sequence(number, prefix, suffix) for number in taken]
    highest = max((seq for seq in sequences if seq is not None), default=0)

    candidate = highest + 1
    document_number = format_document_number(prefix, candidate, suffix, pad_width)
    # Unpadded legacy entries can share a sequence value with a padded one
    while document_number in taken:
        candidate += 1
        document_number = format_document_number(prefix, candidate, suffix, pad_width)

    return document_number
