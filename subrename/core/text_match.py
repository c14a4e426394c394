"""
text_match.py - Text Matching Tools

Provides substring matching and replacement on base names
"""

from typing import Callable, Optional
import os
import re


def make_matcher(keyword: str, case_sensitive: bool = True) -> Callable[[str], bool]:
    """Build the name predicate used during the walk"""
    if case_sensitive:
        return lambda name: keyword in name

    pattern = re.compile(re.escape(keyword), re.IGNORECASE)
    return lambda name: pattern.search(name) is not None


def replace_text(text: str, old: str, new: str, case_sensitive: bool = True) -> str:
    """
    Replace string in text

    Matching is left to right and non-overlapping. In case-insensitive mode
    the unmatched characters keep their casing and `new` is inserted as-is.

    Args:
        text: Original text
        old: String to replace
        new: Replacement string
        case_sensitive: Whether case-sensitive

    Returns:
        Replaced text
    """
    if not old:
        return text

    if case_sensitive:
        return text.replace(old, new)
    else:
        # A function replacement keeps backslashes in `new` literal
        pattern = re.compile(re.escape(old), re.IGNORECASE)
        return pattern.sub(lambda _m: new, text)


def is_valid_filename(name: str) -> tuple[bool, Optional[str]]:
    """
    Check if name can be used as a single path component

    Args:
        name: Filename

    Returns:
        (is_valid, error_reason)
    """
    if not name:
        return False, "Filename cannot be empty"

    if name in (".", ".."):
        return False, f"Filename cannot be '{name}'"

    if os.sep in name or (os.altsep and os.altsep in name):
        return False, "Filename contains a path separator"

    if "\0" in name:
        return False, "Filename contains a NUL character"

    # Filesystems limit the encoded length, not the character count
    if len(os.fsencode(name)) > 255:
        return False, "Filename exceeds 255 bytes"

    return True, None
