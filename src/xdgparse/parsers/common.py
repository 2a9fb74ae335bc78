from __future__ import annotations

import re
from typing import List, Optional, Tuple

# [ll], [ll_CC], [ll@mod], [ll_CC@mod]
_LOCALE_SUFFIX_RE = re.compile(r"\[((?:[a-z]{2,3})(?:_[A-Z]{2})?(?:@\w+)?)\]$")

_LIST_DELIMITER_RE = re.compile(r"(?<!\\);")


def split_key(key: str) -> Tuple[str, Optional[str]]:
    """
    Split a key into its base name and locale suffix.

    Examples:
      "Name"          -> ("Name", None)
      "Name[es_CL]"   -> ("Name", "es_CL")
      "Name[sr@Latn]" -> ("Name", "sr@Latn")
    """
    k = (key or "").strip()
    m = _LOCALE_SUFFIX_RE.search(k)
    if not m:
        return k, None
    return k[: m.start()], m.group(1)


def strip_locale(key: str) -> str:
    return split_key(key)[0]


def split_list(text: str) -> List[str]:
    """
    Split a list value on `;` not preceded by a backslash.

    A single trailing empty item (the terminating `;`) is dropped:
      "a;b;"  -> ["a", "b"]
      "a\\;b" -> ["a\\;b"]
    """
    if not text:
        return []
    items = _LIST_DELIMITER_RE.split(text)
    if len(items) > 1 and items[-1] == "":
        items.pop()
    return items


def has_list_delimiter(text: str) -> bool:
    return _LIST_DELIMITER_RE.search(text) is not None


def locale_candidates(locale: str) -> List[str]:
    """
    Lookup order for a localized key, most specific first:
      lang_COUNTRY@MODIFIER, lang_COUNTRY, lang@MODIFIER, lang
    The encoding part (".UTF-8") is ignored.
    """
    # lang_COUNTRY.ENCODING@MODIFIER
    loc, _, modifier = (locale or "").partition("@")
    base = loc.split(".", 1)[0]
    lang, _, country = base.partition("_")

    out: List[str] = []

    def _add(c: str) -> None:
        if c and c not in out:
            out.append(c)

    if country and modifier:
        _add(f"{lang}_{country}@{modifier}")
    if country:
        _add(f"{lang}_{country}")
    if modifier:
        _add(f"{lang}@{modifier}")
    _add(lang)
    return out
