"""Conversions between editor widget text and DesktopEntry fields."""

from .codec import split_list


def join_list(items):
    return ";".join(items)


def optional_text(text):
    text = text.strip()
    return text or None


def parse_pairs(text, require_value=False):
    # One "key=value" per line, as typed into the localized/extra boxes
    pairs = []
    for line in text.splitlines():
        line = line.strip()
        if not line or "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip()
        if not key or (require_value and not value):
            continue
        pairs.append((key, value))
    return pairs


def format_pairs(pairs):
    return "\n".join(f"{key}={value}" for key, value in pairs)


__all__ = ["split_list", "join_list", "optional_text", "parse_pairs", "format_pairs"]
