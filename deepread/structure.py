"""
Coarse shape checks on generated pages.

These are regex heuristics, not an HTML parser: they only look for the
document root, count <article> units and pull out a display title.
"""

import html
import re

SITE_NAME = "每日深读"

ROOT_RE = re.compile(r"<html\b", re.IGNORECASE)
UNIT_RE = re.compile(r"<article\b", re.IGNORECASE)
TITLE_RE = re.compile(r"<title[^>]*>([^<]+)</title>", re.IGNORECASE)
H1_RE = re.compile(r"<h1[^>]*>([^<]+)", re.IGNORECASE)
FENCE_RE = re.compile(r"^```[\w-]*\s*\n(.*?)\n?```\s*$", re.DOTALL)


def strip_code_fence(doc: str | None) -> str | None:
    if not doc:
        return doc
    text = doc.strip()
    m = FENCE_RE.match(text)
    if m:
        return m.group(1).strip()
    return text


def is_structurally_valid(doc: str | None) -> bool:
    return bool(doc) and ROOT_RE.search(doc) is not None


def count_units(doc: str | None) -> int:
    if not doc:
        return 0
    return len(UNIT_RE.findall(doc))


def clean_text(value: str) -> str:
    return re.sub(r"\s+", " ", html.unescape(value)).strip()


def extract_title(doc: str | None, date: str) -> str:
    doc = doc or ""

    m = TITLE_RE.search(doc)
    if m and clean_text(m.group(1)):
        return clean_text(m.group(1))

    h1 = H1_RE.search(doc)
    if h1 and clean_text(h1.group(1)):
        return f"{SITE_NAME} - {date} - {clean_text(h1.group(1))}"

    return f"{SITE_NAME} - {date}"
