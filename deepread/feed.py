import datetime as dt
import email.utils
from xml.sax.saxutils import escape

from deepread.archive import ArchiveEntry

FEED_TITLE = "每日深读"
FEED_DESCRIPTION = "每日深读归档"
FEED_LANGUAGE = "zh-cn"
MAX_ITEMS = 30

QUOTES = {'"': "&quot;", "'": "&apos;"}


def xml_escape(value: str) -> str:
    return escape(value or "", QUOTES)


def rfc822_date(date: str) -> str:
    # Entry dates are published as midnight UTC.
    day = dt.date.fromisoformat(date)
    midnight = dt.datetime(day.year, day.month, day.day, tzinfo=dt.timezone.utc)
    return email.utils.format_datetime(midnight, usegmt=True)


def item_link(base_url: str, path: str) -> str:
    base = (base_url or "").rstrip("/")
    if not base:
        return path
    return f"{base}/{path.lstrip('/')}"


def build_item(entry: ArchiveEntry, base_url: str) -> str:
    link = xml_escape(item_link(base_url, entry.path))
    permalink = "true" if "://" in (base_url or "") else "false"
    return f"""    <item>
      <title>{xml_escape(entry.title)}</title>
      <link>{link}</link>
      <guid isPermaLink="{permalink}">{link}</guid>
      <pubDate>{rfc822_date(entry.date)}</pubDate>
    </item>"""


def project(entries: list[ArchiveEntry], base_url: str = "") -> str:
    items = "\n".join(build_item(entry, base_url) for entry in entries[:MAX_ITEMS])
    return f"""<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0">
  <channel>
    <title>{FEED_TITLE}</title>
    <link>{xml_escape(base_url)}</link>
    <description>{FEED_DESCRIPTION}</description>
    <language>{FEED_LANGUAGE}</language>
{items}
  </channel>
</rss>
"""
