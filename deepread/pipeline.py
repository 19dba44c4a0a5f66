"""
One run: produce the day's page, fall back if needed, then update the
archive index and the RSS feed.
"""

import datetime as dt
import enum
import logging
from dataclasses import dataclass
from pathlib import Path

from deepread.archive import ArchiveEntry, ArchiveError, ArchiveStore, check_date
from deepread.config import Settings
from deepread.feed import MAX_ITEMS, project
from deepread.producer import OpenAIProducer
from deepread.prompts import SYSTEM_PROMPT, fallback_html, top_up_prompt, user_prompt
from deepread.structure import count_units, extract_title, is_structurally_valid, strip_code_fence

log = logging.getLogger(__name__)

# Below this many <article> units, one top-up request is made.
MIN_ARTICLES = 24


class RunStatus(enum.Enum):
    GENERATED = "generated"
    FALLBACK = "fallback"
    FATAL = "fatal"


@dataclass
class RunResult:
    status: RunStatus
    date: str
    page_path: Path | None = None
    title: str | None = None
    article_count: int = 0
    error: str | None = None

    @property
    def exit_code(self) -> int:
        return 1 if self.status is RunStatus.FATAL else 0


def utc_today_str() -> str:
    return dt.datetime.now(dt.timezone.utc).strftime("%Y-%m-%d")


def produce_page(producer, date: str) -> tuple[str, bool]:
    """
    Returns (html, used_fallback). Makes at most one top-up request when the
    first page is short on <article> units.
    """
    page = strip_code_fence(producer.generate(SYSTEM_PROMPT, user_prompt(date)))
    if is_structurally_valid(page):
        log.info("Using generated content (%d articles)", count_units(page))
        used_fallback = False
    else:
        log.warning("No usable page from the API; using fallback content")
        page = fallback_html(date)
        used_fallback = True

    if count_units(page) < MIN_ARTICLES and producer.available:
        log.info("Only %d articles (< %d); requesting a top-up pass", count_units(page), MIN_ARTICLES)
        retry = strip_code_fence(producer.generate(SYSTEM_PROMPT, top_up_prompt(date)))
        if is_structurally_valid(retry) and count_units(retry) > count_units(page):
            log.info("Top-up accepted (%d articles)", count_units(retry))
            page = retry
            used_fallback = False
        else:
            log.info("Top-up not better; keeping the first page")

    return page, used_fallback


def publish(settings: Settings, store: ArchiveStore, current: list[ArchiveEntry], date: str, page: str) -> tuple[Path, str]:
    page_path = settings.daily_dir / f"{date}.html"
    page_path.parent.mkdir(parents=True, exist_ok=True)
    page_path.write_text(page, encoding="utf-8")

    title = extract_title(page, date)
    entries = store.upsert(ArchiveEntry.for_page(date, title), current)

    settings.feed_path.parent.mkdir(parents=True, exist_ok=True)
    settings.feed_path.write_text(project(entries, settings.base_url), encoding="utf-8")
    log.info("Feed rebuilt with %d items", min(len(entries), MAX_ITEMS))
    return page_path, title


def run(settings: Settings, date: str | None = None, producer=None) -> RunResult:
    date = date or utc_today_str()
    check_date(date)
    if producer is None:
        producer = OpenAIProducer(settings.api_key, settings.model, max_tokens=settings.max_tokens)

    page, used_fallback = produce_page(producer, date)

    # Read the archive before touching disk so a corrupt index leaves no half-written run.
    store = ArchiveStore(settings.archive_path)
    try:
        current = store.load()
        page_path, title = publish(settings, store, current, date, page)
    except ArchiveError as exc:
        log.error("Fatal: archive is unreadable: %s", exc)
        return RunResult(RunStatus.FATAL, date, error=str(exc))
    except OSError as exc:
        log.error("Fatal: could not write output: %s", exc)
        return RunResult(RunStatus.FATAL, date, error=str(exc))

    return RunResult(
        status=RunStatus.FALLBACK if used_fallback else RunStatus.GENERATED,
        date=date,
        page_path=page_path,
        title=title,
        article_count=count_units(page),
    )
