import argparse
import logging
from pathlib import Path

from deepread.archive import check_date
from deepread.config import Settings
from deepread.pipeline import RunStatus, run
from deepread.producer import OfflineProducer


def date_arg(value: str) -> str:
    try:
        return check_date(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate the daily deep-read page, archive index and RSS feed.")
    parser.add_argument("--date", type=date_arg, help="Digest date, YYYY-MM-DD (default: today, UTC).")
    parser.add_argument("--output-dir", type=Path, help="Site root holding daily/, archive.json and feed.xml.")
    parser.add_argument("--base-url", help="Absolute site URL used for feed links (default: $REPO_URL).")
    parser.add_argument("--model", help="OpenAI model (default: $OPENAI_MODEL or gpt-4o).")
    parser.add_argument("--offline", action="store_true", help="Skip the API and write the fallback page.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging.")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(message)s",
    )

    settings = Settings.from_env().with_overrides(
        output_dir=args.output_dir,
        base_url=args.base_url,
        model=args.model,
    )
    producer = OfflineProducer() if args.offline else None

    result = run(settings, date=args.date, producer=producer)
    if result.status is RunStatus.FATAL:
        logging.error("Run failed for %s: %s", result.date, result.error)
    else:
        print(f"Generated ({result.status.value}): {result.page_path}")
    return result.exit_code
