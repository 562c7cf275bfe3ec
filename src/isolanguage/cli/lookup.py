"""CLI tool for looking up ISO 639-1 language codes."""

import argparse
import json
import logging
import sys
from typing import List, Optional

from isolanguage.constants import LOG_FORMAT, LOG_LEVEL
from isolanguage.language_code import (
    LanguageCode,
    UnrecognizedCode,
    families,
    from_code,
)
from isolanguage.logging_config import configure_logging

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Look up ISO 639-1 two-letter language codes"
    )

    parser.add_argument(
        "codes",
        nargs="*",
        metavar="CODE",
        help="Two-letter lowercase ISO 639-1 code (e.g., 'en', 'zh')"
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List every language in ISO 639-1 table order"
    )
    parser.add_argument(
        "--family",
        help="Only list languages of this family (e.g., 'Turkic'); implies --list"
    )
    parser.add_argument(
        "--families",
        action="store_true",
        help="List the language families"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print JSON instead of tab-separated text"
    )

    args = parser.parse_args(argv)
    if not (args.codes or args.list or args.family or args.families):
        parser.error("give at least one CODE, or --list, --family or --families")
    if args.codes and (args.list or args.family or args.families):
        parser.error("CODE arguments cannot be combined with --list, --family or --families")
    return args


def _describe(language: LanguageCode) -> dict:
    return {
        "code": language.code,
        "name": language.english_name,
        "family": language.family,
    }


def _print_languages(languages: List[LanguageCode], as_json: bool) -> None:
    if as_json:
        print(json.dumps([_describe(lang) for lang in languages], ensure_ascii=False))
        return
    for lang in languages:
        print(f"{lang.code}\t{lang.english_name}\t{lang.family}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the lookup CLI.

    Returns:
        0 on success, 1 if any requested code was not recognized
    """
    args = parse_args(argv)

    configure_logging(level=LOG_LEVEL, json_format=LOG_FORMAT == "json")

    if args.families:
        family_names = list(families())
        if args.json:
            print(json.dumps(family_names, ensure_ascii=False))
        else:
            for family in family_names:
                print(family)
        return 0

    if args.list or args.family:
        languages = list(LanguageCode)
        if args.family:
            languages = [lang for lang in languages if lang.family == args.family]
            if not languages:
                logger.error(f"Unknown language family: {args.family}")
                return 1
        logger.debug(f"Listing {len(languages)} languages")
        _print_languages(languages, args.json)
        return 0

    found = []
    failed = 0
    for code in args.codes:
        try:
            found.append(from_code(code))
        except UnrecognizedCode as e:
            logger.error(str(e))
            failed += 1

    _print_languages(found, args.json)
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
