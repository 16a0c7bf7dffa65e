"""WikiStral - encyclopedia article generator

Simple CLI for generating articles about a subject in one or more languages.
"""

import argparse
import asyncio
import sys

from wikistral.agents.article_generation import ArticleGeneration
from wikistral.agents.orchestrator import ResearchOrchestrator
from wikistral.categories import Category, Language, parse_category, parse_language
from wikistral.services.content_store import ContentStore

CATEGORY_CHOICES = ", ".join(c.value for c in Category)
LANGUAGE_CHOICES = ", ".join(lang.value for lang in Language)

EPILOG = """Examples:
  python main.py --category cities --language fr --subject Paris
  python main.py -c people -l en -l fr -s "Albert Einstein"
"""


async def run_generation(category: Category, languages: list[Language], subject: str) -> None:
    """Research the subject once, then generate the article for each language."""
    orchestrator = ResearchOrchestrator()
    store = ContentStore()

    print(f"Researching {subject} ({category.value})")
    print("-" * 50)
    research = await orchestrator.research(subject, category)
    print(f"[*] {len(research.references)} references found")

    for language in languages:
        generation = ArticleGeneration(
            category=category,
            language=language,
            subject=subject,
            orchestrator=orchestrator,
            store=store,
        )
        article = await generation.start(research=research)
        path = store.article_dir(article.slug, article.language)
        print(f"[+] {language.value}: {path}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="WikiStral article generator",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--category", "-c", required=True, help=f"Category to generate ({CATEGORY_CHOICES})"
    )
    parser.add_argument(
        "--language",
        "-l",
        action="append",
        required=True,
        help=f"Language code, can be given multiple times ({LANGUAGE_CHOICES})",
    )
    parser.add_argument("--subject", "-s", required=True, help="Subject to generate content for")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        category = parse_category(args.category)
    except ValueError:
        print(
            f'Error: Invalid category "{args.category}". Must be one of: {CATEGORY_CHOICES}',
            file=sys.stderr,
        )
        return 1

    supported = {lang.value for lang in Language}
    invalid = [value for value in args.language if value.lower().strip() not in supported]
    if invalid:
        print(
            f'Error: Invalid language(s) "{", ".join(invalid)}". Must be one of: {LANGUAGE_CHOICES}',
            file=sys.stderr,
        )
        return 1
    languages = list(dict.fromkeys(parse_language(value) for value in args.language))

    subject = " ".join(args.subject.split())
    if not subject:
        print("Error: --subject must not be empty.", file=sys.stderr)
        return 1

    try:
        asyncio.run(run_generation(category, languages, subject))
    except Exception as e:
        print(f"\n[!] Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
