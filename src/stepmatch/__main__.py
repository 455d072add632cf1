import argparse
import logging
import sys

from typeguard import TypeCheckError

from stepmatch.config import Settings
from stepmatch.definitions import DefinitionFile, StepType, collect_definitions
from stepmatch.resolver import StepResolver
from stepmatch.story import annotate

logger = logging.getLogger("stepmatch")


def make_parser(prog: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=prog)
    parser.add_argument("definitions", nargs="+", help="JSON files of step definitions")
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("--story", help="story file to check for unresolved steps")
    group.add_argument("--complete", metavar="TEXT", help="print the completion of TEXT")
    parser.add_argument(
        "--type",
        choices=[t.value for t in StepType],
        default=None,
        help="step type of the text given to --complete (not allowed with --story)",
    )
    return parser


def main(prog, *argv) -> int:
    parser = make_parser(prog)
    args = parser.parse_args(argv)
    if args.story is not None and args.type is not None:
        parser.error("--type only applies to --complete")

    try:
        settings = Settings.from_env()
    except ValueError as error:
        logging.basicConfig()
        logger.error(f"invalid configuration: {error}")
        return 2
    logging.basicConfig(level=settings.log_level)

    step_type = StepType(args.type) if args.type is not None else None

    try:
        units = [DefinitionFile(path, settings.prefix) for path in args.definitions]
        resolver = StepResolver(collect_definitions(units))
    except (OSError, ValueError, TypeCheckError) as error:
        logger.error(f"cannot load step definitions: {error}")
        return 2

    if args.complete is not None:
        print(args.complete + resolver.complete(args.complete, step_type))
        return 0

    try:
        with open(args.story, encoding="utf-8") as f:
            story = f.read()
    except OSError as error:
        logger.error(f"cannot read story: {error}")
        return 2

    diagnostics = annotate(story, resolver, settings.suggestions)
    for diagnostic in diagnostics:
        text = story[diagnostic.start : diagnostic.end]
        print(f"{args.story}:{diagnostic.line}:{diagnostic.column}: {diagnostic.message}: {text}")
        for definition in diagnostic.suggestions:
            print(f"    did you mean: {definition.template} ({definition.origin})")

    return 1 if diagnostics else 0


def run():
    sys.exit(main(*sys.argv))


if __name__ == "__main__":
    run()
