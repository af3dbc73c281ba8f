import argparse
import sys

from pydantic import ValidationError

from resource_builder import __version__
from resource_builder.config import Settings
from resource_builder.models.run import RunConfig
from resource_builder.pipelines.orchestrator import ResourceBuildOrchestrator
from resource_builder.utils.logging_utils import get_logger, set_verbose

logger = get_logger("cli")

EXIT_CODES = {
    "completed": 0,
    "completed_with_errors": 1,
    "aborted": 2,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="resource-builder",
        description="Package raw asset files into a resource bundle with a resource.json manifest.",
    )
    parser.add_argument("--in", dest="input_root", help="Directory containing the raw resources")
    parser.add_argument("--out", dest="output_root", help="Directory to write resources/ and resource.json into")
    parser.add_argument("--ignoreSound", dest="ignore_sound", action="store_true", help="Skip audio files")
    parser.add_argument("--verbose", action="store_true", help="Log every processed and ignored file")
    parser.add_argument("--workers", dest="max_workers", type=int, help="Number of concurrent copy workers")
    parser.add_argument("--identifier-length", dest="identifier_length", type=int)
    parser.add_argument("--extension-match", dest="extension_match", choices=["exact", "contains"])
    parser.add_argument("--run-id", dest="run_id")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    set_verbose(args.verbose)

    try:
        settings = Settings()
        config = RunConfig.from_settings(
            settings,
            input_root=args.input_root,
            output_root=args.output_root,
            ignore_sound=args.ignore_sound,
            verbose=args.verbose,
            max_workers=args.max_workers,
            identifier_length=args.identifier_length,
            extension_match=args.extension_match,
        )
    except ValidationError as exc:
        logger.error("[Error] invalid run configuration: %s", exc)
        return EXIT_CODES["aborted"]

    report = ResourceBuildOrchestrator().build(config, run_id=args.run_id)

    if args.verbose:
        print(report.model_dump_json(indent=2))

    return EXIT_CODES.get(report.status, 1)


if __name__ == "__main__":
    sys.exit(main())
