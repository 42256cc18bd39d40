# src/color_dataset_curator/cli.py
import argparse
import json
import logging
import sys


def _build_parser() -> argparse.ArgumentParser:
    from .curation.transforms.ordering import SORT_FIELDS

    parser = argparse.ArgumentParser(
        prog="color-curator",
        description="Infer, clean, deduplicate and prune color datasets.",
    )
    parser.add_argument("--debug", action="store_true", help="Verbose debug logs")
    parser.add_argument("--json5", action="store_true", help="Read inputs as JSON5 (comments, trailing commas)")
    parser.add_argument("--minify", action="store_true", help="Write compact JSON")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("infer", help="Show structure candidates for a dataset")
    p.add_argument("dataset")

    p = sub.add_parser("analyze", help="Profile a dataset")
    p.add_argument("dataset")
    p.add_argument("output", nargs="?")

    p = sub.add_parser("dedupe", help="Remove semantic duplicates (hex, then name)")
    p.add_argument("dataset")
    p.add_argument("output", nargs="?")
    p.add_argument("--priority", help="Dataset whose (hex, name) pairs win ties")
    p.add_argument("--report", action="store_true", help="Print a deduplication report")
    p.add_argument("--save-report", dest="save_report", help="Write the report to this path")

    p = sub.add_parser("prune", help="Reduce a dataset to a target size")
    p.add_argument("dataset")
    p.add_argument("output", nargs="?")
    p.add_argument("-n", "--target", type=int, required=True, help="Target number of colors")
    p.add_argument("--min-families", dest="min_families", type=int)
    p.add_argument("--min-coverage", dest="min_coverage", type=float)

    p = sub.add_parser("recalc", help="Recompute rgb/hsl/hue_range/family from hex")
    p.add_argument("dataset")
    p.add_argument("output", nargs="?")
    p.add_argument("-d", "--denormalize", action="store_true", help="Denormalize rgb/hsl afterwards")
    p.add_argument("--keep-family", dest="keep_family", action="store_true")

    p = sub.add_parser("normalize", help="Normalize or denormalize rgb/hsl values")
    p.add_argument("dataset")
    p.add_argument("output", nargs="?")
    p.add_argument("-d", "--denormalize", action="store_true")
    target = p.add_mutually_exclusive_group()
    target.add_argument("--rgb", action="store_const", dest="target", const="rgb")
    target.add_argument("--hsl", action="store_const", dest="target", const="hsl")
    p.set_defaults(target="all")

    p = sub.add_parser("sort", help="Sort a dataset")
    p.add_argument("dataset")
    p.add_argument("output", nargs="?")
    p.add_argument("--by", choices=SORT_FIELDS, default="hex")
    p.add_argument("-r", "--reverse", action="store_true")

    p = sub.add_parser("capitalize", help="Title-case color names")
    p.add_argument("dataset")
    p.add_argument("output", nargs="?")

    p = sub.add_parser("merge", help="Merge datasets (deduplicated by default)")
    p.add_argument("output")
    p.add_argument("datasets", nargs="+")
    p.add_argument("--no-dedupe", dest="dedupe", action="store_false")

    p = sub.add_parser("pmerge", help="Priority merge: add only perceptually new colors")
    p.add_argument("primary")
    p.add_argument("secondary")
    p.add_argument("output", nargs="?")
    p.add_argument("--threshold", type=float, default=2.3, help="ΔE76 below which colors are duplicates")
    p.add_argument("--save-report", dest="save_report")
    return parser


def _emit(data, output, minify):
    from .curation.io import save_json

    if output:
        save_json(data, output, minify=minify)
    else:
        print(json.dumps(data, indent=None if minify else 2, ensure_ascii=False))


def _run(args) -> None:
    from .curation.dedupe import SemanticDeduplicator
    from .curation.distribution import prune
    from .curation.format import infer, parse_dataset
    from .curation.io import load_dataset, save_json
    from .curation import transforms

    def read(path):
        return load_dataset(path, allow_comments=args.json5)

    def records(path):
        return parse_dataset(read(path))["colors"]

    cmd = args.command
    if cmd == "infer":
        _emit(infer(read(args.dataset)), None, args.minify)
        return

    if cmd == "analyze":
        _emit(transforms.analyze_dataset(records(args.dataset)), args.output, args.minify)
        return

    if cmd == "dedupe":
        colors = records(args.dataset)
        priority = records(args.priority) if args.priority else []
        dedupe = SemanticDeduplicator()
        result = dedupe.deduplicate(colors, priority)
        if args.report or args.save_report:
            report = dedupe.generate_report(colors, priority)
            if args.report:
                print(json.dumps(report, indent=2, ensure_ascii=False), file=sys.stderr)
            if args.save_report:
                save_json(report, args.save_report)
        _emit(result["colors"], args.output, args.minify)
        return

    if cmd == "prune":
        options = {}
        if args.min_families is not None:
            options["min_families"] = args.min_families
        if args.min_coverage is not None:
            options["min_coverage"] = args.min_coverage
        result = prune(records(args.dataset), args.target, options)
        _emit(result["data"], args.output, args.minify)
        return

    if cmd == "recalc":
        data = transforms.recalculate_from_hex(records(args.dataset), keep_family=args.keep_family)["data"]
        if args.denormalize:
            data = transforms.process_normalization(data, "denormalize", "all")["data"]
        _emit(data, args.output, args.minify)
        return

    if cmd == "normalize":
        mode = "denormalize" if args.denormalize else "normalize"
        result = transforms.process_normalization(records(args.dataset), mode, args.target)
        _emit(result["data"], args.output, args.minify)
        return

    if cmd == "sort":
        result = transforms.sort_records(records(args.dataset), args.by, args.reverse)
        _emit(result["data"], args.output, args.minify)
        return

    if cmd == "capitalize":
        _emit(transforms.capitalize_names(records(args.dataset))["data"], args.output, args.minify)
        return

    if cmd == "merge":
        result = transforms.merge_datasets([records(p) for p in args.datasets], dedupe=args.dedupe)
        _emit(result["data"], args.output, args.minify)
        return

    if cmd == "pmerge":
        result = transforms.priority_merge(records(args.primary), records(args.secondary), args.threshold)
        if args.save_report:
            save_json(
                {
                    "stats": result["stats"],
                    "sample": result["data"][:50],
                    "breakdown": {"total": len(result["data"])},
                },
                args.save_report,
            )
        _emit(result["data"], args.output, args.minify)
        return


def main(argv=None):
    """CLI: infer, profile, deduplicate, prune and transform color datasets."""
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        _run(args)
    except Exception as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        sys.exit(1)
    return 0


if __name__ == "__main__":
    main()
