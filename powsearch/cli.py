import sys
import logging
import argparse
from .error import PowError
from .config import get_config
from .digest import HashlibDigest
from .search import SearchEngine, encode_text
from .console import TerminalIO, interactive_search, write_result
from .benchmark import measure_search_time, format_report


def search_command(args, cfg):
    digest = HashlibDigest(args.algorithm or cfg.algorithm)
    initial = encode_text(args.text, args.encoding or cfg.encoding)
    engine = SearchEngine(initial, args.zero_bits, digest, args.stop_on_wrap or cfg.stop_on_wrap)
    print("Searching...")
    write_result(TerminalIO(), engine.run())


def interactive_command(args, cfg):
    interactive_search(TerminalIO(), cfg)


def bench_command(args, cfg):
    records = measure_search_time(
        text=cfg.bench_text if args.text is None else args.text,
        algorithm=args.algorithm or cfg.algorithm,
        start=cfg.bench_start if args.start is None else args.start,
        stop=cfg.bench_stop if args.stop is None else args.stop,
        target=cfg.bench_target if args.target is None else args.target,
        min_target=cfg.bench_min_target,
        encoding=cfg.encoding,
    )
    print(format_report(records))


def build_parser():
    algo = argparse.ArgumentParser(add_help=False)
    algo.add_argument('-a', '--algorithm', default=None, type=str)

    argp = argparse.ArgumentParser(prog='powsearch')
    argp.add_argument('-v', '--verbose', action='store_true')
    subs = argp.add_subparsers(dest='command')
    subs.required = True

    psearch = subs.add_parser('search', parents=[algo])
    psearch.add_argument('text', type=str)
    psearch.add_argument('-z', '--zero_bits', required=True, type=int)
    psearch.add_argument('--encoding', default=None, type=str)
    psearch.add_argument('--stop_on_wrap', '--stop-on-wrap', action='store_true')
    psearch.set_defaults(handler=search_command)

    pinteractive = subs.add_parser('interactive')
    pinteractive.set_defaults(handler=interactive_command)

    pbench = subs.add_parser('bench', parents=[algo])
    pbench.add_argument('--text', default=None, type=str)
    pbench.add_argument('--start', default=None, type=int)
    pbench.add_argument('--stop', default=None, type=int)
    pbench.add_argument('--target', default=None, type=int)
    pbench.set_defaults(handler=bench_command)
    return argp


def main(argv=None):
    args = build_parser().parse_args(argv)
    try:
        cfg = get_config()
        logging.basicConfig(level=logging.DEBUG if args.verbose else cfg.log_level)
        args.handler(args, cfg)
    except PowError as exc:
        print("[error]", exc.code, exc.msg)
        sys.exit(1)
    except KeyboardInterrupt:
        print("[interrupted]")
        sys.exit(130)
