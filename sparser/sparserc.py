# sparser/sparserc.py
"""sparserc – sparser CLI

Examples
    $ python -m sparser match '\\d+' --text 12345
    $ python -m sparser match 'ab' --text ababab --min 1 --max 3
    $ python -m sparser demo calc --text '2 * (3 + 4)'
    $ python -m sparser demo kv --input settings.kv -D

Commands
--------
- match : parse the input with a single regex leaf, optionally repeated
- demo  : parse the input with one of the bundled grammars

-D/--debug turns on rule-level trace logging on stderr.
Exit codes: 0 success, 1 parse failure, 2 grammar or usage error,
3 error raised while building the result (map functions).
"""

from __future__ import annotations
import argparse
import pathlib
import sys
from typing import Any, List, Optional

# ------------------------------
# helpers
# ------------------------------

def _eprint(*args, **kw) -> None:
    print(*args, file=sys.stderr, **kw)


def _read_input(args) -> str:
    if args.text is not None:
        return args.text
    if args.input == "-":
        return sys.stdin.read()
    return pathlib.Path(args.input).read_text(encoding="utf-8")


def _setup_logging(debug: bool) -> None:
    if debug:
        from .log import configure
        configure(level="TRACE", trace=True)


def _run(rule, text: str) -> int:
    from .errors import GrammarError, ParseFailure
    try:
        tokens = rule.parse(text)
    except ParseFailure as e:
        _eprint("[PARSE ERROR]")
        _eprint(str(e))
        return 1
    except GrammarError as e:
        _eprint("[GRAMMAR ERROR]", str(e))
        return 2
    except Exception as e:
        # raised by a grammar's map function, e.g. division by zero in calc
        _eprint("[EVAL ERROR]", type(e).__name__, str(e))
        return 3
    _print_tokens(tokens)
    return 0


def _print_tokens(tokens: List[Any]) -> None:
    for i, tok in enumerate(tokens):
        print(f"{i:03d}: {tok!r}")

# ------------------------------
# commands
# ------------------------------

def cmd_match(args) -> int:
    from .errors import GrammarError
    from .rules import leaf
    try:
        rule = leaf(args.pattern)
        if args.min is not None or args.max is not None:
            rule = rule.rep(args.min or 0, args.max)
    except GrammarError as e:
        _eprint("[GRAMMAR ERROR]", str(e))
        return 2
    return _run(rule, _read_input(args))


def cmd_demo(args) -> int:
    from .grammars import GRAMMARS
    rule = GRAMMARS[args.grammar]()
    return _run(rule, _read_input(args))

# ------------------------------
# entry point
# ------------------------------

def _add_input_args(p: argparse.ArgumentParser) -> None:
    src_group = p.add_mutually_exclusive_group(required=True)
    src_group.add_argument("--text", help="input text given directly")
    src_group.add_argument("--input", help="input file path ('-' for stdin)")
    p.add_argument("-D", "--debug", action="store_true", help="trace every rule application on stderr")


def main(argv: Optional[list[str]] = None) -> int:
    ap = argparse.ArgumentParser(prog="sparserc", description="sparser parser-combinator CLI")
    sub = ap.add_subparsers(dest="cmd", required=True)

    p_match = sub.add_parser("match", help="parse the input with a single regex leaf")
    p_match.add_argument("pattern", help="regular expression for the leaf")
    p_match.add_argument("--min", type=int, help="minimum repetitions (default 0 when --max is set)")
    p_match.add_argument("--max", type=int, help="maximum repetitions (default unbounded)")
    _add_input_args(p_match)
    p_match.set_defaults(func=cmd_match)

    from .grammars import GRAMMARS
    p_demo = sub.add_parser("demo", help="parse the input with a bundled grammar")
    p_demo.add_argument("grammar", choices=sorted(GRAMMARS), help="bundled grammar name")
    _add_input_args(p_demo)
    p_demo.set_defaults(func=cmd_demo)

    args = ap.parse_args(argv)
    _setup_logging(args.debug)
    return int(args.func(args))


if __name__ == "__main__":
    sys.exit(main())
