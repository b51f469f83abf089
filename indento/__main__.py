"""CLI entry point for the Indento interpreter.

Usage:
    python -m indento [-v|-vv|-vvv] <program_file>
    python -m indento [-v...] --emit-tree <program_file>
    python -m indento [-v...] --tree <tree_json_file>

Options:
  -v            Increase debug verbosity (can be repeated)
  --emit-tree   Parse the given program and emit its statement tree as JSON
  --tree        Execute a previously emitted statement tree JSON file

Debug information is written to `debug.txt` in the current directory when
verbosity is greater than zero.
"""

import argparse
import json
import sys
from pathlib import Path
from .errors import IndentoError
from .interpreter import Interpreter
from .parser import parse_program
from .tree_json import tree_to_obj, tree_from_obj


def read_source(path: Path) -> str:
    if not path.exists():
        print(f"Error: file {path} not found", file=sys.stderr)
        sys.exit(1)
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def parse_or_exit(source: str):
    try:
        return parse_program(source)
    except IndentoError as e:
        print(f"Parse error: {e}", file=sys.stderr)
        sys.exit(1)


def run_or_exit(program, debug_level: int) -> None:
    with Interpreter(debug_level=debug_level) as interpreter:
        try:
            interpreter.run(program)
        except IndentoError as e:
            print(f"Runtime error: {e}", file=sys.stderr)
            sys.exit(1)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Indento language interpreter")
    parser.add_argument('-v', action='count', default=0, help='increase debug verbosity (can be repeated)')
    group = parser.add_mutually_exclusive_group()
    group.add_argument('--emit-tree', metavar='PROGRAM_FILE', help='emit statement tree JSON for the given program')
    group.add_argument('--tree', metavar='TREE_JSON_FILE', help='execute a statement tree from a JSON file')
    parser.add_argument('program', nargs='?', help='Indento program file to execute')
    args = parser.parse_args(argv)

    # Emit tree mode
    if args.emit_tree:
        program_file = Path(args.emit_tree)
        program = parse_or_exit(read_source(program_file))
        try:
            text = json.dumps(tree_to_obj(program), ensure_ascii=False, indent=2)
        except RecursionError:
            print(f"Error: program {program_file} is nested too deeply to emit", file=sys.stderr)
            sys.exit(1)
        out_path = program_file.with_name(program_file.name + '.tree.json')
        with open(out_path, 'w', encoding='utf-8') as out:
            out.write(text)
        print(str(out_path))
        return

    # Execute from tree JSON
    if args.tree:
        tree_file = Path(args.tree)
        source = read_source(tree_file)
        try:
            program = tree_from_obj(json.loads(source))
        except (ValueError, KeyError, TypeError, RecursionError) as e:
            print(f"Error: invalid tree file {tree_file}: {e}", file=sys.stderr)
            sys.exit(1)
        run_or_exit(program, args.v)
        return

    # Default: execute source file
    if not args.program:
        parser.error('missing program file; or use --emit-tree/--tree')
    program = parse_or_exit(read_source(Path(args.program)))
    run_or_exit(program, args.v)


if __name__ == '__main__':
    main()
