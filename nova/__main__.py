"""CLI entry point for the Nova interpreter.

Usage:
    python -m nova [-v|-vv|-vvv] [--parser {descent,grammar}] [<script>]
    python -m nova --tokens <script>
    python -m nova [--parser ...] --print-ast <script>
    python -m nova [--parser ...] --emit-ast <script>
    python -m nova [-v...] --ast <ast_json_file>

Options:
  -v            Increase debug verbosity (can be repeated)
  --parser      Front-end used to parse source: the hand-written
                recursive-descent parser (default) or the Lark grammar
  --tokens      Scan the script and print its tokens
  --print-ast   Parse the script and print its AST in prefix form
  --emit-ast    Parse the script and write an AST JSON file next to it
  --ast         Execute a previously emitted AST JSON file

With no script an interactive prompt is started; bindings persist between
lines. Debug information is written to `debug.txt` in the current
directory when verbosity is greater than zero.

Exit status is 64 for usage errors and missing files, 65 when the source
has static errors and 70 when execution stopped on a run-time error.
"""

import argparse
import cmd
import json
import sys
from pathlib import Path
from typing import List, Optional

from .ast_json import program_from_obj, program_to_obj
from .errors import ErrorReporter
from .interpreter import PARSERS, Interpreter, parse_source
from .printer import AstPrinter
from .scanner import scan_tokens


EX_USAGE = 64
EX_DATAERR = 65
EX_SOFTWARE = 70


class Shell(cmd.Cmd):
    """Interactive Nova prompt backed by a single interpreter."""
    intro = "Nova interpreter\nType 'exit' or Ctrl-D to leave."
    prompt = "> "

    def __init__(self, interpreter: Interpreter, parser: str = 'descent', *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.interpreter = interpreter
        self.parser = parser

    def default(self, line):
        """Runs a line of Nova source."""
        # errors from one line must not suppress the next one
        self.interpreter.reporter.reset()
        self.interpreter.run_source(line, self.parser)

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        return False

    def do_help(self, arg):
        """Shows a short intro."""
        if arg:
            # a Nova statement that happens to start with 'help'
            return self.default(f"help {arg}")
        print("Type Nova statements, e.g. 'var a = 1; print a + 2;'. Variables persist\n"
              "between lines. Type 'exit' or press Ctrl-D to leave.")

    def do_exit(self, arg):
        """Exits interpreter."""
        if arg:
            return self.default(f"exit {arg}")
        return True

    def do_EOF(self, arg):
        """Exits interpreter."""
        print()
        return True


def read_source(path: str) -> str:
    program_file = Path(path)
    if not program_file.exists():
        print(f"Error: file {program_file} not found", file=sys.stderr)
        sys.exit(EX_USAGE)
    with open(program_file, 'r', encoding='utf-8') as f:
        return f.read()


def exit_on_error(reporter: ErrorReporter):
    if reporter.had_error:
        sys.exit(EX_DATAERR)
    if reporter.had_runtime_error:
        sys.exit(EX_SOFTWARE)


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(prog='nova', description="Nova language interpreter")
    parser.add_argument('-v', action='count', default=0, help='increase debug verbosity (can be repeated)')
    parser.add_argument('--parser', choices=PARSERS, default='descent', help='front-end used to parse source')
    group = parser.add_mutually_exclusive_group()
    group.add_argument('--tokens', metavar='NOVA_FILE', help='print the tokens of the given script')
    group.add_argument('--print-ast', metavar='NOVA_FILE', help='print the AST of the given script')
    group.add_argument('--emit-ast', metavar='NOVA_FILE', help='emit AST JSON for the given script')
    group.add_argument('--ast', metavar='AST_JSON_FILE', help='execute AST from a JSON file')
    parser.add_argument('program', nargs='?', help='Nova script to execute (omit for a prompt)')
    try:
        args = parser.parse_args(argv)
    except SystemExit as exc:
        # argparse exits with 2 on bad usage; keep the interpreter's convention
        if exc.code:
            sys.exit(EX_USAGE)
        raise

    reporter = ErrorReporter()

    # Token dump mode
    if args.tokens:
        for token in scan_tokens(read_source(args.tokens), reporter):
            print(token)
        exit_on_error(reporter)
        return

    # AST dump modes
    if args.print_ast or args.emit_ast:
        path = args.print_ast or args.emit_ast
        statements = parse_source(read_source(path), reporter, args.parser)
        if reporter.had_error:
            sys.exit(EX_DATAERR)
        if args.print_ast:
            print(AstPrinter().print_program(statements))
            return
        program_file = Path(path)
        out_path = program_file.with_name(program_file.name + '.ast.json')
        with open(out_path, 'w', encoding='utf-8') as out:
            json.dump(program_to_obj(statements), out, ensure_ascii=False, indent=2)
        print(str(out_path))
        return

    # Execute from AST JSON
    if args.ast:
        ast_path = Path(args.ast)
        if not ast_path.exists():
            print(f"Error: file {ast_path} not found", file=sys.stderr)
            sys.exit(EX_USAGE)
        with open(ast_path, 'r', encoding='utf-8') as f:
            statements = program_from_obj(json.load(f))
        interpreter = Interpreter(reporter=reporter, debug_level=args.v)
        try:
            interpreter.interpret(statements)
        finally:
            interpreter.close()
        exit_on_error(reporter)
        return

    interpreter = Interpreter(reporter=reporter, debug_level=args.v)
    try:
        # Interactive prompt
        if not args.program:
            Shell(interpreter, args.parser).cmdloop()
            return
        # Default: execute source file
        interpreter.run_source(read_source(args.program), args.parser)
    finally:
        interpreter.close()
    exit_on_error(reporter)


if __name__ == '__main__':
    main()
