#!/usr/bin/env python3
import argparse
import logging
import sys
import os
from typing import Optional, List, TextIO

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from algorithms.differ import DifferConfig, PositionalDiffer
from algorithms.utils import DiffSummary, TokenType
from formatters import FormatterConfig, FormatterFactory, ColorScheme
from sources.reader import STDIN_NAME, iter_file_lines

logger = logging.getLogger("iter_diff")

__version__ = '1.0.0'

EXIT_SAME = 0
EXIT_DIFFERENT = 1
EXIT_TROUBLE = 2
EXIT_INTERRUPTED = 130


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )


class ColorPrinter:
    def __init__(self, use_color: bool = True, output: Optional[TextIO] = None):
        self.use_color = use_color
        self.output = output or sys.stdout
        self.colors = ColorScheme() if use_color else ColorScheme.no_color()

    def print(self, text: str, end: str = '\n'):
        self.output.write(text + end)

    def print_error(self, text: str):
        sys.stderr.write(f"{self.colors.red}Error: {text}{self.colors.reset}\n")

    def print_warning(self, text: str):
        sys.stderr.write(f"{self.colors.yellow}Warning: {text}{self.colors.reset}\n")


class CLIApplication:
    def __init__(self):
        self.parser = self._create_parser()
        self.printer: Optional[ColorPrinter] = None

    def _create_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(
            prog='iter-diff',
            description='Compare two inputs position by position',
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog='''
Every position is reported as kept, changed, removed or added.
Inputs are never realigned: an inserted line turns every later line into a change.

Examples:
  %(prog)s before.txt after.txt
  %(prog)s --compact -c 1 before.txt after.txt
  %(prog)s --side-by-side before.txt after.txt
  %(prog)s --by word --json before.txt after.txt
  some-command | %(prog)s expected.txt -
            '''
        )
        parser.add_argument('file1', help='Left-hand ("before") file, or - for stdin')
        parser.add_argument('file2', help='Right-hand ("after") file, or - for stdin')
        format_group = parser.add_mutually_exclusive_group()
        format_group.add_argument(
            '-s', '--simple',
            dest='format', action='store_const', const='simple',
            help='One line per position (default)'
        )
        format_group.add_argument(
            '--compact',
            dest='format', action='store_const', const='compact',
            help='Only changed positions with context'
        )
        format_group.add_argument(
            '-y', '--side-by-side',
            dest='format', action='store_const', const='side-by-side',
            help='Output the two inputs in columns'
        )
        format_group.add_argument(
            '--html',
            dest='format', action='store_const', const='html',
            help='Output an HTML table'
        )
        format_group.add_argument(
            '--json',
            dest='format', action='store_const', const='json',
            help='Output JSON'
        )
        parser.set_defaults(format='simple')
        parser.add_argument(
            '--by',
            choices=[t.value for t in TokenType],
            default=TokenType.LINE.value,
            help='Unit of comparison (default: line)'
        )
        parser.add_argument(
            '-c', '--context',
            type=int,
            default=3,
            metavar='NUM',
            help='Context positions around changes for --compact (default: 3)'
        )
        parser.add_argument(
            '-w', '--width',
            type=int,
            default=130,
            metavar='NUM',
            help='Output width for side-by-side (default: 130)'
        )
        parser.add_argument(
            '-q', '--quiet',
            action='store_true',
            help='Report only whether the inputs differ'
        )
        parser.add_argument(
            '--summary',
            action='store_true',
            help='Print edit counts after the diff'
        )
        parser.add_argument(
            '--ignore-whitespace',
            action='store_true',
            help='Ignore leading and trailing whitespace'
        )
        parser.add_argument(
            '--ignore-case',
            action='store_true',
            help='Ignore case differences'
        )
        parser.add_argument(
            '--no-color',
            action='store_true',
            help='Disable colored output'
        )
        parser.add_argument(
            '-o', '--output',
            type=str,
            metavar='FILE',
            help='Write output to file'
        )
        parser.add_argument(
            '-V', '--verbose',
            action='store_true',
            help='Log debug details to stderr'
        )
        parser.add_argument(
            '-v', '--version',
            action='version',
            version=f'%(prog)s {__version__}'
        )
        return parser

    def run(self, argv: Optional[List[str]] = None) -> int:
        args = self.parser.parse_args(argv)
        setup_logging(args.verbose)
        output_file = None
        if args.output:
            try:
                output_file = open(args.output, 'w', encoding='utf-8')
            except OSError as e:
                ColorPrinter(use_color=False).print_error(f"Cannot open output file: {e}")
                return EXIT_TROUBLE
            self.printer = ColorPrinter(use_color=False, output=output_file)
        else:
            use_color = not args.no_color and 'NO_COLOR' not in os.environ and sys.stdout.isatty()
            self.printer = ColorPrinter(use_color=use_color)
        try:
            result = self._execute(args)
        except KeyboardInterrupt:
            self.printer.print_error("Interrupted")
            result = EXIT_INTERRUPTED
        except (OSError, ValueError) as e:
            logger.debug("Comparison failed", exc_info=True)
            self.printer.print_error(str(e))
            result = EXIT_TROUBLE
        finally:
            if output_file is not None:
                output_file.close()
        return result

    def _execute(self, args) -> int:
        if args.file1 == STDIN_NAME and args.file2 == STDIN_NAME:
            self.printer.print_error("Only one input can be read from stdin")
            return EXIT_TROUBLE
        if args.context < 0:
            self.printer.print_error(f"Context must be non-negative, got {args.context}")
            return EXIT_TROUBLE
        differ = PositionalDiffer(DifferConfig(
            ignore_case=args.ignore_case,
            ignore_whitespace=args.ignore_whitespace,
            token_type=TokenType(args.by)
        ))
        if args.quiet:
            if args.summary:
                self.printer.print_warning("--summary is ignored with --quiet")
            return self._report_only(args, differ)
        left = self._load(args.file1, differ)
        right = self._load(args.file2, differ)
        edits = list(differ.diff(left, right))
        summary = DiffSummary.from_edits(edits)
        logger.debug("%s vs %s: %r", args.file1, args.file2, summary)
        config = FormatterConfig(
            context_lines=args.context,
            width=args.width,
            use_color=self.printer.use_color
        )
        formatter = FormatterFactory.create(args.format, config)
        formatter.format(edits, args.file1, args.file2, left, output=self.printer.output)
        if args.format in ('html', 'json'):
            self.printer.print('')
        if args.summary:
            self.printer.print(
                f"{summary.positions} positions: {summary.kept} kept, {summary.changed} changed, "
                f"{summary.removed} removed, {summary.added} added"
            )
        return EXIT_SAME if summary.is_identical else EXIT_DIFFERENT

    def _report_only(self, args, differ: PositionalDiffer) -> int:
        if differ.config.token_type == TokenType.LINE:
            left = iter_file_lines(args.file1)
            right = iter_file_lines(args.file2)
        else:
            left = self._load(args.file1, differ)
            right = self._load(args.file2, differ)
        index = differ.first_difference(left, right)
        if index is None:
            return EXIT_SAME
        self.printer.print(f"{args.file1} and {args.file2} differ at position {index + 1}")
        return EXIT_DIFFERENT

    def _load(self, filepath: str, differ: PositionalDiffer) -> List[str]:
        lines = list(iter_file_lines(filepath))
        if differ.config.token_type == TokenType.LINE:
            return lines
        return differ.tokenizer('\n'.join(lines))


def main(argv: Optional[List[str]] = None) -> int:
    app = CLIApplication()
    return app.run(argv)


if __name__ == '__main__':
    sys.exit(main())
