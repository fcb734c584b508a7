import argparse
import dataclasses as dc
import json
import os
import sys

from typing import Optional as Opt

@dc.dataclass
class Options:
    input       : str           = "input.minilang"
    ast         : bool          = False
    strict      : bool          = False
    json        : Opt[str]      = None
    verbose     : bool          = False

class Tools:
    def __init__(self, reporter):
        self.reporter = reporter

    def parseargs(self, argv = None) -> Options:
        """
        return the options for one run
        """
        parser = argparse.ArgumentParser(
            prog        = os.path.basename(sys.argv[0]),
            description = "MiniLang front end: tokens, syntax, semantics, three-address code",
        )

        parser.add_argument('input', nargs = '?', default = Options.input,
                            help = 'input file (default: %(default)s)')
        parser.add_argument('--ast', action = 'store_true',
                            help = 'print the syntax tree after parsing')
        parser.add_argument('--strict', action = 'store_true',
                            help = 'reject unrecognized characters instead of skipping them')
        parser.add_argument('--json', metavar = 'PATH',
                            help = 'also write the three-address code as json')
        parser.add_argument('-v', '--verbose', action = 'store_true',
                            help = 'show warnings')

        args = parser.parse_args(argv)

        return Options(
            input   = args.input,
            ast     = args.ast,
            strict  = args.strict,
            json    = args.json,
            verbose = args.verbose,
        )

    def read(self, filename) -> str:
        try:
            with open(filename, "r", encoding = "utf-8") as f:
                return f.read()
        except OSError as e:
            self.reporter.crash(f"cannot read input file {filename}: {e}")

    def writejson(self, data, filename):
        """
        write the json file
        """
        try:
            with open(filename, "w", encoding = "utf-8") as f:
                json.dump(data, f, indent = 2)
        except OSError as e:
            self.reporter.crash(f"cannot write output file {filename}: {e}")
