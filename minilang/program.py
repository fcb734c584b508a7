from typing import Optional as Opt

from .lexer     import Lexer
from .parser    import Parser
from .semantic  import SemanticChecker
from .codegen   import CodeGenerator
from .tac       import Taclist
from .tools     import Options
from .reporter  import Reporter, CompileError

### PROGRAM CLASS ###

# runs the stages in order: lexical, syntax, semantic, intermediate code
# every stage gets the full token list, the tree is only shown, not consumed
# the first CompileError stops the run, nothing after it is executed

HEADER = (
    "==================== MiniLang Compiler ====================",
    "  Stages: Lexical -> Syntax -> Semantic -> Intermediate Code Generation",
    "===========================================================",
)

class Program:
    def __init__(self, reporter: Reporter, options: Opt[Options] = None):
        self.reporter   = reporter
        self.options    = options or Options()

    def compile(self, source: str) -> Taclist:
        try:
            return self.stages(source)
        except CompileError as e:
            self.reporter.crash(e)

    def stages(self, source: str) -> Taclist:
        reporter = self.reporter

        for line in HEADER:
            reporter.emit(line)

        reporter.checkpoint("lexical")
        reporter.banner("Lexical Analysis")
        tokens = Lexer(reporter, strict = self.options.strict).tokenize(source)
        for token in tokens:
            reporter.emit(token.pprint())

        reporter.checkpoint("syntax")
        reporter.banner("Syntax Analysis")
        block = Parser(reporter).parse(tokens)
        reporter.emit("Syntax Analysis: Passed.")
        if self.options.ast:
            reporter.emit(block.pprint())

        reporter.checkpoint("semantic")
        reporter.banner("Semantic Analysis")
        SemanticChecker().analyze(tokens)
        reporter.emit("Semantic Analysis with Type Checking: Passed.")

        reporter.checkpoint("tac gen")
        reporter.banner("Intermediate Code Generation")
        tac = CodeGenerator().generate(tokens)
        for line in tac.pprint():
            reporter.emit(line)

        reporter.checkpoint("end")
        reporter.emit()
        reporter.emit("Compilation completed successfully!")

        return tac

    @staticmethod
    def to_json(tac: Taclist):
        return [{"proc": "@main", "body": tac.json()}]
