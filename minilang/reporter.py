import sys

class Reporter():
    """
    report progress and errors

    normal output (tokens, banners, tac) goes to `out`,
    diagnostics go to `err`
    """
    def __init__(self, out = None, err = None, verbose = False):
        self.out     = out or sys.stdout
        self.err     = err or sys.stderr
        self.verbose = verbose
        self.section = None

    def crash(self, error):
        errstr = str(error)
        errstr = f"{{{self.section}}} \t| " + errstr if self.section else errstr
        print(f"[ Fatal Error ] | {errstr}", file=self.err)

        sys.exit(1)

    def warn(self, warning):
        if not self.verbose:
            return

        warnstr = f"{{{self.section}}} \t| " + str(warning) if self.section else str(warning)
        print(f"[ Warning ] | {warnstr}", file=self.err)

    def emit(self, line = ""):
        print(line, file=self.out)

    def banner(self, title):
        self.emit()
        self.emit(f"{title}:")

    def checkpoint(self, section = None):
        self.section = section

### ERRORS ###

# one exception per stage, all fatal for the run
# carries the offending token (None means end of input)

class CompileError(Exception):
    stage = "compile"

    def __init__(self, errstr, token = None):
        super().__init__(errstr)
        self.errstr = errstr
        self.token  = token

    def where(self):
        if self.token is None:
            return "at end of input"
        return f"at token: '{self.token.lexeme}' (type={self.token.kind})"

    def __str__(self):
        return f"{self.stage} error: {self.errstr} {self.where()}"

class LexError(CompileError):
    stage = "lexical"

    def __init__(self, errstr, char, line):
        super().__init__(errstr)
        self.char   = char
        self.line   = line

    def where(self):
        return f"at character '{self.char}' on line {self.line}"

class ParseError(CompileError):
    stage = "syntax"

class SemanticError(CompileError):
    stage = "semantic"

class CodeGenError(CompileError):
    stage = "codegen"
