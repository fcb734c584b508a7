import dataclasses as dc
import ply.lex
import re

from .reporter import Reporter, LexError

### TOKEN ###

# immutable (kind, lexeme) pair, line kept for diagnostics
# pprint() -> "[KIND : lexeme]" as shown by the driver

@dc.dataclass(frozen = True)
class Token:
    kind        : str
    lexeme      : str
    line        : int = dc.field(default = 0, compare = False)

    def pprint(self):
        return f"[{self.kind} : {self.lexeme}]"

class Lexer:
    keywords = {
        x: x.upper() for x in (
            'int'      ,
            'if'       ,
            'else'     ,
            'while'    ,
            'print'    ,
        )
    }

    tokens = (
        'IDENTIFIER'   ,        # : str
        'NUMBER'       ,        # : str, digits as written

        'ASSIGN'       ,
        'SEMICOLON'    ,

        'PLUS'         ,
        'MINUS'        ,
        'MULT'         ,
        'DIV'          ,

        'GREATER'      ,
        'LESS'         ,
        'EQUAL'        ,
        'NOTEQUAL'     ,

        # Punctuation
        'LPAREN'       ,
        'RPAREN'       ,
        'LBRACE'       ,
        'RBRACE'       ,
    ) + tuple(keywords.values())

    # string rules are tried longest regex first,
    # so '==' and '!=' win over '=' and '//' over '/'
    t_ASSIGN    = re.escape('=')
    t_SEMICOLON = re.escape(';')

    t_PLUS      = re.escape('+')
    t_MINUS     = re.escape('-')
    t_MULT      = re.escape('*')
    t_DIV       = re.escape('/')

    t_GREATER   = re.escape('>')
    t_LESS      = re.escape('<')
    t_EQUAL     = re.escape('==')
    t_NOTEQUAL  = re.escape('!=')

    t_LPAREN    = re.escape('(')
    t_RPAREN    = re.escape(')')
    t_LBRACE    = re.escape('{')
    t_RBRACE    = re.escape('}')

    t_ignore = ' \t\r\f\v'      # Ignore all whitespaces
    t_ignore_comment = r'//.*'

    def __init__(self, reporter = None, strict = False):
        self.reporter = reporter or Reporter()
        self.strict   = strict
        self.lexer    = ply.lex.lex(module = self)

    def tokenize(self, source: str) -> list[Token]:
        """
        scan the whole source, eagerly
        unmatched characters are skipped unless strict
        """
        self.lexer.lineno = 1
        self.lexer.input(source)

        return [
            Token(
                kind    = t.type,
                lexeme  = t.value,
                line    = t.lineno,
            )
            for t in iter(self.lexer.token, None)
        ]

    def t_newline(self, t):
        r'\n+'
        t.lexer.lineno += len(t.value)

    # keywords only match whole words, `intx` stays an identifier
    def t_IDENTIFIER(self, t):
        r'[a-zA-Z_][a-zA-Z0-9_]*'
        if t.value in self.keywords:
            t.type  = self.keywords[t.value]
        return t

    def t_NUMBER(self, t):
        r'\d+'
        return t

    def t_error(self, t):
        char = t.value[0]

        if self.strict:
            raise LexError("unrecognized character", char, t.lexer.lineno)

        self.reporter.warn(f"lexer: illegal character '{char}' "
                           f"on line {t.lexer.lineno} -- skipping")
        t.lexer.skip(1)

def tokenize(source: str, strict = False) -> list[Token]:
    return Lexer(strict = strict).tokenize(source)
