from .lexer    import Token
from .tac      import Tac, Taclist
from .reporter import CodeGenError

def temp_names():
    i = 1
    while True:
        yield f"t{i}"
        i += 1

### CODE GENERATOR ###

# scans the flat token list for `IDENTIFIER ASSIGN expr SEMICOLON`
# expr is `operand (op operand)*`, folded strictly left to right:
# there is no operator precedence, `a + b * c` is `(a + b) * c`
# only assignments are lowered, control flow and print are skipped

class CodeGenerator:
    operators   = ('PLUS', 'MINUS', 'MULT', 'DIV',
                   'GREATER', 'LESS', 'EQUAL', 'NOTEQUAL')
    operands    = ('IDENTIFIER', 'NUMBER')

    def __init__(self):
        self.temps  = temp_names()

    def generate(self, tokens: list[Token]) -> Taclist:
        self.temps  = temp_names()
        taclist     = Taclist()

        i = 0
        while i < len(tokens):
            if (tokens[i].kind == 'IDENTIFIER'
                    and i + 1 < len(tokens)
                    and tokens[i + 1].kind == 'ASSIGN'):
                i = self.assignment(tokens, i, taclist)
            else:
                i += 1

        return taclist

    def assignment(self, tokens, i, taclist):
        """
        lower one assignment starting at tokens[i], return the index after its ';'
        """
        dest = tokens[i].lexeme
        j    = i + 2

        if j >= len(tokens) or tokens[j].kind == 'SEMICOLON':
            raise CodeGenError(f"missing expression after '=' in assignment to '{dest}'",
                               self.at(tokens, j))

        left = self.operand(tokens, j)
        j   += 1

        body = Taclist()
        while j < len(tokens) and tokens[j].kind in self.operators:
            operator = tokens[j].lexeme

            if j + 1 >= len(tokens) or tokens[j + 1].kind == 'SEMICOLON':
                raise CodeGenError(f"missing operand after operator '{operator}'",
                                   self.at(tokens, j + 1))

            right = self.operand(tokens, j + 1)
            temp  = next(self.temps)
            body.add(Tac(temp, [left, right], operator))

            left  = temp
            j    += 2

        if j >= len(tokens) or tokens[j].kind != 'SEMICOLON':
            raise CodeGenError(f"missing ';' after assignment to '{dest}'",
                               self.at(tokens, j))

        body.add(Tac(dest, [left]))
        taclist.merge(body)

        return j + 1

    def operand(self, tokens, j):
        token = tokens[j]
        if token.kind not in self.operands:
            raise CodeGenError("unexpected token where an operand was expected", token)
        return token.lexeme

    @staticmethod
    def at(tokens, j):
        return tokens[j] if j < len(tokens) else None
