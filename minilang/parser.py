from typing import Optional as Opt

from .expression import *
from .statement  import *
from .lexer      import Token
from .reporter   import Reporter, ParseError

### PARSER ###

# recursive descent over the token list, one token of lookahead
#
# program    : stmt*
# stmt       : INT IDENTIFIER SEMICOLON
#            | IDENTIFIER ASSIGN expr SEMICOLON
#            | IF LPAREN expr RPAREN block (ELSE block)?
#            | WHILE LPAREN expr RPAREN block
#            | PRINT LPAREN expr RPAREN SEMICOLON
#            | block
# block      : LBRACE stmt* RBRACE
# expr       : arithmetic ((GREATER | LESS | EQUAL | NOTEQUAL) arithmetic)?
# arithmetic : term ((PLUS | MINUS) term)*
# term       : factor ((MULT | DIV) factor)*
# factor     : NUMBER | IDENTIFIER | LPAREN expr RPAREN

class Parser:
    comparison      = ('GREATER', 'LESS', 'EQUAL', 'NOTEQUAL')
    additive        = ('PLUS', 'MINUS')
    multiplicative  = ('MULT', 'DIV')

    def __init__(self, reporter: Opt[Reporter] = None):
        self.reporter   = reporter or Reporter()
        self.tokens     = []
        self.index      = 0

    def parse(self, tokens: list[Token]) -> Block:
        """
        build the program block, raise ParseError on the first mismatch
        """
        self.tokens = list(tokens)
        self.index  = 0

        line        = self.tokens[0].line if self.tokens else 1
        statements  = []
        while not self.at_end():
            statements.append(self.statement())

        return Block(
            line        = line,
            statements  = statements,
        )

    def validate(self, tokens: list[Token]) -> bool:
        try:
            self.parse(tokens)
        except ParseError as e:
            self.reporter.warn(e)
            return False
        return True

    # === primitives ===

    def at_end(self):
        return self.index >= len(self.tokens)

    def peek(self) -> Opt[Token]:
        return None if self.at_end() else self.tokens[self.index]

    def previous(self) -> Token:
        return self.tokens[self.index - 1]

    def check(self, *kinds):
        return not self.at_end() and self.peek().kind in kinds

    def advance(self) -> Token:
        if not self.at_end():
            self.index += 1
        return self.previous()

    def match(self, *kinds):
        if self.check(*kinds):
            self.advance()
            return True
        return False

    def consume(self, kind, expected) -> Token:
        if self.check(kind):
            return self.advance()
        self.error(expected)

    def error(self, expected):
        raise ParseError(expected, self.peek())

    # === statements ===

    def statement(self) -> Statement:
        match self.peek().kind:
            case 'INT':
                return self.declaration()
            case 'IDENTIFIER':
                return self.assignment()
            case 'IF':
                return self.ifelse()
            case 'WHILE':
                return self.while_()
            case 'PRINT':
                return self.print_()
            case 'LBRACE':
                return self.block()
            case _:
                self.error("expected a valid statement")

    def declaration(self) -> Declaration:
        line = self.consume('INT', "expected 'int'").line
        name = self.consume('IDENTIFIER', "expected variable name after 'int'")
        self.consume('SEMICOLON', "expected ';' after declaration")
        return Declaration(
            line        = line,
            name        = name.lexeme,
        )

    def assignment(self) -> Assignment:
        name = self.consume('IDENTIFIER', "expected variable name")
        self.consume('ASSIGN', "expected '=' in assignment")
        value = self.expression()
        self.consume('SEMICOLON', "expected ';' after assignment")
        return Assignment(
            line        = name.line,
            name        = name.lexeme,
            value       = value,
        )

    def ifelse(self) -> IfStatement:
        line = self.consume('IF', "expected 'if'").line
        self.consume('LPAREN', "expected '(' after 'if'")
        condition = self.expression()
        self.consume('RPAREN', "expected ')' after condition")
        success = self.block()

        failure = None
        if self.match('ELSE'):
            failure = self.block()

        return IfStatement(
            line        = line,
            condition   = condition,
            success     = success,
            failure     = failure,
        )

    def while_(self) -> WhileStatement:
        line = self.consume('WHILE', "expected 'while'").line
        self.consume('LPAREN', "expected '(' after 'while'")
        condition = self.expression()
        self.consume('RPAREN', "expected ')' after condition")
        return WhileStatement(
            line        = line,
            condition   = condition,
            loop        = self.block(),
        )

    def print_(self) -> PrintStatement:
        line = self.consume('PRINT', "expected 'print'").line
        self.consume('LPAREN', "expected '(' after 'print'")
        value = self.expression()
        self.consume('RPAREN', "expected ')' after expression")
        self.consume('SEMICOLON', "expected ';' after print statement")
        return PrintStatement(
            line        = line,
            value       = value,
        )

    def block(self) -> Block:
        line = self.consume('LBRACE', "expected '{' to start block").line

        statements = []
        while not self.check('RBRACE') and not self.at_end():
            statements.append(self.statement())

        self.consume('RBRACE', "expected '}' to close block")
        return Block(
            line        = line,
            statements  = statements,
        )

    # === expressions ===

    def expression(self) -> Expression:
        left = self.arithmetic()

        # single level, `a < b < c` leaves the second '<' unconsumed
        if self.match(*self.comparison):
            operator = self.previous()
            left = BinaryExpression(
                line        = operator.line,
                left        = left,
                operator    = Operator[operator.kind],
                right       = self.arithmetic(),
            )

        return left

    def arithmetic(self) -> Expression:
        expr = self.term()
        while self.match(*self.additive):
            operator = self.previous()
            expr = BinaryExpression(
                line        = operator.line,
                left        = expr,
                operator    = Operator[operator.kind],
                right       = self.term(),
            )
        return expr

    def term(self) -> Expression:
        expr = self.factor()
        while self.match(*self.multiplicative):
            operator = self.previous()
            expr = BinaryExpression(
                line        = operator.line,
                left        = expr,
                operator    = Operator[operator.kind],
                right       = self.factor(),
            )
        return expr

    def factor(self) -> Expression:
        if self.match('NUMBER'):
            token = self.previous()
            return NumberLiteral(
                line        = token.line,
                value       = int(token.lexeme),
            )

        if self.match('IDENTIFIER'):
            token = self.previous()
            return Variable(
                line        = token.line,
                name        = token.lexeme,
            )

        if self.match('LPAREN'):
            expr = self.expression()
            self.consume('RPAREN', "expected ')' after expression")
            return expr

        self.error("expected number, variable, or '(' expression ')'")
