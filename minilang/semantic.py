from .expression import Type
from .lexer      import Token
from .reporter   import SemanticError

### SYMBOL TABLE ###

# flat namespace, name -> Type
# names are only ever added, never removed or retyped

class SymbolTable:
    def __init__(self):
        self.symbols = dict()

    def __contains__(self, name):
        return name in self.symbols

    def __getitem__(self, name):
        return self.symbols[name]

    def __len__(self):
        return len(self.symbols)

    def __iter__(self):
        return iter(self.symbols)

    def declare(self, name, type_ = Type.INT):
        assert(name not in self.symbols)
        self.symbols[name] = type_

### SEMANTIC CHECKER ###

# single left-to-right scan of the flat token list:
# INT IDENTIFIER         -> declare, no redeclaration
# IDENTIFIER             -> must be declared
# IDENTIFIER ASSIGN rhs  -> rhs must be a NUMBER or a declared
#                           IDENTIFIER of the same type
# block structure is ignored, first error aborts

class SemanticChecker:
    def __init__(self):
        self.symbols = SymbolTable()

    def analyze(self, tokens: list[Token]) -> SymbolTable:
        self.symbols = SymbolTable()

        i = 0
        while i < len(tokens):
            token = tokens[i]

            match token.kind:
                case 'INT':
                    self.check_declaration(tokens, i)
                    i += 1

                case 'IDENTIFIER':
                    self.check_bound(token)

                    if i + 1 < len(tokens) and tokens[i + 1].kind == 'ASSIGN':
                        self.check_assignment(tokens, i)
                        i += 2

            i += 1

        return self.symbols

    def check_declaration(self, tokens, i):
        if i + 1 >= len(tokens):
            raise SemanticError("expected variable name after 'int'", tokens[i])

        name = tokens[i + 1]
        if name.kind != 'IDENTIFIER':
            raise SemanticError("expected variable name after 'int'", name)

        if name.lexeme in self.symbols:
            raise SemanticError(f"variable '{name.lexeme}' already declared", name)

        self.symbols.declare(name.lexeme, Type.INT)

    def check_bound(self, token):
        if token.lexeme not in self.symbols:
            raise SemanticError(f"variable '{token.lexeme}' used before declaration", token)

    def check_assignment(self, tokens, i):
        target = tokens[i].lexeme

        if i + 2 >= len(tokens):
            raise SemanticError(f"expected value after '=' in assignment to '{target}'",
                                tokens[i + 1])

        value    = tokens[i + 2]
        expected = self.symbols[target]

        match value.kind:
            case 'NUMBER':
                if expected != Type.INT:
                    raise SemanticError(f"cannot assign 'int' to variable '{target}' "
                                        f"of type '{expected.pprint()}'", value)

            case 'IDENTIFIER':
                self.check_bound(value)
                actual = self.symbols[value.lexeme]
                if actual != expected:
                    raise SemanticError(f"type mismatch: cannot assign '{actual.pprint()}' "
                                        f"to '{expected.pprint()}' in "
                                        f"'{target} = {value.lexeme}'", value)

            case _:
                raise SemanticError(f"unsupported assignment value type {value.kind} "
                                    f"in assignment to '{target}'", value)
