import dataclasses as dc
import enum

class Type(enum.Enum):
    INT  = 1

    def pprint(self):
        match self:
            case self.INT:
                return "int"

class Operator(enum.Enum):
    PLUS     = '+'
    MINUS    = '-'
    MULT     = '*'
    DIV      = '/'
    GREATER  = '>'
    LESS     = '<'
    EQUAL    = '=='
    NOTEQUAL = '!='

    def pprint(self):
        return self.value

### EXPRESSIONS ###

# types of expressions:
# number literal, variable, binary expression
# every node keeps the line of its leading token
# pprint(depth) -> str, indented tree for display

@dc.dataclass
class Expression():
    line        : int

    def pprint(self, depth = 0):
        return "  " * depth + "base expression"

@dc.dataclass
class NumberLiteral(Expression):
    value       : int

    def pprint(self, depth = 0):
        return "  " * depth + f"NumberLiteral {self.value}"

@dc.dataclass
class Variable(Expression):
    name        : str

    def pprint(self, depth = 0):
        return "  " * depth + f"Variable {self.name}"

@dc.dataclass
class BinaryExpression(Expression):
    left        : Expression
    operator    : Operator
    right       : Expression

    def pprint(self, depth = 0):
        return "\n".join((
            "  " * depth + f"BinaryExpression {self.operator.name} ({self.operator.pprint()})",
            self.left.pprint(depth + 1),
            self.right.pprint(depth + 1),
        ))
