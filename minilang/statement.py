import dataclasses as dc

from typing import Optional as Opt

from .expression import Expression

### STATEMENTS ###

# holds a line number for the beginning of each statement
# holds the expressions and blocks owned by one statement
# blocks keep their statements in program order
# methods:
# pprint(depth)     -> str indented representation of the statement

@dc.dataclass
class Statement():
    line        : int

    def pprint(self, depth = 0):
        return "  " * depth + "base statement"

@dc.dataclass
class Declaration(Statement):
    name        : str

    def pprint(self, depth = 0):
        return "  " * depth + f"Declaration int {self.name}"

@dc.dataclass
class Assignment(Statement):
    name        : str
    value       : Expression

    def pprint(self, depth = 0):
        return "\n".join((
            "  " * depth + f"Assignment {self.name}",
            self.value.pprint(depth + 1),
        ))

@dc.dataclass
class PrintStatement(Statement):
    value       : Expression

    def pprint(self, depth = 0):
        return "\n".join((
            "  " * depth + "PrintStatement",
            self.value.pprint(depth + 1),
        ))

@dc.dataclass
class Block(Statement):
    statements  : list[Statement] = dc.field(default_factory = list)

    def __iter__(self):
        return iter(self.statements)

    def __len__(self):
        return len(self.statements)

    def pprint(self, depth = 0):
        lines = ["  " * depth + "Block"]
        for statement in self.statements:
            lines.append(statement.pprint(depth + 1))
        return "\n".join(lines)

@dc.dataclass
class IfStatement(Statement):
    condition   : Expression
    success     : Block
    failure     : Opt[Block] = None     # no else branch

    def pprint(self, depth = 0):
        lines = [
            "  " * depth + "IfStatement",
            "  " * (depth + 1) + "condition:",
            self.condition.pprint(depth + 2),
            "  " * (depth + 1) + "then:",
            self.success.pprint(depth + 2),
        ]
        if self.failure is not None:
            lines.append("  " * (depth + 1) + "else:")
            lines.append(self.failure.pprint(depth + 2))
        return "\n".join(lines)

@dc.dataclass
class WhileStatement(Statement):
    condition   : Expression
    loop        : Block

    def pprint(self, depth = 0):
        return "\n".join((
            "  " * depth + "WhileStatement",
            "  " * (depth + 1) + "condition:",
            self.condition.pprint(depth + 2),
            "  " * (depth + 1) + "body:",
            self.loop.pprint(depth + 2),
        ))
