from typing import Optional as Opt

### TAC class ###
# one line of tac, either `result = arg` (copy)
# or `result = arg op arg` with the operator kept as written
# has a json() -> dict() func
# has a pretty printing function -> str

OPCODES = {
    '+'     :   'add',
    '-'     :   'sub',
    '*'     :   'mul',
    '/'     :   'div',
    '>'     :   'gt',
    '<'     :   'lt',
    '=='    :   'eq',
    '!='    :   'neq',
}

class Tac():
    def __init__(self, result, args, operator: Opt[str] = None):
        self.result     = result
        self.args       = args
        self.operator   = operator

    @property
    def opcode(self):
        return OPCODES[self.operator] if self.operator else "copy"

    def json(self):
        return {
                "opcode"    : self.opcode,
                "args"      : self.args,
                "result"    : self.result,
                }

    def pprint(self):
        match len(self.args):
            case 1:
                return f"{self.result} = {self.args[0]}"
            case 2:
                return f"{self.result} = {self.args[0]} {self.operator} {self.args[1]}"

    def __repr__(self):
        return self.pprint()

class Taclist():
    def __init__(self, taclist = None):
        self.taclist = taclist or []

    def __len__(self):
        return len(self.taclist)

    def __bool__(self):
        return len(self.taclist) != 0

    def __iter__(self):
        return iter(self.taclist)

    def add(self, tac):
        self.taclist.append(tac)
        return self

    def merge(self, other):
        if other:
            self.taclist += other.taclist
        return self

    def json(self):
        return [tac.json() for tac in self.taclist]

    def pprint(self):
        return [tac.pprint() for tac in self.taclist]
