import sys
import dataclasses_struct as dcs
from .common import decode, xregs, aregs, BadCondition

@dcs.dataclass(dcs.BIG_ENDIAN)
class legword:  # one instruction word as stored in the binary
    data: dcs.U32 = 0

WORD_BYTES = 4

class MalformedInput(Exception):
    def __init__(self, size): super().__init__(f'input is {size} bytes, not a whole number of {WORD_BYTES}-byte instruction words'); self.size = size

class UnresolvedTarget(Exception):
    def __init__(self, op, target): super().__init__(f'{op.name} at instruction {op.addr} branches to {target}, outside the program'); self.op = op; self.target = target

class program:  # a decoded LEGv8 binary: instructions, label markers and label names
    def __init__(self, data=b'', abi=False, lenient=False, trace=False):
        if len(data) % WORD_BYTES: raise MalformedInput(len(data))
        n = len(data) // WORD_BYTES
        self.ops, self.marks, self.names = [None]*n, [False]*n, [None]*n
        self.regs, self.lenient, self.trace = aregs if abi else xregs, lenient, trace
        for addr in range(n): self.load_word(addr, legword.from_packed(data[addr*WORD_BYTES:(addr+1)*WORD_BYTES]).data)
        self.name_labels()
    @classmethod
    def read(cls, path, **kwargs):
        with open(path, 'rb') as f: return cls(f.read(), **kwargs)
    def load_word(self, addr, word):
        op = self.ops[addr] = decode(word, addr)
        if self.trace: print(repr(op), file=sys.stderr)
        if (target := op.target()) is not None and 0 <= target < len(self.marks): self.marks[target] = True  # out-of-range targets fail at render
    def name_labels(self):
        count = 0
        for i, marked in enumerate(self.marks):
            if marked: self.names[i], count = f'label{count}', count+1
    def label(self, op):
        target = op.target()
        if 0 <= target < len(self.names) and self.names[target] is not None: return self.names[target]
        if self.lenient: return f'<unresolved:{target}>'
        raise UnresolvedTarget(op, target)
    def render(self):  # yields assembly lines, label declarations first
        for op, name in zip(self.ops, self.names):
            if name is not None: yield f'{name}:'
            try: yield op.asm(self.label(op) if op.offset else None, self.regs)
            except BadCondition as e:
                if not self.lenient: raise
                yield f'Error: {e}'
    def dump(self):  # yields the raw word in binary and its opcode, one line per instruction
        for op in self.ops: yield f'{op.data:b}\t{op.opcode}'
    def __len__(self): return len(self.ops)
