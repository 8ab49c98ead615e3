import functools
from .opcodes import conds, lookup

xregs = [f'X{i}' for i in range(32)]
aregs = xregs[:16] + ['IP0', 'IP1'] + xregs[18:28] + ['SP', 'FP', 'LR', 'XZR']  # special-purpose names
fields = {  # name: (lsb, width, signed)
    'opcode':     (21, 11, False),
    'rd':         ( 0,  5, False),
    'rn':         ( 5,  5, False),
    'rm':         (16,  5, False),
    'shamt':      (10,  6, False),
    'immediate':  (10, 12, False),
    'b_address':  ( 0, 26, True),
    'cb_address': ( 5, 19, True),
    'd_address':  (12,  9, True),
}
def zext(length, word): return word&((1<<length)-1)
def sext(length, word): return word|~((1<<length)-1) if word&(1<<(length-1)) else zext(length, word)
def field(name, word):
    lsb, width, signed = fields[name]
    return (sext if signed else zext)(width, zext(width, word>>lsb))

class BadCondition(Exception):
    def __init__(self, cond): super().__init__(f'Unhandled <cond> opcode ({cond}) for instruction B.cond'); self.cond = cond

def condition(cond):
    if not 0 <= cond < len(conds): raise BadCondition(cond)
    return conds[cond]

class legop:
    def __init__(self, **kwargs): [setattr(self, k, v) for k, v in kwargs.items()]
    def target(self): return None if self.offset is None else self.addr + getattr(self, self.offset)  # absolute instruction index
    def mnemonic(self): return f'B.{condition(self.rd)}' if 'cond' in self.args else self.name
    def arg_str(self, label=None, regs=xregs):
        args = []
        for k in self.args:
            if k in ('rd', 'rn', 'rm'): args.append(regs[getattr(self, k)])
            elif k in ('immediate', 'shamt'): args.append(f'#{getattr(self, k)}')
            elif k == 'mem': args.append(f'[{regs[self.rn]}, #{self.d_address}]')
            elif k == 'label': args.append(label)
        return ', '.join(args)
    def asm(self, label=None, regs=xregs):
        if self.name == 'UNKNOWN': return f'Unhandled instruction; opcode in decimal: {self.opcode}'
        return f'{self.mnemonic()} {self.arg_str(label, regs)}'.rstrip()
    def __repr__(self): return f'{self.addr:08x}: {self.data:032b} {self.name}'

@functools.lru_cache(maxsize=4096)
def decode(word, addr=0):  # decodes one instruction word; all fields are extracted regardless of kind
    o = legop(addr=addr, data=word, name='UNKNOWN', args=(), offset=None, **{name: field(name, word) for name in fields})
    if op := lookup(o.opcode): [setattr(o, k, v) for k, v in op.items()]
    return o
