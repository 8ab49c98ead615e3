import bisect, pathlib, importlib.resources, yaml

conds = 'EQ,NE,HS,LO,MI,PL,VS,VC,HI,LS,GE,LT,GT,LE'.split(',')  # B.cond <cond> field, by value

def load(path=None):  # returns the opcode table as [(low, high, op), ...] sorted by low
    source = pathlib.Path(path) if path else importlib.resources.files('tinyleg') / 'opcodes.yaml'
    table = []
    for name, entry in yaml.safe_load(source.read_text()).items():
        low, high = (entry['match'], entry['match']) if isinstance(entry['match'], int) else entry['match']
        if not 0 <= low <= high < 2048: raise ValueError(f'{name}: bad opcode range {low}..{high}')
        table.append((low, high, dict(name=name, args=tuple(entry.get('args', ())), offset=entry.get('offset'))))
    table.sort(key=lambda t: t[0])
    for (_, high, a), (low, _, b) in zip(table, table[1:]):
        if low <= high: raise ValueError(f'opcode ranges of {a["name"]} and {b["name"]} overlap at {low}')
    return table

table = load()
lows = [low for low, _, _ in table]

def lookup(opcode, table=table, lows=lows):  # binary search over the disjoint ranges
    i = bisect.bisect_right(lows, opcode) - 1
    if i >= 0 and opcode <= table[i][1]: return table[i][2]
    return None

def classify(opcode): return (lookup(opcode) or {'name': 'UNKNOWN'})['name']
