from .common import *
from .opcodes import conds, classify, lookup
from .program import program, legword, MalformedInput, UnresolvedTarget, WORD_BYTES
