"""
Type markers for values Python represents with a wider builtin type.

Python integers are arbitrary precision and Python floats are doubles, so
fixed-width and single precision values are requested through these
markers. They are plain NewTypes: values are ordinary ints, floats and strs.
"""

from typing import NewType

Byte = NewType("Byte", int)
Short = NewType("Short", int)
Int = NewType("Int", int)
Long = NewType("Long", int)

Float32 = NewType("Float32", float)

Codepoint = NewType("Codepoint", int)
Char = NewType("Char", str)

BitSet = NewType("BitSet", frozenset)
AnyVal = NewType("AnyVal", object)

FIXED_WIDTH_INTS = (Byte, Short, Int, Long)
