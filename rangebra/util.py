"""Integer width limits used by the built-in successor steps.

These mirror fixed-width machine integers so stepping can report overflow
the way a bounded integer type would.
"""

# Signed limits
I8_MIN = -(2**7)
I8_MAX = 2**7 - 1
I16_MIN = -(2**15)
I16_MAX = 2**15 - 1
I32_MIN = -(2**31)
I32_MAX = 2**31 - 1
I64_MIN = -(2**63)
I64_MAX = 2**63 - 1

# Unsigned limits (all start at zero)
U8_MAX = 2**8 - 1
U16_MAX = 2**16 - 1
U32_MAX = 2**32 - 1
U64_MAX = 2**64 - 1
