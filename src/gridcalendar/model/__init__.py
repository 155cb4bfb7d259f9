"""
The MODEL layer contains pure data structures and layout arithmetic.
It has NO knowledge of any drawing backend (TikZ, matplotlib).
It deals with Geometry, Primitives and Week Dates.
"""
