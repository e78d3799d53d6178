"""Lark grammar for textual FD literals.

Accepted forms:
    A, B -> C
    student_id section_id -> grade
    A → B, C
Attributes on one side are separated by commas and/or whitespace.
"""

FD_GRAMMAR = r"""
?start: fd

fd: side ARROW side

side: ATTRIBUTE (","? ATTRIBUTE)*

ARROW: "->" | "→"
ATTRIBUTE: /[A-Za-z_][A-Za-z0-9_.$#]*/

%import common.WS
%ignore WS
"""
