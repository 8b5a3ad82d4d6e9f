"""Column, row and square type aliases with coordinate helpers.

Board layout (row-major, columns counted from the left as seen by SENTE):
    9a=0, 8a=1, ..., 1a=8
    9b=9, 8b=10, ..., 1b=17
    ...
    9i=72, 8i=73, ..., 1i=80

A column index ``c`` is written as the digit ``9 - c``; a row index ``r`` is
written as the letter ``'a' + r``.
"""

from __future__ import annotations

from typing import TypeAlias

Col: TypeAlias = int  # 0–8 ('9'–'1')
Row: TypeAlias = int  # 0–8 ('a'–'i')
Square: TypeAlias = int  # 0–80

NUM_COLS = 9
NUM_ROWS = 9
NUM_SQUARES = NUM_COLS * NUM_ROWS

ALL_COLS: tuple[Col, ...] = tuple(range(NUM_COLS))
ALL_ROWS: tuple[Row, ...] = tuple(range(NUM_ROWS))
ALL_SQUARES: tuple[Square, ...] = tuple(range(NUM_SQUARES))


def col_of(sq: Square) -> Col:
    """Column index 0–8 (file '9'–'1')."""
    return sq % NUM_COLS


def row_of(sq: Square) -> Row:
    """Row index 0–8 (rank 'a'–'i')."""
    return sq // NUM_COLS


def make_square(col: Col, row: Row) -> Square:
    """Create square from column (0–8) and row (0–8)."""
    if not (0 <= col < NUM_COLS and 0 <= row < NUM_ROWS):
        raise ValueError(f"col/row out of range: ({col}, {row})")
    return row * NUM_COLS + col


def col_char(col: Col) -> str:
    return str(NUM_COLS - col)


def row_char(row: Row) -> str:
    return chr(ord("a") + row)


def square_name(sq: Square) -> str:
    """SFEN name, e.g. 0 → '9a', 80 → '1i'."""
    return col_char(col_of(sq)) + row_char(row_of(sq))


def is_valid_square(sq: int) -> bool:
    """Check whether integer is a valid square index."""
    return 0 <= sq < NUM_SQUARES


# ── Named square constants ──────────────────────────────────────────────────
# SQ_<file><rank>, with ranks numbered 1–9 for 'a'–'i' (SQ_76 is "7f").

SQ_91, SQ_81, SQ_71, SQ_61, SQ_51, SQ_41, SQ_31, SQ_21, SQ_11 = range(0, 9)
SQ_92, SQ_82, SQ_72, SQ_62, SQ_52, SQ_42, SQ_32, SQ_22, SQ_12 = range(9, 18)
SQ_93, SQ_83, SQ_73, SQ_63, SQ_53, SQ_43, SQ_33, SQ_23, SQ_13 = range(18, 27)
SQ_94, SQ_84, SQ_74, SQ_64, SQ_54, SQ_44, SQ_34, SQ_24, SQ_14 = range(27, 36)
SQ_95, SQ_85, SQ_75, SQ_65, SQ_55, SQ_45, SQ_35, SQ_25, SQ_15 = range(36, 45)
SQ_96, SQ_86, SQ_76, SQ_66, SQ_56, SQ_46, SQ_36, SQ_26, SQ_16 = range(45, 54)
SQ_97, SQ_87, SQ_77, SQ_67, SQ_57, SQ_47, SQ_37, SQ_27, SQ_17 = range(54, 63)
SQ_98, SQ_88, SQ_78, SQ_68, SQ_58, SQ_48, SQ_38, SQ_28, SQ_18 = range(63, 72)
SQ_99, SQ_89, SQ_79, SQ_69, SQ_59, SQ_49, SQ_39, SQ_29, SQ_19 = range(72, 81)
