"""
bai2_ingestion -- BAI2 cash-management statement parsing.

Turns the lines of a BAI2 file into an immutable ``FileRecord`` tree
(File -> Group -> Account -> Amount / Transaction). Read-only: nothing in
this package writes BAI2.

    from bai2_ingestion import parse_text

    statement = parse_text(path.read_text())
    for account in statement.accounts:
        ...

Architecture:
    domain/    pure types and code tables (ZERO I/O)
    scanner/   lines -> untyped record tree, structural checks
    resolver/  record tree -> typed model, currency defaults
    parser.py  public entry points, logging context

Callers acquire the lines; opening files and rendering results are
outside this package.
"""

from bai2_ingestion.parser import parse_lines, parse_text, scan_lines

__all__ = [
    "parse_lines",
    "parse_text",
    "scan_lines",
]
