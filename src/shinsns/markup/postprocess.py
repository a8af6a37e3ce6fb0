# SPDX-License-Identifier: LGPL-3-or-later
from shinsns.insndb.rules import RULES
from shinsns.markup.assembly import format_assembly
from shinsns.markup.code import format_code
from shinsns.markup.resolver import MetadataResolver
from shinsns.markup.symbols import (
    LONG_ACRONYMS,
    SHORT_ACRONYMS,
    TYPEABLE_PATTERNS,
    TYPEABLE_SYMBOLS,
    UNICODE_SYMBOLS,
    decorate_emphasis,
    escape_angle_brackets,
    replace_literals,
    replace_patterns,
    trim_blank_lines,
    var,
)
from shinsns.util import log


TRIMMED = (
    "description",
    "note",
    "brief",
    "flags",
    "abstract",
    "operation",
    "exceptions",
)


def fix_format(text, width=10):
    """replace every tab with spaces up to the given column"""
    lines = []
    for line in text.split("\n"):
        while "\t" in line:
            column = line.index("\t")
            padding = " " * max((width - column), 1)
            line = (line[:column] + padding + line[column + 1:])
        lines.append(line)
    return "\n".join(lines)


def fix_images(text, title):
    return text.replace("<img src=",
        f'<img alt="{title}" class="image_filter" src=')


def format_exceptions(text):
    lines = filter(str.strip, text.split("\n"))
    return "\n".join(var("Possible Exception", line.strip())
        for line in lines)


def process_record(record):
    log("process", repr(record.format))

    code = format_code(record.code)
    title = record.name.replace("`", "")

    record.format = fix_format(record.format, 10)
    for key in TRIMMED:
        setattr(record, key, trim_blank_lines(getattr(record, key)))

    record.description = fix_images(record.description, title)
    record.note = fix_images(record.note, title)

    record.abstract = replace_literals(record.abstract, TYPEABLE_SYMBOLS)
    record.abstract = replace_patterns(record.abstract, TYPEABLE_PATTERNS)
    record.brief = replace_literals(record.brief, UNICODE_SYMBOLS)
    record.flags = replace_literals(record.flags, TYPEABLE_SYMBOLS)

    record.description = replace_literals(record.description, LONG_ACRONYMS)
    record.description = replace_patterns(record.description, SHORT_ACRONYMS)
    record.note = replace_literals(record.note, LONG_ACRONYMS)
    record.note = replace_patterns(record.note, SHORT_ACRONYMS)

    record.example = escape_angle_brackets(format_assembly(record.example))
    record.operation = escape_angle_brackets(record.operation)
    record.exceptions = format_exceptions(record.exceptions)

    record.code = code
    record.name = decorate_emphasis(record.name)

    return record


def post_processing(blocks, rules=RULES):
    blocks = tuple(blocks)
    MetadataResolver(rules).resolve(blocks)
    for block in blocks:
        for record in block:
            process_record(record)
    return blocks
