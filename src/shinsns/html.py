# SPDX-License-Identifier: LGPL-3-or-later

"""Markup fragments for processed instruction records

Records are expected to have gone through post_processing(): free text
fields already carry their markup and escaping.  Only the raw format
string is escaped here.
"""

import re

from shinsns.isa import ISA
from shinsns.markup.code import fix_id
from shinsns.markup.symbols import escape_angle_brackets


CPU_GRID = ("<span class=\"cpu_grid\">" + ("<var></var>" * len(ISA)) +
    "</span>")


def strip_tags(text):
    return re.sub(r"<[^>]*>", "", text)


def isa_list(record):
    return "".join(f" {isa.name}" for isa in ISA.members(record.isa))


def isa_props(record, prop):
    result = []
    for isa in ISA:
        if record.for_isa(isa) and prop[isa]:
            result.append(f"<var>{prop[isa]}</var>")
        else:
            result.append("<var></var>")
    return "".join(result)


def section_title(title):
    return f"<span title=\"section\">{title}</span>\n<br />\n"


def note_section(title, text):
    if not text:
        return ""
    return (section_title(title) + f"<br />{text}<br /><br />\n")


def code_section(title, text):
    if not text:
        return ""
    return (section_title(title) + f"<span title=\"code\">{text}</span>\n")


def assembly_section(title, text):
    if not text:
        return ""
    return (section_title(title) +
        f"<span title=\"assembly\">{text}</span>\n")


def list_section(title, text):
    if not text:
        return ""
    items = "\n".join(f"  {line}" for line in text.split("\n"))
    return (section_title(title) +
        f"<span title=\"list\">\n{items}\n</span>\n")


def citations_section(title, citations):
    if not citations:
        return ""
    lines = []
    for citation in citations:
        details = citation.document.details
        name = details.name.replace("\n", " ")
        lines.append(f"<var><a href=\"{details.location}\">{name}</a>"
            f", page {citation.page}</var>")
    return list_section(title, "\n".join(lines))


def render_record(record, row):
    code = fix_id(strip_tags(record.code))
    summary = "\n".join((
        f"<input type=\"checkbox\" id=\"row{row}\" />",
        f"<label class=\"summary{isa_list(record)}\" for=\"row{row}\">",
        CPU_GRID,
        f"<span>{escape_angle_brackets(record.format)}</span>",
        f"<span>{record.abstract}</span>",
        f"<span id=\"{code}\" class=\"colorized\">{record.code}</span>",
        f"<span>{record.flags}</span>",
        f"<span class=\"cycle_grid\">{isa_props(record, record.group)}</span>",
        f"<span class=\"cycle_grid\">{isa_props(record, record.issue)}</span>",
        f"<span class=\"cycle_grid\">{isa_props(record, record.latency)}</span>",
        "<span class=\"details\">",
    ))
    details = "".join((
        note_section(record.name, record.description),
        note_section("Note", record.note),
        code_section("Operation", record.operation),
        assembly_section("Example", record.example),
        list_section("Possible Exceptions", record.exceptions),
        citations_section("Citations", record.citations),
    ))
    return (summary + "\n" + details + "</span>\n</label>\n")


def render_block(block, start=0):
    result = [f"<br/><br/><br/><b>{block.title}</b><br/><br/>\n"]
    for (row, record) in enumerate(block, start):
        result.append(render_record(record, row))
    return "".join(result)
