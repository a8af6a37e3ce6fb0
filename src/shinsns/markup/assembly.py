# SPDX-License-Identifier: LGPL-3-or-later

"""Assembly example columnizer

Example listings are typed freely in the instruction tables:

    MOV     #H'80,R1 ; R1 = H'FFFFFF80
    label:  ADD R0,R1

Every line is split into address, label, mnemonic (or directive),
operands and comment; the fields are then re-emitted in columns wide
enough for the longest entry of the whole listing.
"""

import collections
import re

from shinsns.util import log


NOREFORMAT = "#NOREFORMAT"

Line = collections.namedtuple("Line", [
    "address",
    "label",
    "mnemonic",
    "directive",
    "operand",
    "comment",
    "spacing",
])

# each pattern is matched against what the previous ones left over
FIELDS = Line(
    address=re.compile(r"^\s*(?=[0-9A-Fa-f]*[0-9])([0-9A-Fa-f]{4,8})(?=\s|$)\s*"),
    label=re.compile(r"^\s*([A-Za-z_]\w*:)"),
    mnemonic=re.compile(r"^\s*([A-Za-z][A-Za-z0-9/.]+)"),
    directive=re.compile(r"^\s*(\.[A-Za-z][A-Za-z0-9.]+)"),
    operand=re.compile(r"^\s*([-+,#_@”“()A-Za-z0-9]+)"),
    comment=re.compile(r"^\s*;\s*(.*?)\s*$"),
    spacing=re.compile(r"^[\s.]*$"),
)

HEXADECIMAL = re.compile(r"H'([0-9A-Fa-f]+)")
REGISTER = re.compile(r"\bR([0-9]{1,2})\b")


def split_line(text):
    fields = {}
    for (key, pattern) in FIELDS._asdict().items():
        match = pattern.search(text)
        if match is None or not match.re.groups:
            fields[key] = ""
        else:
            fields[key] = match.group(1)
        if match is not None:
            text = text[match.end():]

    if fields["comment"]:
        fields["comment"] = ("! " + fields["comment"])

    return Line(**fields)


def widths(lines):
    result = dict.fromkeys(Line._fields, 0)
    for line in lines:
        for (key, value) in line._asdict().items():
            if value:
                result[key] = max(result[key], (len(value) + 1))

    shared = max(result["mnemonic"], result["directive"])
    result["mnemonic"] = result["directive"] = shared

    return Line(**result)


def format_assembly(text):
    if text.startswith(NOREFORMAT):
        return text[len(NOREFORMAT):]

    text = HEXADECIMAL.sub(r"0x\1", text)
    text = REGISTER.sub(r"r\1", text)
    text = text.replace("After execution: ", "After execution:  ")

    lines = []
    for line in text.split("\n"):
        line = split_line(line)
        if any(line):
            lines.append(line)
    log("format_assembly", len(lines), "lines")

    columns = widths(lines)
    result = []
    for line in lines:
        for (key, value) in line._asdict().items():
            width = getattr(columns, key)
            if value:
                result.append(value.ljust(width))
            elif key != "directive":
                result.append(" " * width)
        result.append("\n")

    return "".join(result)
