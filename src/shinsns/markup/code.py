# SPDX-License-Identifier: LGPL-3-or-later

"""Bit-field tooltips for instruction encodings

An encoding such as "0011nnnnmmmm1100" is split into runs of one operand
class ("0" and "1" are both opcode bits), and every run is wrapped into
a span whose title describes the field.  Register and immediate titles
carry the width of the whole field, counted over the entire encoding.
"""

from shinsns.util import log


class OperandWidthError(ValueError):
    pass


TITLES = {
    "0": "Opcode Identifier",
    "*": "Ignored",
    "m": "Source Register",
    "n": "Destination Register",
    "i": "Unsigned Immediate Data",
    "s": "Signed Immediate Data",
    "d": "Displacement",
    "A": "DSP Address Pointer Register",
    "D": "DSP Data Register",
    "e": "Multiplier Source Register 1 (A1, X0, X1, Y0)",
    "f": "Multiplier Source Register 2 (A1, X0, Y0, Y1)",
    "g": "Multiplier Destination Register (A0, A1, M0, M1)",
    "x": "ALU Source Register 1 (A0, A1, X0, X1)",
    "y": "ALU Source Register 2 (M0, M1, Y0, Y1)",
    "u": "ALU Destination Register (A0, A1, X0, Y0)",
    "z": "ALU Destination Register (A0, A1, M0, M1, X0, X1, Y0, Y1)",
}

# DSP register selectors with a fixed width
WIDTHS = {
    "e": 2,
    "f": 2,
    "g": 2,
    "x": 2,
    "y": 2,
    "u": 2,
    "z": 4,
}


def operand_class(char):
    if char == "1":
        return "0"
    return char


def title(letter, total):
    cls = operand_class(letter)
    if cls not in TITLES:
        raise OperandWidthError(f"unknown operand type: {letter!r}")

    text = TITLES[cls]
    if cls in "mn":
        text += f" (R0 - R{(1 << total) - 1})"
    elif cls in "isd":
        text += f" ({total} bits)"
    elif cls in WIDTHS and total != WIDTHS[cls]:
        raise OperandWidthError(f"expected {WIDTHS[cls]} bits "
            f"for {letter!r} register type, found {total}")
    return text


def span(group, code):
    letter = group[-1]
    total = code.count(letter)
    return f'<span title="{title(letter, total)}">{group}</span>'


def format_code(code):
    result = []
    group = ""
    spaces = ""
    for char in code:
        if char == " ":
            spaces += char
            continue
        if group and operand_class(char) == operand_class(group[-1]):
            group += (spaces + char)
        else:
            if group:
                result.append(span(group, code))
            result.append(spaces)
            group = char
        spaces = ""
    if group:
        result.append(span(group, code))
    result.append(spaces)

    log("format_code", code)
    return "".join(result)


def fix_id(code):
    return code.replace(" ", "_")
