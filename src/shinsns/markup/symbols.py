# SPDX-License-Identifier: LGPL-3-or-later

"""Symbol and acronym substitution

Literal tables are applied entry by entry, in order, and each entry rewrites
the output of the ones before it.  That is why every table starts by turning
the raw characters used by markup (">", "<", "=", "/") into entities: the
markup introduced by later entries is never touched again.

Pattern tables hold (regex, template) pairs.  Templates may refer to groups
with \\1.  A pattern that fails to compile is reported and skipped.
"""

import functools
import re

from shinsns.util import log, LogType


def var(title, text=""):
    return f'<var title="{title}">{text}</var>'


def abbr(title, text):
    return f'<abbr title="{title}">{text}</abbr>'


UNICODE_SYMBOLS = (
    (">", "&gt;"),
    ("<", "&lt;"),
    ("=", "&equal;"),
    ("/", "&divide;"),
    ("≥", var("greater than or equal")),
    ("≤", var("less than or equal")),
    ("&lt;&lt;", var("shift bits left")),
    ("&gt;&gt;", var("shift bits right")),
    ("&gt;", var("greater than")),
    ("&lt;", var("less than")),
    ("&equal;", var("equal")),
    ("∀", var("for all")),
    ("-", var("subtract")),
    ("−", var("subtract")),
    ("+", var("add")),
    ("×", var("multiply")),
    ("÷", var("divide")),
    ("&divide;", var("divide")),
    ("∨", var("binary or")),
    ("∧", var("binary and")),
    ("→", var("store into (right)")),
    ("←", var("store into (left)")),
    ("⊕", var("binary xor")),
    ("~", var("binary not")),
    ("PC’’", var("double prime", "PC")),
    ("PC’", var("prime", "PC")),
)

TYPEABLE_SYMBOLS = (
    (">", "&gt;"),
    ("<", "&lt;"),
    ("=", "&equal;"),
    ("/", "&divide;"),
    ("-&gt;", var("store into (right)")),
    ("&lt;-", var("store into (left)")),
    ("&gt;&equal;", var("greater than or equal")),
    ("&lt;&equal;", var("less than or equal")),
    ("&equal;", var("equality")),
    ("&lt;&lt;", var("shift bits left")),
    ("&gt;&gt;", var("shift bits right")),
    ("&gt;", var("greater than")),
    ("&lt;", var("less than")),
    ("^", var("binary xor")),
    ("~", var("binary not")),
    ("*", var("multiply")),
    ("-", var("subtract")),
    ("+", var("add")),
    ("&divide;", var("divide")),
    ("&", var("binary and")),
    ("|", var("binary or")),
)

TYPEABLE_PATTERNS = (
    (r"abs\(([^\)]+)\)", var("absolute value", r"\1")),
    (r"sqrt\(([^\)]+)\)", var("square root", r"\1")),
    (r"sin\(([^\)]+)\)", var("sine", r"\1")),
    (r"cos\(([^\)]+)\)", var("cosine", r"\1")),
)


def _long(acronym, title):
    return (acronym, abbr(title, acronym))


# plain text replacement: an acronym must not occur inside the title of
# an entry placed before it
LONG_ACRONYMS = (
    _long("ALU", "Arithmetic Logic Unit"),
    _long("ASID", "Address Space Identifier"),
    _long("CPU", "Central Processing Unit"),
    _long("FPU", "Floating Point Unit"),
    _long("FPSCR", "Floating-Point Status/Control Register"),
    _long("UTLB", "Unified Translation Lookaside Buffer"),
    _long("ITLB", "Instruction Translation Lookaside Buffer"),
    _long("LRU", "Least Recently Used"),
    _long("LSB", "Least Significant Bit"),
    _long("MMU", "Memory Management Unit"),
    _long("MSB", "Most Significant Bit"),
    _long("PMB", "Privileged space Mapping Buffer"),
    _long("PTEH", "Page Table Entry High register"),
    _long("PTEL", "Page Table Entry Low register"),
    _long("RISC", "Reduced Instruction Set Computer"),
    _long("UBC", "User Break Controller"),
    _long("GBR", "Global Base Register"),
    _long("VBR", "Vector Base Register"),
    _long("DBR", "Debug Base Register"),
    _long("SGR", "Saved General Register"),
    _long("SPC", "Saved Program Counter"),
    _long("SSR", "Saved Status Register"),
    _long("DSR", "DSP Status Register"),
    _long("EXPEVT", "Exception Event register"),
    _long("INTEVT", "Interrupt Event register"),
    _long("I0-I3", "Interrupt mask flag bits"),
    _long("I3-I0", "Interrupt mask flag bits"),
    _long("MACH", "Multiply and ACcumulate High (word)"),
    _long("MACL", "Multiply and ACcumulate Low (word)"),
)


def _short(acronym, title):
    # neither inside a word, an entity, a tag nor an already expanded range
    pattern = rf'(^|[^<>\w\-"=/&;]){acronym}(?![<>\w\-"=/])'
    return (pattern, r"\1" + abbr(title, acronym))


SHORT_ACRONYMS = (
    _short("MAC", "Multiply and ACcumulate"),
    _short("TLB", "Translation Lookaside Buffer"),
    _short("PC", "Program Counter"),
    _short("PR", "Procedure Register"),
    _short("SR", "Status Register"),
    _short("MOD", "Modulo register"),
    _short("RS", "Repeat Start register"),
    _short("RE", "Repeat End register"),
    _short("RC", "Repeat Count"),
    _short("I0", "Interrupt mask bit"),
    _short("I1", "Interrupt mask bit"),
    _short("I2", "Interrupt mask bit"),
    _short("I3", "Interrupt mask bit"),
    _short("MD", "Processor Mode bit flag"),
    _short("RB", "Register Bank bit flag"),
    _short("BL", "Block exceptions bit flag"),
    _short("FD", "FPU Disable bit flag"),
    _short("CS", "Condition Select bit flags"),
    _short("DC", "DSP Condition bit flag"),
    _short("GT", "Signed Greater Than bit flag"),
    _short("M", "Divide step M bit flag"),
    _short("Q", "Divide step Q bit flag"),
    _short("Z", "Zero value bit flag"),
    _short("N", "Negative value flag"),
    _short("V", "oVerflow bit flag"),
    _short("S", "Sum bit flag"),
    _short("T", "Test bit flag"),
)


def replace_literals(text, table):
    if not text:
        return text
    for (literal, replacement) in table:
        text = text.replace(literal, replacement)
    return text


@functools.lru_cache(maxsize=None)
def compile_pattern(pattern):
    return re.compile(pattern)


def replace_patterns(text, table):
    if not text:
        return text
    for (pattern, template) in table:
        try:
            text = compile_pattern(pattern).sub(template, text)
        except re.error as error:
            log(f"substitution {pattern!r}: {error}",
                kind=LogType.Regex)
    return text


def escape_angle_brackets(text):
    return text.replace("<", "&lt;").replace(">", "&gt;")


def trim_blank_lines(text):
    lines = text.split("\n")
    while lines and not lines[0].strip():
        lines.pop(0)
    while lines and not lines[-1].strip():
        lines.pop()
    return "\n".join(lines)


def decorate_emphasis(text):
    return re.sub(r"`([^`]*)`", r"<em>\1</em>", text)
