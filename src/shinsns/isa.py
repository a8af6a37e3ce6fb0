# SPDX-License-Identifier: LGPL-3-or-later

"""Instruction set variants and reference documents of the SuperH family

The nine variants below are the columns of the compatibility, group, issue
and latency grids, in display order.  A record's applicable set and every
environment entry are flag combinations of these.
"""

from enum import (
    Enum,
    Flag,
    unique,
)
from collections import namedtuple
from os.path import dirname, join
import functools
import operator


def find_wiki_dir():
    filedir = dirname(__file__)
    return join(filedir, 'isatables')


def find_wiki_file(name):
    return join(find_wiki_dir(), name)


@unique
class ISA(Flag):
    SH1 = 1 << 0
    SH2 = 1 << 1
    SH2E = 1 << 2
    SH3 = 1 << 3
    SH3E = 1 << 4
    DSP = 1 << 5
    SH4 = 1 << 6
    SH4A = 1 << 7
    SH2A = 1 << 8

    @classmethod
    def _missing_(cls, desc):
        if isinstance(desc, str):
            names = [name.strip() for name in desc.split("|")]
            value = cls(0)
            for name in filter(None, names):
                if name == "SH_ALL":
                    value |= SH_ALL
                else:
                    value |= cls[name]
            return value
        return super()._missing_(desc)

    @classmethod
    def members(cls, value):
        """single variants contained in value, in display order"""
        return tuple(isa for isa in cls if isa & value)

    @functools.lru_cache(maxsize=None)
    def __str__(self):
        return "|".join(isa.name for isa in ISA.members(self))


SH_ALL = functools.reduce(operator.or_, ISA)


class ISAProperty(dict):
    """per-variant label text, e.g. issue cycles

    built from (variants, text) pairs, every variant in the set receives
    the text.  lookup of a variant without a label gives "".
    """
    def __init__(self, items=()):
        if isinstance(items, dict):
            items = items.items()

        mapping = {}
        for (isas, text) in items:
            if not isinstance(isas, ISA):
                isas = ISA(isas)
            if not isinstance(text, str):
                raise ValueError(text)
            for isa in ISA.members(isas):
                mapping[isa] = text

        return super().__init__(mapping)

    def __missing__(self, key):
        if not isinstance(key, ISA):
            raise KeyError(key)
        return ""

    def __hash__(self):
        return hash(tuple(sorted((k.value, v) for (k, v) in self.items())))


DocumentDetails = namedtuple("DocumentDetails",
                             ["name", "identifier", "date", "location",
                              "isa"])


@unique
class Document(Enum):
    SH1_DOC = 0
    SH1_2_PROG_DOC = 1
    SH1_2_DSP_DOC = 2
    SH2A_2E_DOC = 3
    SH3_3E_DSP_DOC = 4
    SHA4_CORE_DOC = 5
    SH7750_PROG_DOC = 6
    SH4A_DOC = 7

    @classmethod
    def _missing_(cls, desc):
        if isinstance(desc, str):
            return cls[desc]
        return super()._missing_(desc)

    @property
    def details(self):
        return documents[self]


documents = {
    Document.SH1_DOC: DocumentDetails(
        "SH7032/7034 Series\nSuperH™ RISC Engine\nHardware Manual",
        "ADE-602-063A",
        "1995",
        "https://archive.org/details/"
        "bitsavers_hitachisupperHRISCEngineHardwareManual_29586120",
        ISA.SH1),
    Document.SH1_2_PROG_DOC: DocumentDetails(
        "SuperH RISC Engine\nSH-1/SH-2\nProgramming Manual\n3rd Edition",
        "ADE-602-063B",
        "1996/09/03",
        "https://antime.kapsi.fi/sega/files/h12p0.pdf",
        ISA.SH1 | ISA.SH2),
    Document.SH1_2_DSP_DOC: DocumentDetails(
        "Hitachi SuperH™ RISC Engine\nSH-1/SH-2/SH-DSP\nProgramming Manual",
        "ADE-602-063C\nRev. 4.0",
        "1999/13/05",
        "https://retrocdn.net/images/3/35/"
        "Hitachi_SuperH_Programming_Manual.pdf",
        ISA.SH1 | ISA.SH2 | ISA.DSP),
    Document.SH2A_2E_DOC: DocumentDetails(
        "SH-2A, SH2A-FPU\nSoftware Manual\nUser’s Manual\n"
        "Renesas 32-Bit RISC\nMicrocomputer\nSuperH™ RISC Engine",
        "Rev. 3.00",
        "2005/07/08",
        "https://www.renesas.com/us/en/document/mah/"
        "sh-2a-sh2a-fpu-software-manual?language=en",
        ISA.SH2E | ISA.SH2A),
    Document.SH3_3E_DSP_DOC: DocumentDetails(
        "SH-3/SH-3E/SH3-DSP\nSoftware Manual",
        "Rev. 4.00",
        "2006/05/15",
        "https://www.renesas.com/us/en/document/mas/"
        "sh-3sh-3esh3-dsp-software-manual?language=en",
        ISA.SH3 | ISA.SH3E | ISA.DSP),
    Document.SHA4_CORE_DOC: DocumentDetails(
        "SH-4 CPU Core Architecture",
        "ADCS 7182230F",
        "2002/09/12",
        "https://www.st.com/resource/en/user_manual/"
        "cd00147165-sh-4-32-bit-cpu-core-architecture-stmicroelectronics.pdf",
        ISA.SH4),
    Document.SH7750_PROG_DOC: DocumentDetails(
        "SuperH™ (SH) 32-Bit RISC MCU/MPU Series\nSH7750\n"
        "High-Performance RISC Engine\nProgramming Manual",
        "ADE-602-156A\nRev. 2.0",
        "1999/03/04",
        "https://archive.org/details/manuallib-id-2595799",
        ISA.SH4),
    Document.SH4A_DOC: DocumentDetails(
        "SH-4A\nExtended Functions\nSoftware Manual",
        "Rev.2.00",
        "2013/01/18",
        "https://www.renesas.com/us/en/document/mat/"
        "sh-4a-extended-functions-software-manual?language=en",
        ISA.SH4A),
}
