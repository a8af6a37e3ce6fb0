import contextlib
import io
import unittest

from shinsns.isa import find_wiki_dir
from shinsns.insndb.core import (
    Block,
    ClassificationRule,
    Database,
    InstructionRecord,
)
from shinsns.markup.code import OperandWidthError
from shinsns.markup.postprocess import (
    fix_format,
    fix_images,
    format_exceptions,
    post_processing,
    process_record,
)


class TestFixFormat(unittest.TestCase):
    def test_tab_stop(self):
        self.assertEqual(fix_format("mov.l\tRm,@Rn"), "mov.l     Rm,@Rn")
        self.assertEqual(fix_format("mov\tRm,Rn"), "mov       Rm,Rn")
        self.assertEqual(fix_format("mov\tRm,Rn").index("R"), 10)

    def test_no_tab(self):
        self.assertEqual(fix_format("rts"), "rts")

    def test_past_stop(self):
        self.assertEqual(fix_format("movca.long\tR0"), "movca.long R0")

    def test_lines(self):
        self.assertEqual(fix_format("padd\tSx\npmuls\tSe"),
            "padd      Sx\npmuls     Se")

    def test_width(self):
        self.assertEqual(fix_format("a\tb", 4), "a   b")


class TestFields(unittest.TestCase):
    def test_images(self):
        self.assertEqual(fix_images("x <img src=\"a.svg\"> y", "Branch"),
            "x <img alt=\"Branch\" class=\"image_filter\" src=\"a.svg\"> y")
        self.assertEqual(fix_images("no image", "Branch"), "no image")

    def test_exceptions(self):
        self.assertEqual(format_exceptions("Slot illegal\n\n  Address error\n"),
            "<var title=\"Possible Exception\">Slot illegal</var>\n"
            "<var title=\"Possible Exception\">Address error</var>")
        self.assertEqual(format_exceptions(""), "")


class TestProcessRecord(unittest.TestCase):
    def test_fields(self):
        record = InstructionRecord(
            format="add\tRm,Rn",
            name="Add `binary`",
            abstract="\nRn + Rm -> Rn\n",
            brief="Rn + Rm → Rn",
            flags="a > b",
            code="0011nnnnmmmm1100",
            description="\n\nUpdates the PC.\n<img src=\"add.svg\">\n",
            note="Never touches SR",
            operation="if (a < b)\n  c = d;\n",
            example="ADD\tR0,R1\t; R1 += R0\n",
            exceptions="\nSlot illegal instruction exception\n",
        )
        self.assertIs(process_record(record), record)
        self.assertEqual(record.format, "add       Rm,Rn")
        self.assertEqual(record.name, "Add <em>binary</em>")
        self.assertEqual(record.abstract,
            "Rn <var title=\"add\"></var> Rm "
            "<var title=\"store into (right)\"></var> Rn")
        self.assertEqual(record.brief,
            "Rn <var title=\"add\"></var> Rm "
            "<var title=\"store into (right)\"></var> Rn")
        self.assertEqual(record.flags,
            "a <var title=\"greater than\"></var> b")
        self.assertEqual(record.description,
            "Updates the <abbr title=\"Program Counter\">PC</abbr>.\n"
            "<img alt=\"Add binary\" class=\"image_filter\" "
            "src=\"add.svg\">")
        self.assertEqual(record.note,
            "Never touches <abbr title=\"Status Register\">SR</abbr>")
        self.assertEqual(record.operation, "if (a &lt; b)\n  c = d;")
        self.assertEqual(record.example, "ADD r0,r1 ! r1 += r0 \n")
        self.assertEqual(record.exceptions,
            "<var title=\"Possible Exception\">"
            "Slot illegal instruction exception</var>")
        self.assertTrue(record.code.startswith(
            "<span title=\"Opcode Identifier\">0011</span>"))

    def test_example_escaped(self):
        record = InstructionRecord(example="#NOREFORMAT a <b>")
        process_record(record)
        self.assertEqual(record.example, " a &lt;b&gt;")

    def test_bad_code(self):
        record = InstructionRecord(format="padd\tSx", name="Add `x`",
            note="\nSR\n", code="0000xxx0")
        with self.assertRaises(OperandWidthError):
            process_record(record)
        self.assertEqual(record.format, "padd\tSx")
        self.assertEqual(record.name, "Add `x`")
        self.assertEqual(record.note, "\nSR\n")
        self.assertEqual(record.code, "0000xxx0")


class TestPostProcessing(unittest.TestCase):
    def setUp(self):
        self.stderr = contextlib.redirect_stderr(io.StringIO())
        self.stderr.__enter__()

    def tearDown(self):
        self.stderr.__exit__(None, None, None)

    def test_resolves_before_processing(self):
        rules = (ClassificationRule("SHLL([281][6]?)", "Shift $ Bits",
            "Shift Instruction"),)
        record = InstructionRecord(format="shll2\tRn",
            code="0100nnnn00001000")
        blocks = post_processing((Block("shift", (record,)),), rules=rules)
        self.assertEqual(len(blocks), 1)
        self.assertEqual(record.name, "Shift <em>2</em> Bits")
        self.assertEqual(record.mnemonic, "shll2")
        self.assertEqual(record.format, "shll2     Rn")

    def test_database(self):
        db = Database(find_wiki_dir())
        post_processing(db)
        records = tuple(db.records())
        self.assertTrue(records)
        for record in records:
            self.assertTrue(record.classification, record.format)
            self.assertNotIn("\t", record.format)
            self.assertTrue(record.code.startswith("<span title="))

        (record,) = db["shll2"]
        self.assertEqual(record.name, "Shift Logical Left <em>2</em> Bits")
        names = {record.name for record in db["mov.l"]}
        self.assertEqual(names, {"Move Data", "Move Global Data"})
        (record,) = db["movt"]
        self.assertEqual(record.name, "Move T Bit")
        (record,) = db["padd pmuls"]
        self.assertEqual(record.classification,
            "DSP Arithmetic Operation Instruction")


if __name__ == "__main__":
    unittest.main()
