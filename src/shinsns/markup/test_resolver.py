import contextlib
import io
import unittest

from shinsns.isa import Document, ISA, SH_ALL
from shinsns.insndb.core import (
    Block,
    Citation,
    ClassificationRule,
    Environment,
    InstructionRecord,
)
from shinsns.insndb.rules import RULES
from shinsns.markup.resolver import MetadataResolver


INTERRUPT_DISABLED = Environment(
    ISA.SH1 | ISA.SH2 | ISA.SH2A | ISA.DSP, "Interrupt Disabled")


class TestMetadataResolver(unittest.TestCase):
    def setUp(self):
        self.stderr = contextlib.redirect_stderr(io.StringIO())
        self.stderr.__enter__()

    def tearDown(self):
        self.stderr.__exit__(None, None, None)

    def test_mnemonic_keeps_case(self):
        rule = ClassificationRule("MOV", "Move Data",
            "Data Transfer Instruction", (), ((Document.SH4A_DOC, 353),))
        record = InstructionRecord(format="MOV.L\tRm,@Rn")
        self.assertIs(MetadataResolver((rule,))(record), rule)
        self.assertEqual(record.mnemonic, "MOV.L")
        self.assertEqual(record.name, "Move Data")
        self.assertEqual(record.classification, "Data Transfer Instruction")
        self.assertEqual(list(record.citations),
            [Citation(Document.SH4A_DOC, 353)])

    def test_environment_must_match(self):
        rule = ClassificationRule("MOV", "Move Data",
            "Data Transfer Instruction")
        record = InstructionRecord(format="MOV.L\tRm,@Rn",
            environments=[INTERRUPT_DISABLED])
        self.assertIsNone(MetadataResolver((rule,))(record))
        self.assertEqual(record.name, "")
        self.assertEqual(record.mnemonic, "")
        self.assertEqual(record.classification, "")
        self.assertEqual(list(record.citations), [])

    def test_environment_selects_rule(self):
        resolver = MetadataResolver(RULES)
        record = InstructionRecord(format="sts\tMACH,Rn",
            environments=[INTERRUPT_DISABLED])
        resolver(record)
        self.assertEqual(record.name, "Store System Register")
        self.assertEqual(list(record.citations), [
            Citation(Document.SH1_2_DSP_DOC, 231),
            Citation(Document.SH4A_DOC, 425),
        ])

        record = InstructionRecord(format="sts\tFPUL,Rn")
        resolver(record)
        self.assertEqual(record.name, "Store from FPU System Register")
        self.assertEqual(record.mnemonic, "sts")

    def test_environment_order(self):
        resolver = MetadataResolver(RULES)
        privileged = Environment(ISA.SH4A, "Privileged")
        record = InstructionRecord(format="ldc\tRm,SR",
            environments=[INTERRUPT_DISABLED, privileged])
        resolver(record)
        self.assertEqual(list(record.citations)[0],
            Citation(Document.SH1_2_DSP_DOC, 165))

        record = InstructionRecord(format="ldc\tRm,SR",
            environments=[privileged, INTERRUPT_DISABLED])
        self.assertIsNone(resolver(record))

    def test_name_selects_rule(self):
        record = InstructionRecord(format="mov\t#imm,Rn",
            name="Move Constant Value")
        rule = MetadataResolver(RULES)(record)
        self.assertEqual(rule.name, "Move Constant Value")
        self.assertEqual(record.name, "Move Constant Value")
        self.assertEqual(record.mnemonic, "mov")
        self.assertEqual(list(record.citations), [
            Citation(Document.SH1_2_DSP_DOC, 189),
            Citation(Document.SH4A_DOC, 359),
        ])

    def test_first_match_wins(self):
        rules = (
            ClassificationRule("ADD", "first", "one"),
            ClassificationRule("ADD", "second", "two"),
        )
        record = InstructionRecord(format="add\tRm,Rn")
        self.assertIs(MetadataResolver(rules)(record), rules[0])
        self.assertEqual(record.name, "first")
        self.assertEqual(record.classification, "one")

    def test_prefix_only(self):
        rules = (ClassificationRule("ADD", "Add", "Arithmetic"),)
        record = InstructionRecord(format="padd\tSx,Sy,Du")
        self.assertIsNone(MetadataResolver(rules)(record))

    def test_placeholder(self):
        record = InstructionRecord(format="shll16\tRn")
        MetadataResolver(RULES)(record)
        self.assertEqual(record.name, "Shift Logical Left `1``6` Bits")
        self.assertEqual(record.mnemonic, "shll16")

        record = InstructionRecord(format="shll\tRn")
        MetadataResolver(RULES)(record)
        self.assertEqual(record.name, "Shift Logical Left")

    def test_malformed_rule(self):
        rules = (
            ClassificationRule("MOV(", "broken", "broken"),
            ClassificationRule("MOV", "Move Data", "Data Transfer"),
        )
        self.assertIsNone(rules[0].pattern)
        record = InstructionRecord(format="mov\tRm,Rn")
        self.assertIs(MetadataResolver(rules)(record), rules[1])

    def test_unterminated_set_rule(self):
        rules = (
            ClassificationRule("MOV[", "broken", "broken"),
            ClassificationRule("MOV", "Move Data", "Data Transfer"),
        )
        self.assertIsNone(rules[0].pattern)
        record = InstructionRecord(format="mov\tRm,Rn")
        self.assertIs(MetadataResolver(rules)(record), rules[1])
        self.assertEqual(record.name, "Move Data")
        self.assertEqual(record.classification, "Data Transfer")

    def test_fresh_citations(self):
        rule = ClassificationRule("NOP", "No Operation", "System Control",
            (), ((Document.SH4A_DOC, 385),))
        resolver = MetadataResolver((rule,))
        first = InstructionRecord(format="nop")
        second = InstructionRecord(format="nop")
        resolver(first)
        resolver(second)
        first.citations.append(Citation(Document.SH1_DOC, 1))
        self.assertEqual(len(second.citations), 1)
        self.assertEqual(len(rule.citations), 1)

    def test_delayed_branch(self):
        record = InstructionRecord(format="bra\tlabel",
            environments=[Environment(SH_ALL, "Delayed Branch")])
        MetadataResolver(RULES)(record)
        self.assertEqual(record.name, "Branch")
        self.assertEqual(record.classification, "Branch Instruction")

    def test_resolve_blocks(self):
        blocks = (
            Block("one", (InstructionRecord(format="add\tRm,Rn"),)),
            Block("two", (InstructionRecord(format="unknown"),)),
        )
        self.assertIs(MetadataResolver(RULES).resolve(blocks), blocks)
        self.assertEqual(blocks[0][0].name, "Add binary")
        self.assertEqual(blocks[1][0].name, "")


if __name__ == "__main__":
    unittest.main()
