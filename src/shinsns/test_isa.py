import unittest

from shinsns.isa import (
    Document,
    ISA,
    ISAProperty,
    SH_ALL,
    find_wiki_file,
)


class TestISA(unittest.TestCase):
    def test_parse(self):
        self.assertEqual(ISA("SH1|SH2"), ISA.SH1 | ISA.SH2)
        self.assertEqual(ISA(" DSP | SH4A "), ISA.DSP | ISA.SH4A)
        self.assertEqual(ISA("SH2A"), ISA.SH2A)
        self.assertEqual(ISA(""), ISA(0))
        self.assertEqual(ISA("SH_ALL"), SH_ALL)

    def test_unknown(self):
        with self.assertRaises((KeyError, ValueError)):
            ISA("SH5")

    def test_all(self):
        members = ISA.members(SH_ALL)
        self.assertEqual(len(members), 9)
        self.assertEqual(members[0], ISA.SH1)
        self.assertEqual(members[-1], ISA.SH2A)

    def test_str(self):
        self.assertEqual(str(ISA.SH1 | ISA.DSP), "SH1|DSP")
        self.assertEqual(ISA(str(ISA.SH3 | ISA.SH3E)), ISA.SH3 | ISA.SH3E)
        self.assertEqual(str(ISA(0)), "")


class TestISAProperty(unittest.TestCase):
    def test_pairs(self):
        prop = ISAProperty({
            "SH1|SH2": "1",
            "SH4": "2",
        })
        self.assertEqual(prop[ISA.SH1], "1")
        self.assertEqual(prop[ISA.SH2], "1")
        self.assertEqual(prop[ISA.SH4], "2")
        self.assertEqual(prop[ISA.SH4A], "")

    def test_all(self):
        prop = ISAProperty(((SH_ALL, "MT"),))
        self.assertEqual(len(prop), 9)
        self.assertEqual(set(prop.values()), {"MT"})

    def test_non_isa_key(self):
        with self.assertRaises(KeyError):
            ISAProperty()["SH1"]

    def test_text(self):
        with self.assertRaises(ValueError):
            ISAProperty(((ISA.SH1, 1),))


class TestDocument(unittest.TestCase):
    def test_lookup(self):
        self.assertIs(Document("SH4A_DOC"), Document.SH4A_DOC)
        self.assertIs(Document(2), Document.SH1_2_DSP_DOC)
        with self.assertRaises((KeyError, ValueError)):
            Document("SH5_DOC")

    def test_details(self):
        for document in Document:
            details = document.details
            self.assertTrue(details.location.startswith("https://"))
            self.assertTrue(details.isa)
        self.assertEqual(Document.SH4A_DOC.details.isa, ISA.SH4A)

    def test_wiki_file(self):
        self.assertTrue(find_wiki_file("insns.json").endswith("insns.json"))


if __name__ == "__main__":
    unittest.main()
