# SPDX-License-Identifier: LGPL-3-or-later
from shinsns.insndb.core import Citations
from shinsns.util import log, LogType


class MetadataResolver:
    """assigns mnemonic, name, classification and citations to records

    The first rule, in table order, wins when its mnemonic pattern matches
    the start of the record's format, the record has no name yet (or the
    very same name) and both declare the same environments in the same
    order.
    """
    def __init__(self, rules):
        self.__rules = tuple(rules)
        for rule in self.__rules:
            # malformed patterns are reported once, right here
            rule.pattern

        return super().__init__()

    @property
    def rules(self):
        return self.__rules

    def __call__(self, record):
        environments = list(record.environments)
        for rule in self.__rules:
            match = rule.match(record.format)
            if match is None:
                continue
            name = rule.expand(match)
            if record.name and (record.name != name):
                continue
            if environments != list(rule.environments):
                continue

            if not record.name:
                record.name = name
            record.mnemonic = str(match)
            record.citations = Citations(rule.citations)
            record.classification = rule.classification
            log("resolve", repr(record.format), "->", repr(rule.mnemonic),
                kind=LogType.Resolve)
            return rule

        log("unresolved", repr(record.format), kind=LogType.Resolve)
        return None

    def resolve(self, blocks):
        for block in blocks:
            for record in block:
                self(record)
        return blocks
