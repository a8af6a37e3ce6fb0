import argparse
import contextlib
import os

import mdis.dispatcher
import mdis.visitor

from shinsns.isa import find_wiki_dir
from shinsns.insndb.core import (
    Block,
    Database,
    InstructionRecord,
    Walker,
)
from shinsns.html import render_block
from shinsns.markup.code import OperandWidthError
from shinsns.markup.postprocess import post_processing


class Instruction(str):
    def __new__(cls, string):
        string = string.strip()
        if not string:
            raise ValueError("empty instruction")
        return super().__new__(cls, string)


class ListVisitor(mdis.visitor.ContextVisitor):
    @mdis.dispatcher.Hook(InstructionRecord)
    @contextlib.contextmanager
    def dispatch_record(self, instance):
        print(instance.format)
        yield instance


# No use other than checking issubclass and adding an argument.
class InstructionVisitor(mdis.visitor.ContextVisitor):
    pass


class CodeVisitor(InstructionVisitor):
    @mdis.dispatcher.Hook(InstructionRecord)
    @contextlib.contextmanager
    def dispatch_record(self, instance):
        print(instance.code)
        yield instance


class ExampleVisitor(InstructionVisitor):
    @mdis.dispatcher.Hook(InstructionRecord)
    @contextlib.contextmanager
    def dispatch_record(self, instance):
        print(instance.example, end="")
        yield instance


class MetadataVisitor(InstructionVisitor):
    @mdis.dispatcher.Hook(InstructionRecord)
    @contextlib.contextmanager
    def dispatch_record(self, instance):
        print("format", instance.format)
        print("mnemonic", instance.mnemonic)
        print("name", instance.name)
        print("classification", instance.classification)
        print("isa", instance.isa)
        for environment in instance.environments:
            print("environment", environment.isa, environment.property)
        for citation in instance.citations:
            print("citation", repr(citation))
        yield instance


class HtmlVisitor(mdis.visitor.ContextVisitor):
    def __init__(self):
        self.__row = 0
        return super().__init__()

    @mdis.dispatcher.Hook(Block)
    @contextlib.contextmanager
    def dispatch_block(self, instance):
        print(render_block(instance, start=self.__row), end="")
        self.__row += len(instance)
        yield instance


def main():
    commands = {
        "list": (
            ListVisitor,
            "list available instructions",
        ),
        "code": (
            CodeVisitor,
            "print annotated instruction code",
        ),
        "example": (
            ExampleVisitor,
            "print formatted instruction example",
        ),
        "metadata": (
            MetadataVisitor,
            "print resolved instruction metadata",
        ),
        "html": (
            HtmlVisitor,
            "print markup for all instructions",
        ),
    }

    main_parser = argparse.ArgumentParser()
    main_parser.add_argument("-l", "--log",
        help="activate logging",
        action="store_true",
        default=False)
    main_parser.add_argument("-r", "--root",
        help="instruction tables directory",
        default=find_wiki_dir())
    main_subparser = main_parser.add_subparsers(dest="command", required=True)

    for (command, (visitor, helper)) in commands.items():
        parser = main_subparser.add_parser(command, help=helper)
        if issubclass(visitor, InstructionVisitor):
            parser.add_argument("insn", type=Instruction,
                metavar="INSN", help="instruction mnemonic")

    args = vars(main_parser.parse_args())
    command = args.pop("command")
    log_enabled = args.pop("log")
    if not log_enabled:
        os.environ["SILENCELOG"] = "true"
    visitor = commands[command][0]()

    db = Database(args.pop("root"))
    try:
        post_processing(db)
    except OperandWidthError as error:
        main_parser.exit(1, f"invalid instruction code: {error}\n")

    if not isinstance(visitor, InstructionVisitor):
        root = db
    else:
        insn = args.pop("insn")
        root = [db[insn]]
        if not root[0]:
            main_parser.error(f"unknown instruction: {insn}")

    walker = Walker()
    for (node, *_) in walker(root):
        with visitor(node):
            pass


if __name__ == "__main__":
    main()
