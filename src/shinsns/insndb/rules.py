# SPDX-License-Identifier: LGPL-3-or-later

"""Instruction classification table

Entries are tried in order: the first whose mnemonic pattern matches the
start of the format string and whose environment list equals the record's
provides the name, classification and citations.  Entries that share a
mnemonic are told apart either by their environments or by a name already
present in the record.  A "$" in the name stands for the first group of the
mnemonic pattern.
"""

from shinsns.isa import ISA, SH_ALL
from shinsns.isa import Document
from shinsns.insndb.core import ClassificationRule

SH1 = ISA.SH1
SH2 = ISA.SH2
SH2A = ISA.SH2A
SH4A = ISA.SH4A
DSP = ISA.DSP

SH1_2_DSP_DOC = Document.SH1_2_DSP_DOC
SH4A_DOC = Document.SH4A_DOC

INTERRUPT_DISABLED = (SH1 | SH2 | SH2A | DSP, "Interrupt Disabled")
PRIVILEGED = (SH4A, "Privileged")
DELAYED_BRANCH = (SH_ALL, "Delayed Branch")


table = (
    (r"STS", "Store System Register",
        "System Control Instruction", (INTERRUPT_DISABLED,),
        ((SH1_2_DSP_DOC, 231), (SH4A_DOC, 425))),
    (r"STS", "Store from FPU System Register",
        "System Control Instruction", (), ((SH4A_DOC, 453),)),
    (r"FMOV", "Floating-point Move",
        "Floating-Point Instruction", (), ((SH4A_DOC, 497),)),
    (r"FMOV", "Floating-point Move Extension",
        "Floating-Point Instruction", (), ((SH4A_DOC, 501),)),
    (r"LDC", "Load to Control Register",
        "System Control Instruction", (), ((SH4A_DOC, 337),)),
    (r"LDC", "Load to Control Register",
        "System Control Instruction", (INTERRUPT_DISABLED, PRIVILEGED),
        ((SH1_2_DSP_DOC, 165), (SH4A_DOC, 449))),
    (r"LDS", "Load to System Register",
        "System Control Instruction", (INTERRUPT_DISABLED,),
        ((SH1_2_DSP_DOC, 172), (SH4A_DOC, 342))),
    (r"LDS", "Load to FPU System register",
        "System Control Instruction", (), ((SH4A_DOC, 450),)),
    (r"BRAF", "Branch Far",
        "Branch Instruction", (DELAYED_BRANCH,),
        ((SH1_2_DSP_DOC, 133), (SH4A_DOC, 307))),
    (r"BRA", "Branch",
        "Branch Instruction", (DELAYED_BRANCH,),
        ((SH1_2_DSP_DOC, 131), (SH4A_DOC, 305))),
    (r"BSRF", "Branch to Subroutine Far",
        "Branch Instruction", (DELAYED_BRANCH,),
        ((SH1_2_DSP_DOC, 137), (SH4A_DOC, 445))),
    (r"BSR", "Branch to Subroutine",
        "Branch Instruction", (DELAYED_BRANCH,),
        ((SH1_2_DSP_DOC, 135), (SH4A_DOC, 443))),
    (r"JMP", "Jump",
        "Branch Instruction", (DELAYED_BRANCH,),
        ((SH1_2_DSP_DOC, 162), (SH4A_DOC, 336))),
    (r"JSR", "Jump to Subroutine",
        "Branch Instruction", (DELAYED_BRANCH,),
        ((SH1_2_DSP_DOC, 163), (SH4A_DOC, 447))),
    (r"RTE", "Return from Exception",
        "System Control Instruction",
        (INTERRUPT_DISABLED, PRIVILEGED, DELAYED_BRANCH),
        ((SH1_2_DSP_DOC, 212), (SH4A_DOC, 401))),
    (r"RTS", "Return from Subroutine",
        "Branch Instruction", (DELAYED_BRANCH,),
        ((SH1_2_DSP_DOC, 214), (SH4A_DOC, 403))),
    (r"STC", "Store Control Register",
        "System Control Instruction", (INTERRUPT_DISABLED, PRIVILEGED),
        ((SH1_2_DSP_DOC, 228), (SH4A_DOC, 420), (SH4A_DOC, 452))),
    (r"SLEEP", "Sleep",
        "System Control Instruction", (PRIVILEGED,),
        ((SH1_2_DSP_DOC, 227), (SH4A_DOC, 419))),
    (r"LDTLB", "Load PTEH/PTEL to TLB",
        "System Control Instruction", (PRIVILEGED,), ((SH4A_DOC, 344),)),
    # no environments below
    (r"MOV", "Move Data",
        "Data Transfer Instruction", (),
        ((SH1_2_DSP_DOC, 183), (SH4A_DOC, 353))),
    (r"MOV", "Move Constant Value",
        "Data Transfer Instruction", (),
        ((SH1_2_DSP_DOC, 189), (SH4A_DOC, 359))),
    (r"MOV", "Move Global Data",
        "Data Transfer Instruction", (),
        ((SH1_2_DSP_DOC, 191), (SH4A_DOC, 362))),
    (r"MOV", "Move Structure Data",
        "Data Transfer Instruction", (),
        ((SH1_2_DSP_DOC, 194), (SH4A_DOC, 365))),
    (r"ADDC", "Add with Carry",
        "Arithmetic Instruction", (), ((SH1_2_DSP_DOC, 124), (SH4A_DOC, 296))),
    (r"ADDV", "ADD with `V Flag` Overflow Check",
        "Arithmetic Instruction", (), ((SH1_2_DSP_DOC, 125), (SH4A_DOC, 297))),
    (r"ADD", "Add binary",
        "Arithmetic Instruction", (), ((SH1_2_DSP_DOC, 123), (SH4A_DOC, 294))),
    (r"AND", "AND Logical",
        "Logical Instruction", (), ((SH1_2_DSP_DOC, 126), (SH4A_DOC, 299))),
    (r"BF/S", "Branch if False with Delay Slot",
        "Branch Instruction", (), ((SH1_2_DSP_DOC, 129), (SH4A_DOC, 303))),
    (r"BF", "Branch if False",
        "Branch Instruction", (), ((SH1_2_DSP_DOC, 128), (SH4A_DOC, 301))),
    (r"BT/S", "Branch if True with Delay Slot",
        "Branch Instruction", (), ((SH1_2_DSP_DOC, 140), (SH4A_DOC, 310))),
    (r"BT", "Branch if True",
        "Branch Instruction", (), ((SH1_2_DSP_DOC, 139), (SH4A_DOC, 308))),
    (r"CLRMAC", "Clear MAC Register",
        "System Control Instruction", (),
        ((SH1_2_DSP_DOC, 142), (SH4A_DOC, 312))),
    (r"CLRS", "Clear S Bit",
        "System Control Instruction", (), ((SH4A_DOC, 313),)),
    (r"CLRT", "Clear T Bit",
        "System Control Instruction", (),
        ((SH1_2_DSP_DOC, 143), (SH4A_DOC, 314))),
    (r"CMP/EQ", "Compare If Equal To",
        "Arithmetic Instruction", (), ((SH1_2_DSP_DOC, 144), (SH4A_DOC, 315))),
    (r"CMP/GE", "Compare If Signed Greater Than or Equal To",
        "Arithmetic Instruction", (), ((SH1_2_DSP_DOC, 144), (SH4A_DOC, 315))),
    (r"CMP/GT", "Compare If Signed Greater Than",
        "Arithmetic Instruction", (), ((SH1_2_DSP_DOC, 144), (SH4A_DOC, 315))),
    (r"CMP/HI", "Compare If Unsigned Greater Than",
        "Arithmetic Instruction", (), ((SH1_2_DSP_DOC, 144), (SH4A_DOC, 315))),
    (r"CMP/HS", "Compare If Unsigned Greater Than or Equal To",
        "Arithmetic Instruction", (), ((SH1_2_DSP_DOC, 144), (SH4A_DOC, 315))),
    (r"CMP/PL", "Compare If Signed Greater Than Zero",
        "Arithmetic Instruction", (), ((SH1_2_DSP_DOC, 144), (SH4A_DOC, 315))),
    (r"CMP/PZ", "Compare If Signed Greater Than or Equal To Zero",
        "Arithmetic Instruction", (), ((SH1_2_DSP_DOC, 144), (SH4A_DOC, 315))),
    (r"CMP/STR", "Compare If Strings Equal",
        "Arithmetic Instruction", (), ((SH1_2_DSP_DOC, 144), (SH4A_DOC, 315))),
    (r"DIV0S", "Divide `Step 0` as Signed",
        "Arithmetic Instruction", (), ((SH1_2_DSP_DOC, 148), (SH4A_DOC, 319))),
    (r"DIV0U", "Divide `Step 0` as Unsigned",
        "Arithmetic Instruction", (), ((SH1_2_DSP_DOC, 149), (SH4A_DOC, 320))),
    (r"DIV1", "Divide 1 Step",
        "Arithmetic Instruction", (), ((SH1_2_DSP_DOC, 150), (SH4A_DOC, 321))),
    (r"DMULS\.L", "Double-length Multiply as Signed",
        "Arithmetic Instruction", (), ((SH1_2_DSP_DOC, 155), (SH4A_DOC, 326))),
    (r"DMULU\.L", "Double-length Multiply as Unsigned",
        "Arithmetic Instruction", (), ((SH1_2_DSP_DOC, 157), (SH4A_DOC, 328))),
    (r"DT", "Decrement and Test",
        "Arithmetic Instruction", (), ((SH1_2_DSP_DOC, 159), (SH4A_DOC, 330))),
    (r"EXTS", "Extend as Signed",
        "Arithmetic Instruction", (), ((SH1_2_DSP_DOC, 160), (SH4A_DOC, 331))),
    (r"EXTU", "Extend as Unsigned",
        "Arithmetic Instruction", (), ((SH1_2_DSP_DOC, 161), (SH4A_DOC, 333))),
    (r"ICBI", "Instruction Cache Block Invalidate",
        "Data Transfer Instruction", (), ((SH4A_DOC, 335),)),
    (r"LDRE", "Load Effective Address to RE Register",
        "System Control Instruction", (), ((SH1_2_DSP_DOC, 168),)),
    (r"LDRS", "Load Effective Address to RS Register",
        "System Control Instruction", (), ((SH1_2_DSP_DOC, 170),)),
    (r"MAC\.L", "Multiply and Accumulate Long",
        "Arithmetic Instruction", (), ((SH1_2_DSP_DOC, 177), (SH4A_DOC, 346))),
    (r"MAC\.W", "Multiply and Accumulate Word",
        "Arithmetic Instruction", (), ((SH1_2_DSP_DOC, 180), (SH4A_DOC, 350))),
    (r"MOVA", "Move Effective Address",
        "Data Transfer Instruction", (),
        ((SH1_2_DSP_DOC, 197), (SH4A_DOC, 369))),
    (r"MOVT", "Move T Bit",
        "Data Transfer Instruction", (),
        ((SH1_2_DSP_DOC, 198), (SH4A_DOC, 376))),
    (r"MUL\.L", "Multiply Long",
        "Arithmetic Instruction", (), ((SH1_2_DSP_DOC, 199), (SH4A_DOC, 379))),
    (r"MULS\.W", "Multiply as Signed Word",
        "Arithmetic Instruction", (), ((SH1_2_DSP_DOC, 200), (SH4A_DOC, 380))),
    (r"MULU\.W", "Multiply as Unsigned Word",
        "Arithmetic Instruction", (), ((SH1_2_DSP_DOC, 201), (SH4A_DOC, 381))),
    (r"MOVCA\.L", "Move with Cache Block Allocation",
        "Data Transfer Instruction", (), ((SH4A_DOC, 371),)),
    (r"MOVCO", "Move Conditional",
        "Data Transfer Instruction", (), ((SH4A_DOC, 372),)),
    (r"MOVLI", "Move Linked",
        "Data Transfer Instruction", (), ((SH4A_DOC, 374),)),
    (r"MOVUA", "Move Unaligned",
        "Data Transfer Instruction", (), ((SH4A_DOC, 377),)),
    (r"NEGC", "Negate with Carry",
        "Arithmetic Instruction", (), ((SH1_2_DSP_DOC, 203), (SH4A_DOC, 383))),
    (r"NEG", "Negate",
        "Arithmetic Instruction", (), ((SH1_2_DSP_DOC, 202), (SH4A_DOC, 382))),
    (r"NOP", "No Operation",
        "System Control Instruction", (),
        ((SH1_2_DSP_DOC, 204), (SH4A_DOC, 384))),
    (r"NOT", "NOT-Logical Complement",
        "Logical Instruction", (), ((SH1_2_DSP_DOC, 205), (SH4A_DOC, 385))),
    (r"OR", "OR Logical",
        "Logical Instruction", (), ((SH1_2_DSP_DOC, 206), (SH4A_DOC, 389))),
    (r"PREFI", "Prefetch Instruction Cache Block",
        "Data Transfer Instruction", (), ((SH4A_DOC, 394),)),
    (r"PREF", "Prefetch Data to Cache",
        "Data Transfer Instruction", (), ((SH4A_DOC, 391),)),
    (r"ROTCL", "Rotate with Carry Left",
        "Shift Instruction", (), ((SH1_2_DSP_DOC, 208), (SH4A_DOC, 397))),
    (r"ROTCR", "Rotate with Carry Right",
        "Shift Instruction", (), ((SH1_2_DSP_DOC, 209), (SH4A_DOC, 398))),
    (r"ROTL", "Rotate Left",
        "Shift Instruction", (), ((SH1_2_DSP_DOC, 210), (SH4A_DOC, 399))),
    (r"ROTR", "Rotate Right",
        "Shift Instruction", (), ((SH1_2_DSP_DOC, 211), (SH4A_DOC, 400))),
    (r"SETRC", "Set Repeat Count to RC",
        "System Control Instruction", (), ((SH1_2_DSP_DOC, 216),)),
    (r"SETS", "Set S Bit",
        "System Control Instruction", (), ((SH4A_DOC, 405),)),
    (r"SETT", "Set T Bit",
        "System Control Instruction", (),
        ((SH1_2_DSP_DOC, 218), (SH4A_DOC, 406))),
    (r"SHAD", "Shift Arithmetic Dynamically",
        "Shift Instruction", (), ((SH4A_DOC, 407),)),
    (r"SHAL", "Shift Arithmetic Left",
        "Shift Instruction", (), ((SH1_2_DSP_DOC, 219), (SH4A_DOC, 409))),
    (r"SHAR", "Shift Arithmetic Right",
        "Shift Instruction", (), ((SH1_2_DSP_DOC, 220), (SH4A_DOC, 410))),
    (r"SHLD", "Shift Logical Dynamically",
        "Shift Instruction", (), ((SH4A_DOC, 411),)),
    (r"SHLL([281][6]?)", "Shift Logical Left $ Bits",
        "Shift Instruction", (), ((SH1_2_DSP_DOC, 222), (SH4A_DOC, 414))),
    (r"SHLL", "Shift Logical Left",
        "Shift Instruction", (), ((SH1_2_DSP_DOC, 221), (SH4A_DOC, 413))),
    (r"SHLR([281][6]?)", "Shift Logical Right $ Bits",
        "Shift Instruction", (), ((SH1_2_DSP_DOC, 225), (SH4A_DOC, 417))),
    (r"SHLR", "Shift Logical Right",
        "Shift Instruction", (), ((SH1_2_DSP_DOC, 224), (SH4A_DOC, 416))),
    (r"SUBC", "Subtract with Carry",
        "Arithmetic Instruction", (), ((SH1_2_DSP_DOC, 237), (SH4A_DOC, 428))),
    (r"SUBV", "Subtract with `V Flag` Underflow Check",
        "Arithmetic Instruction", (), ((SH1_2_DSP_DOC, 238), (SH4A_DOC, 429))),
    (r"SUB", "Subtract Binary",
        "Arithmetic Instruction", (), ((SH1_2_DSP_DOC, 236), (SH4A_DOC, 427))),
    (r"SWAP", "Swap Register Halves",
        "Data Transfer Instruction", (),
        ((SH1_2_DSP_DOC, 239), (SH4A_DOC, 431))),
    (r"SYNCO", "Synchronize Data Operation",
        "Data Transfer Instruction", (), ((SH4A_DOC, 433),)),
    (r"TAS", "Test and Set",
        "Logical Instruction", (), ((SH1_2_DSP_DOC, 241), (SH4A_DOC, 434))),
    (r"TRAPA", "Trap Always",
        "System Control Instruction", (),
        ((SH1_2_DSP_DOC, 242), (SH4A_DOC, 436))),
    (r"TST", "Test Logical",
        "Logical Instruction", (), ((SH1_2_DSP_DOC, 243), (SH4A_DOC, 438))),
    (r"XOR", "Exclusive OR Logical",
        "Logical Instruction", (), ((SH1_2_DSP_DOC, 245), (SH4A_DOC, 440))),
    (r"XTRCT", "Extract",
        "Data Transfer Instruction", (),
        ((SH1_2_DSP_DOC, 247), (SH4A_DOC, 442))),
    (r"MOVS", "Move Single Data between Memory and DSP Register",
        "DSP Data Transfer Instruction", (), ((SH1_2_DSP_DOC, 255),)),
    (r"MOVX", "Move between X Memory and DSP Register",
        "DSP Data Transfer Instruction", (), ((SH1_2_DSP_DOC, 257),)),
    (r"MOVY", "Move between Y Memory and DSP Register",
        "DSP Data Transfer Instruction", (), ((SH1_2_DSP_DOC, 258),)),
    (r"NOPX", "No Access Operation for X Memory",
        "DSP Data Transfer Instruction", (), ((SH1_2_DSP_DOC, 260),)),
    (r"PABS", "Absolute",
        "DSP Arithmetic Operation Instruction", (), ((SH1_2_DSP_DOC, 278),)),
    (r"DC[TF] PADD", "Addition with Condition",
        "DSP Arithmetic Operation Instruction", (), ((SH1_2_DSP_DOC, 282),)),
    (r"PADDC", "Addition with Carry",
        "DSP Arithmetic Operation Instruction", (), ((SH1_2_DSP_DOC, 291),)),
    (r"PADD PMULS", "Addition & Multiply Signed by Signed",
        "DSP Arithmetic Operation Instruction", (), ((SH1_2_DSP_DOC, 286),)),
    (r"DC[TF] PAND", "Logical AND",
        "DSP Logical Operation Instruction", (), ((SH1_2_DSP_DOC, 294),)),
    (r"DC[TF] PCLR", "Clear",
        "DSP Arithmetic Operation Instruction", (), ((SH1_2_DSP_DOC, 298),)),
    (r"PCMP", "Compare Two Data",
        "DSP Arithmetic Operation Instruction", (), ((SH1_2_DSP_DOC, 301),)),
    (r"DC[TF] PCOPY", "Copy with Condition",
        "DSP Arithmetic Operation Instruction", (), ((SH1_2_DSP_DOC, 303),)),
    (r"DC[TF] PDEC", "Decrement by 1",
        "DSP Arithmetic Operation Instruction", (), ((SH1_2_DSP_DOC, 307),)),
    (r"DC[TF] PDMSB", "Detect MSB with Condition",
        "DSP Arithmetic Operation Instruction", (), ((SH1_2_DSP_DOC, 312),)),
    (r"DC[TF] PINC", "Increment by 1 with Condition",
        "DSP Arithmetic Operation Instruction", (), ((SH1_2_DSP_DOC, 317),)),
    (r"DC[TF] PLDS", "Load System Register",
        "DSP System Control Instruction", (), ((SH1_2_DSP_DOC, 322),)),
    (r"PMULS", "Multiply Signed by Signed",
        "DSP Arithmetic Operation Instruction", (), ((SH1_2_DSP_DOC, 326),)),
    (r"DC[TF] PNEG", "Negate",
        "DSP Arithmetic Operation Instruction", (), ((SH1_2_DSP_DOC, 329),)),
    (r"DC[TF] POR", "Logical OR",
        "DSP Logical Operation Instruction", (), ((SH1_2_DSP_DOC, 334),)),
    (r"PRND", "Rounding",
        "DSP Arithmetic Operation Instruction", (), ((SH1_2_DSP_DOC, 338),)),
    (r"DC[TF] PSHA", "Shift Arithmetically with Condition",
        "DSP Arithmetic Shift Instruction", (), ((SH1_2_DSP_DOC, 342),)),
    (r"DC[TF] PSHL", "Shift Logically with Condition",
        "DSP Logical Shift Instruction", (), ((SH1_2_DSP_DOC, 350),)),
    (r"DC[TF] PSTS", "Store System Register",
        "DSP System Control Instruction", (), ((SH1_2_DSP_DOC, 357),)),
    (r"DC[TF] PSUB", "Subtract with Condition",
        "DSP Arithmetic Operation Instruction", (), ((SH1_2_DSP_DOC, 362),)),
    (r"PSUB PMULS", "Subtraction & Multiply Signed by Signed",
        "DSP Arithmetic Operation Instruction", (), ((SH1_2_DSP_DOC, 367),)),
    (r"PSUBC", "Subtraction with Carry",
        "DSP Arithmetic Operation Instruction", (), ((SH1_2_DSP_DOC, 372),)),
    (r"DC[TF] PXOR", "Logical Exclusive OR",
        "DSP Logical Operation Instruction", (), ((SH1_2_DSP_DOC, 375),)),
    (r"OCBI", "Operand Cache Block Invalidate",
        "Data Transfer Instruction", (), ((SH4A_DOC, 386),)),
    (r"OCBP", "Operand Cache Block Purge",
        "Data Transfer Instruction", (), ((SH4A_DOC, 387),)),
    (r"OCBWB", "Operand Cache Block Write Back",
        "Data Transfer Instruction", (), ((SH4A_DOC, 388),)),
    (r"FABS", "Floating-point Absolute Value",
        "Floating-Point Instruction", (), ((SH4A_DOC, 467),)),
    (r"FADD", "Floating-point ADD",
        "Floating-Point Instruction", (), ((SH4A_DOC, 468),)),
    (r"FCMP", "Floating-point Compare",
        "Floating-Point Instruction", (), ((SH4A_DOC, 471),)),
    (r"FCNVDS", "Floating-point Convert Double to Single Precision",
        "Floating-Point Instruction", (), ((SH4A_DOC, 475),)),
    (r"FCNVSD", "Floating-point Convert Single to Double Precision",
        "Floating-Point Instruction", (), ((SH4A_DOC, 478),)),
    (r"FDIV", "Floating-point Divide",
        "Floating-Point Instruction", (), ((SH4A_DOC, 480),)),
    (r"FIPR", "Floating-point Inner Product",
        "Floating-Point Instruction", (), ((SH4A_DOC, 484),)),
    (r"FLDI0", "Floating-point Load Immediate 0.0",
        "Floating-Point Instruction", (), ((SH4A_DOC, 486),)),
    (r"FLDI1", "Floating-point Load Immediate 1.0",
        "Floating-Point Instruction", (), ((SH4A_DOC, 487),)),
    (r"FLDS", "Floating-point Load to System register",
        "Floating-Point Instruction", (), ((SH4A_DOC, 488),)),
    (r"FLOAT", "Floating-point Convert from Integer",
        "Floating-Point Instruction", (), ((SH4A_DOC, 489),)),
    (r"FMAC", "Floating-point Multiply and Accumulate",
        "Floating-Point Instruction", (), ((SH4A_DOC, 491),)),
    (r"FMUL", "Floating-point Multiply",
        "Floating-Point Instruction", (), ((SH4A_DOC, 504),)),
    (r"FNEG", "Floating-point Negate Value",
        "Floating-Point Instruction", (), ((SH4A_DOC, 507),)),
    (r"FPCHG", "Pr-bit Change",
        "Floating-Point Instruction", (), ((SH4A_DOC, 508),)),
    (r"FRCHG", "FR-bit Change",
        "Floating-Point Instruction", (), ((SH4A_DOC, 509),)),
    (r"FSCA", "Floating Point Sine And Cosine Approximate",
        "Floating-Point Instruction", (), ((SH4A_DOC, 510),)),
    (r"FSCHG", "Sz-bit Change",
        "Floating-Point Instruction", (), ((SH4A_DOC, 512),)),
    (r"FSQRT", "Floating-point Square Root",
        "Floating-Point Instruction", (), ((SH4A_DOC, 513),)),
    (r"FSRRA", "Floating Point Square Reciprocal Approximate",
        "Floating-Point Instruction", (), ((SH4A_DOC, 516),)),
    (r"FSTS", "Floating-point Store System Register",
        "Floating-Point Instruction", (), ((SH4A_DOC, 518),)),
    (r"FSUB", "Floating-point Subtract",
        "Floating-Point Instruction", (), ((SH4A_DOC, 519),)),
    (r"FTRC", "Floating-point Truncate and Convert to integer",
        "Floating-Point Instruction", (), ((SH4A_DOC, 522),)),
    (r"FTRV", "Floating-point Transform Vector",
        "Floating-Point Instruction", (), ((SH4A_DOC, 525),)),
)


RULES = tuple(ClassificationRule(*entry) for entry in table)
