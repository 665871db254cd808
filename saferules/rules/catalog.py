from __future__ import annotations

from saferules.rules.model import Rule

BUILTIN_RULES: tuple[Rule, ...] = (
    Rule("CF1", "ControlFlow", "Do not use goto, setjmp or longjmp.", "Mandatory"),
    Rule("CF2", "ControlFlow", "Do not use direct or indirect recursion.", "Mandatory"),
    Rule(
        "CF3",
        "ControlFlow",
        "Give every loop a fixed upper bound that a checking tool can prove statically.",
        "Mandatory",
    ),
    Rule("CF4", "ControlFlow", "End every switch statement with a default clause.", "Recommended"),
    Rule(
        "CF5",
        "ControlFlow",
        "Prefer a single exit point per function when it keeps control flow simpler.",
        "Recommended",
    ),
    Rule("MEM1", "Memory", "Do not allocate memory dynamically after initialization.", "Mandatory"),
    Rule(
        "MEM2",
        "Memory",
        "Size every buffer with a compile-time constant and allocate it statically.",
        "Mandatory",
    ),
    Rule(
        "MEM3",
        "Memory",
        "Determine the worst-case stack depth and verify it against the available stack.",
        "Recommended",
    ),
    Rule(
        "FN1",
        "Functions",
        "Keep every function within one printed page, about 60 lines of code.",
        "Mandatory",
    ),
    Rule("FN2", "Functions", "Give each function one clearly stated purpose.", "Recommended"),
    Rule("FN3", "Functions", "Limit functions to at most six parameters.", "Recommended"),
    Rule("AS1", "Assertions", "Average at least two assertions per function.", "Mandatory"),
    Rule("AS2", "Assertions", "Write assertions as side-effect free Boolean tests.", "Mandatory"),
    Rule(
        "AS3",
        "Assertions",
        "On assertion failure take an explicit recovery action, such as returning an error to the caller.",
        "Mandatory",
    ),
    Rule("SC1", "Scope", "Declare data objects at the smallest possible level of scope.", "Mandatory"),
    Rule("SC2", "Scope", "Do not hide an outer identifier with a declaration in an inner scope.", "Recommended"),
    Rule("SC3", "Scope", "Give file-local functions and objects internal linkage with static.", "Recommended"),
    Rule(
        "ERR1",
        "ErrorHandling",
        "Check the return value of every non-void function, or cast it to void explicitly.",
        "Mandatory",
    ),
    Rule("ERR2", "ErrorHandling", "Validate parameters inside every function that receives them.", "Mandatory"),
    Rule("ERR3", "ErrorHandling", "Propagate errors to the caller instead of ignoring them.", "Recommended"),
    Rule(
        "PP1",
        "Preprocessor",
        "Restrict the preprocessor to header inclusion and simple macro definitions.",
        "Mandatory",
    ),
    Rule(
        "PP2",
        "Preprocessor",
        "Do not use token pasting, variadic macros or recursive macro calls.",
        "Mandatory",
    ),
    Rule("PP3", "Preprocessor", "Protect every header file against repeated inclusion.", "Mandatory"),
    Rule("PP4", "Preprocessor", "Keep conditional compilation directives to a minimum.", "Recommended"),
    Rule("PTR1", "Pointers", "Use no more than one level of dereferencing per expression.", "Mandatory"),
    Rule("PTR2", "Pointers", "Do not hide dereference operations inside macros or typedefs.", "Mandatory"),
    Rule("PTR3", "Pointers", "Do not use function pointers.", "Mandatory"),
    Rule(
        "VER1",
        "Verification",
        "Compile with all warnings enabled at the most pedantic setting from the first day of development.",
        "Mandatory",
    ),
    Rule("VER2", "Verification", "Build with zero compiler warnings.", "Mandatory"),
    Rule(
        "VER3",
        "Verification",
        "Run at least one static source code analyzer daily and resolve every report.",
        "Mandatory",
    ),
    Rule(
        "VER4",
        "Verification",
        "Compile in strict ISO C99 mode with a conforming compiler.",
        "Recommended",
    ),
    Rule(
        "STY1",
        "Style",
        "Use the fixed-width integer types from stdint.h instead of the basic numeric types.",
        "Recommended",
    ),
    Rule(
        "STY2",
        "Style",
        "Name macros and constants in upper case and functions and variables in lower snake case.",
        "Recommended",
    ),
    Rule("STY3", "Style", "Brace the body of every if, else, for, while and do statement.", "Recommended"),
)


def builtin_rules() -> list[Rule]:
    return list(BUILTIN_RULES)
