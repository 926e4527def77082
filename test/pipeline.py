# python
"""
Pipeline module behavioral tests.

Scope
- split_flags: merged short flags, long flags and positionals.
- expand_aliases: alias rewriting and pass-through of unknown short flags.
- validate_options / validate_arguments: exact fault messages and scan order.
- extract_values / parse_arguments: the resulting mapping and fault priority.

Conventions
- Test method names follow CamelCase per project convention.
- Declarations are given both as Option objects and as mappings.
"""

from __future__ import annotations

import unittest
from unittest import TestCase

from clinter import (
    FaultCode,
    InvalidNumberError,
    Option,
    OptionValueRequiredError,
    ParserInitializationError,
    expand_aliases,
    extract_values,
    parse_arguments,
    split_flags,
    validate_arguments,
    validate_options,
)

FORCE = Option("force", type="boolean", alias="f")
VERBOSE = Option("verbose", type="boolean", alias="v")
OUT = Option("out", type="string", alias="o")
COUNT = Option("count", type="number", alias="n")


class TestSplitFlags(TestCase):
    """Behavioral tests for merged short-flag splitting."""

    def testMergedShortFlagsAreSplit(self):
        self.assertEqual(split_flags(["-ab"]), ["-a", "-b"])

    def testLongFlagUntouched(self):
        self.assertEqual(split_flags(["--ab"]), ["--ab"])

    def testPositionalUntouched(self):
        self.assertEqual(split_flags(["pos"]), ["pos"])

    def testOrderIsPreserved(self):
        self.assertEqual(
            split_flags(["a", "-xyz", "--long", "b"]),
            ["a", "-x", "-y", "-z", "--long", "b"]
        )

    def testBareDashYieldsNothing(self):
        self.assertEqual(split_flags(["-"]), [])


class TestExpandAliases(TestCase):
    """Behavioral tests for alias expansion."""

    def testKnownAliasExpanded(self):
        self.assertEqual(expand_aliases(["-f"], [FORCE]), ["--force"])

    def testUnknownAliasPassesThrough(self):
        self.assertEqual(expand_aliases(["-z"], [FORCE]), ["-z"])

    def testLongAndPositionalPassThrough(self):
        self.assertEqual(expand_aliases(["--f", "f"], [FORCE]), ["--f", "f"])

    def testFirstDeclaringOptionWins(self):
        first = Option("first", type="boolean", alias="x")
        second = Option("second", type="boolean", alias="x")
        self.assertEqual(expand_aliases(["-x"], [first, second]), ["--first"])

    def testMappingDeclarations(self):
        self.assertEqual(expand_aliases(["-o"], [{"name": "out", "type": "string", "alias": "o"}]), ["--out"])


class TestValidateOptions(TestCase):
    """Behavioral tests for declaration validation."""

    def testSingleCharacterAliasesPass(self):
        self.assertIsNone(validate_options([FORCE, OUT, Option("plain")]))

    def testLongAliasMessage(self):
        fault = validate_options([Option("force", type="boolean", alias="fo")])
        self.assertIsInstance(fault, ParserInitializationError)
        self.assertEqual(
            fault.message,
            "Parser initalization error: option alias must be a single alphanumeric character. "
            "Received alias '-fo' for option '--force'."
        )
        self.assertIs(fault.code, FaultCode.MALFORMED_ALIAS)

    def testFirstViolationReported(self):
        fault = validate_options([OUT, Option("aa", alias="ab"), Option("bb", alias="bc")])
        self.assertIn("'-ab' for option '--aa'", fault.message)

    def testEmptyAliasRejected(self):
        fault = validate_options([Option("out", alias="")])
        self.assertIn("Received alias '-' for option '--out'.", fault.message)


class TestValidateArguments(TestCase):
    """Behavioral tests for argument usage validation."""

    def testValueLooksLikeFlag(self):
        fault = validate_arguments(["--out", "-x"], [Option("out")])
        self.assertIsInstance(fault, OptionValueRequiredError)
        self.assertEqual(fault.message, "Parsing error: option --out expects a value.")
        self.assertIs(fault.code, FaultCode.OPTION_VALUE_REQUIRED)

    def testAliasIncludedInMessage(self):
        fault = validate_arguments(["--out", "--force"], [OUT, FORCE])
        self.assertEqual(fault.message, "Parsing error: option --out|-o expects a value.")

    def testMissingValueAtEnd(self):
        fault = validate_arguments(["--out"], [OUT])
        self.assertEqual(fault.message, "Parsing error: option --out|-o expects a value.")

    def testValuePresent(self):
        self.assertIsNone(validate_arguments(["--out", "file.txt"], [OUT]))

    def testBooleanNeedsNoValue(self):
        self.assertIsNone(validate_arguments(["--force", "--verbose"], [FORCE, VERBOSE]))

    def testFirstViolationReported(self):
        first = Option("first")
        second = Option("second")
        fault = validate_arguments(["--first", "--second", "-x"], [second, first])
        self.assertEqual(fault.options["option"], first)

    def testUndeclaredTokensIgnored(self):
        self.assertIsNone(validate_arguments(["--other", "-x"], [OUT]))

    def testNumberMustConvert(self):
        fault = validate_arguments(["--count", "many"], [COUNT])
        self.assertIsInstance(fault, InvalidNumberError)
        self.assertEqual(fault.message, "Parsing error: option --count|-n expects a numeric value.")

    def testNonFiniteNumbersRejected(self):
        for value in ("nan", "inf", "-inf", "Infinity"):
            with self.subTest(value=value):
                fault = validate_arguments(["--count", value], [COUNT])
                if value.startswith("-"):
                    self.assertIsInstance(fault, OptionValueRequiredError)
                else:
                    self.assertIsInstance(fault, InvalidNumberError)

    def testNegativeNumberLooksLikeFlag(self):
        fault = validate_arguments(["--count", "-5"], [COUNT])
        self.assertIsInstance(fault, OptionValueRequiredError)


class TestExtractValues(TestCase):
    """Behavioral tests for value extraction."""

    def testStringValue(self):
        self.assertEqual(extract_values(["--out", "file.txt"], [OUT]), {"out": "file.txt"})

    def testBooleanPresent(self):
        self.assertEqual(extract_values(["--verbose"], [VERBOSE]), {"verbose": True})

    def testBooleanAbsentHasNoKey(self):
        self.assertNotIn("verbose", extract_values([], [VERBOSE]))

    def testNumberValues(self):
        self.assertEqual(extract_values(["--count", "3"], [COUNT]), {"count": 3})
        self.assertEqual(extract_values(["--count", "2.5"], [COUNT]), {"count": 2.5})

    def testUndeclaredTokensIgnored(self):
        self.assertEqual(extract_values(["pos", "--other", "--verbose"], [VERBOSE]), {"verbose": True})

    def testValueTokenNotReadAsOption(self):
        values = extract_values(["--out", "verbose", "--verbose"], [OUT, VERBOSE])
        self.assertEqual(values, {"out": "verbose", "verbose": True})

    def testLastOccurrenceWins(self):
        self.assertEqual(extract_values(["--out", "a", "--out", "b"], [OUT]), {"out": "b"})


class TestParseArguments(TestCase):
    """Behavioral tests for the whole pipeline."""

    def testMergedAliasesWithValue(self):
        values = parse_arguments(["-vo", "file.txt"], [VERBOSE, OUT])
        self.assertEqual(values, {"verbose": True, "out": "file.txt"})

    def testUnknownShortFlagIgnored(self):
        self.assertEqual(parse_arguments(["-zf"], [FORCE]), {"force": True})

    def testConfigurationFaultWinsOverUsageFault(self):
        fault = parse_arguments(["--out"], [OUT, Option("force", type="boolean", alias="fo")])
        self.assertIsInstance(fault, ParserInitializationError)

    def testUsageFault(self):
        fault = parse_arguments(["-o", "-v"], [OUT, VERBOSE])
        self.assertIsInstance(fault, OptionValueRequiredError)
        self.assertEqual(fault.message, "Parsing error: option --out|-o expects a value.")

    def testMappingDeclarations(self):
        values = parse_arguments(["-n", "7"], [{"name": "count", "type": "number", "alias": "n"}])
        self.assertEqual(values, {"count": 7})

    def testEmptyTokens(self):
        self.assertEqual(parse_arguments([], [OUT, FORCE]), {})


if __name__ == "__main__":
    unittest.main()
