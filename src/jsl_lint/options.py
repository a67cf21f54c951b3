"""JavaScript Lint option table and merging."""
from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any, NamedTuple

from jsl_lint.validation import validate_options


class OptionSpec(NamedTuple):
    """A single boolean JavaScript Lint setting."""

    name: str
    default: bool
    section: str
    description: str


_FILES = "Files"
_WARNINGS = "Warnings"

OPTION_SPECS: tuple[OptionSpec, ...] = (
    OptionSpec("recurse", False, _FILES, "recurse into directories when matching patterns"),
    OptionSpec("no_return_value", True, _WARNINGS, "function does not always return a value"),
    OptionSpec("duplicate_formal", True, _WARNINGS, "duplicate formal argument"),
    OptionSpec(
        "equal_as_assign", True, _WARNINGS, "test for equality (==) mistyped as assignment (=)"
    ),
    OptionSpec("var_hides_arg", True, _WARNINGS, "variable hides argument"),
    OptionSpec("redeclared_var", True, _WARNINGS, "redeclaration of a variable"),
    OptionSpec(
        "anon_no_return_value", True, _WARNINGS, "anonymous function does not always return a value"
    ),
    OptionSpec("missing_semicolon", True, _WARNINGS, "missing semicolon"),
    OptionSpec(
        "meaningless_block", True, _WARNINGS, "meaningless block; curly braces have no impact"
    ),
    OptionSpec(
        "comma_separated_stmts", True, _WARNINGS, "multiple statements separated by commas"
    ),
    OptionSpec("unreachable_code", True, _WARNINGS, "unreachable code"),
    OptionSpec("missing_break", True, _WARNINGS, "missing break statement"),
    OptionSpec(
        "missing_break_for_last_case",
        True,
        _WARNINGS,
        "missing break statement for last case in switch",
    ),
    OptionSpec(
        "comparison_type_conv",
        True,
        _WARNINGS,
        "comparisons against null, 0, true, false, or an empty string allowing implicit type "
        "conversion",
    ),
    OptionSpec(
        "inc_dec_within_stmt",
        True,
        _WARNINGS,
        "increment (++) and decrement (--) operators used as part of greater statement",
    ),
    OptionSpec("useless_void", True, _WARNINGS, "use of the void type may be unnecessary"),
    OptionSpec(
        "multiple_plus_minus",
        True,
        _WARNINGS,
        "unknown order of operations for successive plus or minus signs",
    ),
    OptionSpec("use_of_label", True, _WARNINGS, "use of label"),
    OptionSpec("block_without_braces", False, _WARNINGS, "block statement without curly braces"),
    OptionSpec(
        "leading_decimal_point",
        True,
        _WARNINGS,
        "leading decimal point may indicate a number or an object member",
    ),
    OptionSpec(
        "trailing_decimal_point",
        True,
        _WARNINGS,
        "trailing decimal point may indicate a number or an object member",
    ),
    OptionSpec("octal_number", True, _WARNINGS, "leading zeros make an octal number"),
    OptionSpec("nested_comment", True, _WARNINGS, "nested comment"),
    OptionSpec(
        "misplaced_regex",
        True,
        _WARNINGS,
        "regular expressions should be preceded by a left parenthesis, assignment, colon, "
        "or comma",
    ),
    OptionSpec(
        "ambiguous_newline",
        True,
        _WARNINGS,
        "unexpected end of line; it is ambiguous whether these lines are part of the same "
        "statement",
    ),
    OptionSpec("empty_statement", True, _WARNINGS, "empty statement or extra semicolon"),
    OptionSpec(
        "missing_option_explicit",
        False,
        _WARNINGS,
        'the "option explicit" control comment is missing',
    ),
    OptionSpec(
        "partial_option_explicit",
        True,
        _WARNINGS,
        'the "option explicit" control comment, if used, must be in the first script tag',
    ),
    OptionSpec(
        "dup_option_explicit", True, _WARNINGS, 'duplicate "option explicit" control comment'
    ),
    OptionSpec("useless_assign", True, _WARNINGS, "useless assignment"),
    OptionSpec(
        "ambiguous_nested_stmt",
        True,
        _WARNINGS,
        "block statements containing block statements should use curly braces to resolve "
        "ambiguity",
    ),
    OptionSpec(
        "ambiguous_else_stmt",
        True,
        _WARNINGS,
        "the else statement could be matched with one of multiple if statements",
    ),
    OptionSpec(
        "missing_default_case", True, _WARNINGS, "missing default case in switch statement"
    ),
    OptionSpec(
        "duplicate_case_in_switch", True, _WARNINGS, "duplicate case in switch statements"
    ),
    OptionSpec(
        "default_not_at_end",
        True,
        _WARNINGS,
        "the default case is not at the end of the switch statement",
    ),
    OptionSpec(
        "legacy_cc_not_understood",
        True,
        _WARNINGS,
        "couldn't understand control comment using @keyword@ syntax",
    ),
    OptionSpec(
        "jsl_cc_not_understood",
        True,
        _WARNINGS,
        "couldn't understand control comment using jsl:keyword syntax",
    ),
    OptionSpec(
        "useless_comparison", True, _WARNINGS, "useless comparison; comparing identical expressions"
    ),
    OptionSpec(
        "with_statement",
        True,
        _WARNINGS,
        "with statement hides undeclared variables; use temporary variable instead",
    ),
    OptionSpec(
        "trailing_comma_in_array",
        True,
        _WARNINGS,
        "extra comma is not recommended in array initializers",
    ),
    OptionSpec("assign_to_function_call", True, _WARNINGS, "assignment to a function call"),
    OptionSpec("parseint_missing_radix", True, _WARNINGS, "parseInt missing radix parameter"),
    OptionSpec("context", True, "Context", "show the offending source line next to each message"),
    OptionSpec(
        "lambda_assign_requires_semicolon",
        True,
        "Semicolons",
        "assignments of an anonymous function to a variable or property must be followed by "
        "a semicolon",
    ),
    OptionSpec(
        "legacy_control_comments",
        True,
        "Control Comments",
        "accept legacy @keyword@ control comments in addition to jsl:keyword",
    ),
    OptionSpec(
        "jscript_function_extensions",
        False,
        "JScript Function Extensions",
        "allow Microsoft-only member function and event definitions",
    ),
    OptionSpec(
        "always_use_option_explicit",
        False,
        "Defining identifiers",
        'enable "option explicit" for all files instead of per file',
    ),
)

DEFAULT_OPTIONS: Mapping[str, bool] = MappingProxyType(
    {spec.name: spec.default for spec in OPTION_SPECS}
)


def merge_options(
    overrides: Mapping[str, Any] | None, defaults: Mapping[str, bool] = DEFAULT_OPTIONS
) -> dict[str, bool]:
    """Merge caller overrides over the default option table.

    Args:
        overrides: Option name to value; values are interpreted as booleans
        defaults: Option table to merge into

    Returns:
        New dict holding every default key, in table order, with overrides applied

    Raises:
        UnknownOptionError: If any override key is missing from ``defaults``
    """
    overrides = overrides or {}
    validate_options(overrides, defaults)

    merged = dict(defaults)
    for name, value in overrides.items():
        merged[name] = bool(value)
    return merged


def describe_options() -> Iterator[OptionSpec]:
    """Iterate over option specs in table order."""
    yield from OPTION_SPECS
