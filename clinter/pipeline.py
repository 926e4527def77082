"""
Clinter argument pipeline: turn raw tokens into an option-values mapping.

phases (strict order)
1. split_flags       "-ab" → "-a", "-b" (long tokens and positionals untouched)
2. expand_aliases    "-f"  → "--force" when an option declares alias "f"
3. validate_options  every declared alias must be exactly one character
4. validate_arguments value-bearing options must be followed by a value token
then extract_values builds the mapping.

contract
- nothing here raises for user input: validation returns a fault (see
  clinter.faults) or None, and parse_arguments() returns either the mapping or
  the first fault. configuration faults win over usage faults.
- tokens that match no declared "--<name>" are ignored, not collected.
"""
import math

from .faults import *
from .options import OptionKind, option


def split_flags(tokens, /):
    """
    expand merged short flags into one single-dash token per character.

    a token counts as merged short flags when it starts with "-" but not "--".
    a bare "-" carries no characters and therefore yields no token.
    """
    result = []
    for token in tokens:
        if token.startswith("-") and not token.startswith("--"):
            result.extend("-" + char for char in token[1:])
        else:
            result.append(token)
    return result


def expand_aliases(tokens, options, /):
    """
    rewrite "-<alias>" tokens to the "--<name>" of the first declaring option.

    unmatched single-dash tokens pass through unchanged.
    """
    aliases = {}
    for declaration in map(option, options):
        if declaration.short is not None:
            aliases.setdefault(declaration.short, declaration.flag)

    return [
        aliases.get(token, token) if token.startswith("-") and not token.startswith("--") else token
        for token in tokens
    ]


def validate_options(options, /):
    """
    return a ParserInitializationError for the first option whose alias is not
    exactly one character, scanning in declaration order; None otherwise.
    """
    for declaration in map(option, options):
        if declaration.alias is not None and len(declaration.alias) != 1:
            return ParserInitializationError(
                "Parser initalization error: option alias must be a single alphanumeric character. "
                "Received alias '-%s' for option '--%s'." % (declaration.alias, declaration.name),
                code=FaultCode.MALFORMED_ALIAS,
                option=declaration,
            )
    return None


def _spelling(declaration):
    if declaration.alias is None:
        return declaration.flag
    return "%s|%s" % (declaration.flag, declaration.short)


def _number(value):
    try:
        return int(value)
    except ValueError:
        number = float(value)
    if not math.isfinite(number):
        raise ValueError("non-finite number: %r" % value)
    return number


def _declared(options):
    # first declaration wins when two options share a name
    flags = {}
    for declaration in map(option, options):
        flags.setdefault(declaration.flag, declaration)
    return flags


def validate_arguments(tokens, options, /):
    """
    return a usage fault for the first value-bearing option that is missing
    its value, scanning tokens in order; None when every option is satisfied.

    an option is missing its value when it is the last token or when the next
    token starts with "-". a NUMBER option whose value does not convert is
    reported as well.
    """
    flags = _declared(options)
    index = 0
    while index < len(tokens):
        declaration = flags.get(tokens[index])
        if declaration is None or not declaration.valued:
            index += 1
            continue

        if index + 1 >= len(tokens) or tokens[index + 1].startswith("-"):
            return OptionValueRequiredError(
                "Parsing error: option %s expects a value." % _spelling(declaration),
                code=FaultCode.OPTION_VALUE_REQUIRED,
                option=declaration,
                index=index,
            )

        if declaration.type is OptionKind.NUMBER:
            try:
                _number(tokens[index + 1])
            except ValueError:
                return InvalidNumberError(
                    "Parsing error: option %s expects a numeric value." % _spelling(declaration),
                    code=FaultCode.INVALID_NUMBER,
                    option=declaration,
                    index=index,
                    value=tokens[index + 1],
                )

        # the value token is never read as an option
        index += 2
    return None


def extract_values(tokens, options, /):
    """
    build the option-values mapping from already validated tokens.

    - STRING  → the following token
    - NUMBER  → the following token as int, or float when not an integer
    - BOOLEAN → True
    boolean options that are absent get no key at all.
    """
    flags = _declared(options)
    values = {}
    index = 0
    while index < len(tokens):
        declaration = flags.get(tokens[index])
        if declaration is None:
            index += 1
            continue

        match declaration.type:
            case OptionKind.BOOLEAN:
                values[declaration.name] = True
                index += 1
                continue
            case OptionKind.STRING:
                values[declaration.name] = tokens[index + 1]
            case OptionKind.NUMBER:
                values[declaration.name] = _number(tokens[index + 1])
        index += 2
    return values


def parse_arguments(tokens, options, /):
    """
    run the whole pipeline over the tokens that follow the command token.

    returns the option-values mapping, or the first fault found.
    """
    options = tuple(map(option, options))
    tokens = expand_aliases(split_flags(tokens), options)

    if fault := validate_options(options):
        return fault
    if fault := validate_arguments(tokens, options):
        return fault
    return extract_values(tokens, options)


__all__ = (
    "split_flags",
    "expand_aliases",
    "validate_options",
    "validate_arguments",
    "extract_values",
    "parse_arguments",
)
