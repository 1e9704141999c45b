"""Template interpreter for Perchance-style list definitions.

The dialect is line oriented::

    <p>A [creature] is here</p>

    creature
    dog|cat|bird

A bare line starts a list, ``|``-delimited lines below it add options, and
``[name]`` placeholders in the first line are replaced with a random option.
Parsing is single-pass and best effort: malformed input yields fewer lists,
never an exception.
"""

import logging
import random
import re

from perchance_helper.models import ParsedTemplate, ValidationReport

logger = logging.getLogger(__name__)

OUTPUT_LABEL = "Random output: "
VALID_MESSAGE = "Code appears valid"
INVALID_MESSAGE = (
    "Code may have syntax errors. Ensure proper list definitions and placeholder brackets."
)

# Whitespace as the browser-side Perchance editor sees it: Unicode spaces, line
# terminators and the BOM, but not the \x1c-\x1f and \x85 that str.strip() removes.
_WHITESPACE = (
    "\t\n\v\f\r \u00a0\u1680"
    + "".join(chr(code) for code in range(0x2000, 0x200B))
    + "\u2028\u2029\u202f\u205f\u3000\ufeff"
)

_BRACKET_RE = re.compile(r"\[[A-Za-z0-9_]+\]")
# Word line followed by a whitespace-led continuation line.
_LIST_BLOCK_RE = re.compile(
    r"\n[A-Za-z0-9_]+\n[" + _WHITESPACE + r"]+([^\n\r\u2028\u2029]*?)\n"
)


def _trim(value: str) -> str:
    return value.strip(_WHITESPACE)


def _is_list_content(line: str) -> bool:
    return bool(line) and not line.startswith("<") and "[" not in line


def parse_lists(text: str) -> ParsedTemplate:
    """Split template source into named option lists and the body line."""
    lines = [_trim(line) for line in text.split("\n")]
    lists: dict[str, list[str]] = {}
    current_list: str | None = None

    for line in lines:
        if not _is_list_content(line):
            continue
        if "|" not in line:
            current_list = line
            lists[current_list] = []
        elif current_list is not None:
            lists[current_list].extend(_trim(option) for option in line.split("|"))

    body = lines[0] or text
    logger.debug("Parsed %d list(s): %s", len(lists), list(lists))
    return ParsedTemplate(lists=lists, body=body)


def make_rng(seed: int | None = None) -> random.Random:
    """Create a random source, seeded for reproducible output when *seed* is given."""
    return random.Random(seed)


def render(parsed: ParsedTemplate, rng: random.Random | None = None) -> str:
    """Substitute placeholders in *parsed.body* with one draw per list.

    Every occurrence of the same placeholder receives the same value.
    Placeholders without a matching list are left as-is.
    """
    choose = rng.choice if rng is not None else random.choice
    output = parsed.body
    for name, options in parsed.lists.items():
        value = choose(options) if options else ""
        output = output.replace(f"[{name}]", value)
    return output


def generate(text: str, rng: random.Random | None = None) -> str:
    """Parse *text* and return its body with placeholders resolved."""
    return render(parse_lists(text), rng)


def format_output(rendered: str, label: str = OUTPUT_LABEL) -> str:
    """Prefix a rendered body with the caller-facing label."""
    return f"{label}{rendered}"


def validate(text: str) -> ValidationReport:
    """Heuristically check that *text* looks like a Perchance template.

    The verdict depends only on finding a list block; placeholder brackets
    are reported but never change the outcome.
    """
    has_brackets = _BRACKET_RE.search(text) is not None
    has_lists = _LIST_BLOCK_RE.search(text) is not None
    is_valid = has_lists and (has_brackets or not has_brackets)

    logger.debug("Validation probes: has_lists=%s has_brackets=%s", has_lists, has_brackets)
    return ValidationReport(
        valid=is_valid,
        message=VALID_MESSAGE if is_valid else INVALID_MESSAGE,
        has_lists=has_lists,
        has_brackets=has_brackets,
    )
