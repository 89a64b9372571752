from typing import Tuple

import cssselect
import tinycss2

PATH_OPENERS = "|(,"


def normalize_selector(selector: str) -> str:
    """
    Collapse whitespace in a CSS selector.

    Quoted strings and bracket contents are serialized back untouched by
    tinycss2. If tokenization reports an error, the stripped input is
    returned as-is so the compiler can report the real problem.
    """
    if not selector:
        return ""

    tokens = tinycss2.parse_component_value_list(selector)
    if any(token.type == "error" for token in tokens):
        return selector.strip()

    parts = []
    for token in tokens:
        if token.type == "whitespace":
            if parts and parts[-1] != " ":
                parts.append(" ")
            continue
        parts.append(token.serialize())

    return "".join(parts).strip()


def get_selector_specificity(selector: str) -> Tuple[int, int, int]:
    """
    Calculate the specificity of a CSS selector.

    Args:
        selector: CSS selector string, possibly a comma-separated list

    Returns:
        Tuple of (id_count, class_count, element_count); the highest one
        for a selector list, and (0, 0, 0) when the selector is invalid
    """
    try:
        selectors = cssselect.parse(selector)
    except cssselect.SelectorError:
        return (0, 0, 0)

    if not selectors:
        return (0, 0, 0)
    return max(tuple(parsed.specificity()) for parsed in selectors)


def scope_xpath(expression: str) -> str:
    """
    Anchor absolute location paths to the context node.

    ``//h2`` becomes ``.//h2`` and ``/html/body`` becomes ``./html/body``,
    for every branch of a union and inside parentheses. Predicates and
    string literals are left untouched.
    """
    out = []
    depth = 0
    quote = None
    at_path_start = True

    for ch in expression:
        if quote:
            out.append(ch)
            if ch == quote:
                quote = None
            continue

        if ch in "'\"":
            quote = ch
            at_path_start = False
            out.append(ch)
            continue

        if ch.isspace():
            out.append(ch)
            continue

        if ch == "[":
            depth += 1
        elif ch == "]":
            depth = max(depth - 1, 0)

        if ch == "/" and at_path_start and depth == 0:
            out.append(".")

        at_path_start = depth == 0 and ch in PATH_OPENERS
        out.append(ch)

    return "".join(out)


NODE_TYPE_TESTS = frozenset({"node", "text", "comment", "processing-instruction"})


def _starts_relative_path(expression: str, index: int) -> bool:
    ch = expression[index]
    if ch in ".@*":
        # ".5" is a number, not a step
        return not (ch == "." and expression[index + 1:index + 2].isdigit())
    if not (ch.isalpha() or ch == "_"):
        return False

    end = index
    while end < len(expression) and (expression[end].isalnum() or expression[end] in "_-.:"):
        end += 1
    name = expression[index:end]
    if "::" in name:
        return True
    # a name followed by "(" is a function call unless it is a node type test
    return not expression[end:].lstrip().startswith("(") or name in NODE_TYPE_TESTS


def anchor_xpath(expression: str) -> str:
    """
    Anchor relative location paths to the document node.

    ``html/body`` becomes ``/html/body`` for every branch of a union, inside
    parentheses and in function arguments. Absolute paths, literals,
    numbers, variables and function names are left untouched, as are
    predicates.
    """
    out = []
    depth = 0
    quote = None
    at_path_start = True

    for index, ch in enumerate(expression):
        if quote:
            out.append(ch)
            if ch == quote:
                quote = None
            continue

        if ch in "'\"":
            quote = ch
            at_path_start = False
            out.append(ch)
            continue

        if ch.isspace():
            out.append(ch)
            continue

        if ch == "[":
            depth += 1
        elif ch == "]":
            depth = max(depth - 1, 0)

        if at_path_start and depth == 0 and _starts_relative_path(expression, index):
            out.append("/")

        at_path_start = depth == 0 and ch in PATH_OPENERS
        out.append(ch)

    return "".join(out)
