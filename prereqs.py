from models import Clause, Compound, Leaf, Operator

JOINERS = {Operator.AND: " and ", Operator.OR: " or "}


def needs_parens(parent: Compound, child: Clause) -> bool:
    """A nested group is wrapped unless it is an OR inside an OR."""
    if not isinstance(child, Compound):
        return False
    return not (parent.operator == Operator.OR and child.operator == Operator.OR)


def render(clause: Clause) -> str:
    if isinstance(clause, Leaf):
        return clause.id

    joiner = JOINERS.get(clause.operator)
    if joiner is None:
        # unrecognized operators contribute nothing
        return ""

    parts = []
    for child in clause.children:
        text = render(child)
        if text and needs_parens(clause, child):
            text = f"({text})"
        parts.append(text)
    return joiner.join(parts)


def serialize_prereqs(
    clause: Clause, open_paren: bool = False, close_paren: bool = False
) -> str:
    """Renders a prerequisite tree as text, e.g. "(CS 101 and CS 102) or CS 201".

    The top-level clause is never wrapped. open_paren and close_paren add a
    literal parenthesis before or after a single leaf; groups ignore them.
    """
    text = render(clause)
    if isinstance(clause, Leaf):
        text = ("(" if open_paren else "") + text + (")" if close_paren else "")
    return text
