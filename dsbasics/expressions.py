"""Infix to postfix conversion and evaluation of single-digit postfix."""

OPERATORS = frozenset("+-*/^")


def precedence(operator: str) -> int:
    """Return the binding strength of ``operator``; 0 for anything else."""
    if operator == "^":
        return 3
    if operator in ("*", "/"):
        return 2
    if operator in ("+", "-"):
        return 1
    return 0


def _is_operand(ch: str) -> bool:
    return ch.isascii() and ch.isalnum()


def infix_to_postfix(infix: str) -> str:
    """Convert an infix expression of single-character operands to postfix.

    Operators of equal precedence, ``^`` included, associate to the left.
    Characters that are neither operands, operators nor parentheses are
    ignored. Raises ValueError on unbalanced parentheses.
    """
    output: list[str] = []
    stack: list[str] = []
    for ch in infix:
        if _is_operand(ch):
            output.append(ch)
        elif ch == "(":
            stack.append(ch)
        elif ch == ")":
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if not stack:
                raise ValueError("unbalanced parentheses")
            stack.pop()
        elif ch in OPERATORS:
            while stack and precedence(stack[-1]) >= precedence(ch):
                output.append(stack.pop())
            stack.append(ch)
    while stack:
        top = stack.pop()
        if top == "(":
            raise ValueError("unbalanced parentheses")
        output.append(top)
    return "".join(output)


def _truncated_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def _apply(operator: str, a: int, b: int) -> int:
    if operator == "+":
        return a + b
    if operator == "-":
        return a - b
    if operator == "*":
        return a * b
    if operator == "/":
        return _truncated_div(a, b)
    if operator == "%":
        return a - b * _truncated_div(a, b)
    if operator == "^":
        return a**b if b >= 0 else int(a**b)
    raise ValueError(f"Invalid operator: {operator}")


def evaluate_postfix(postfix: str) -> int:
    """Evaluate a postfix expression of single-digit operands.

    Supports ``+ - * / % ^``; division and remainder truncate toward zero.
    Whitespace is skipped. Raises ValueError for unknown operators or a
    malformed expression, ZeroDivisionError for division by zero.
    """
    stack: list[int] = []
    for ch in postfix:
        if ch.isspace():
            continue
        if ch.isascii() and ch.isdigit():
            stack.append(int(ch))
            continue
        if len(stack) < 2:
            if ch not in OPERATORS and ch != "%":
                raise ValueError(f"Invalid operator: {ch}")
            raise ValueError("malformed postfix expression")
        b = stack.pop()
        a = stack.pop()
        stack.append(_apply(ch, a, b))
    if len(stack) != 1:
        raise ValueError("malformed postfix expression")
    return stack[0]