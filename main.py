import logging
from typing import Callable

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.text import Text

from expression import (
    Expression, constant, variable, add, multiply,
    evaluate, derivative, to_string,
)
from simplifier import simplify
from sympy_bridge import agrees_with_sympy

app = typer.Typer()
console = Console()

SAMPLES: dict[str, Callable[[], Expression]] = {
    # f(x) = x + 2x
    "f": lambda: add(variable(), multiply(constant(2), variable())),
    # g(x) = x * x
    "g": lambda: multiply(variable(), variable()),
}


def build_report(name: str, at: float, check: bool) -> list[tuple[str, str]]:
    """
    Rows of (label, text) for one sample:
      1) differentiate, then simplify
      2) simplify, then differentiate and simplify again
      3) the simplified derivative evaluated at `at`
      4) [opt] whether SymPy agrees with the derivative
    """
    expr = SAMPLES[name]()
    d_raw = derivative(expr)
    d_simple = simplify(d_raw)
    pre = simplify(expr)
    d_pre = derivative(pre)

    rows = [
        (f"{name}(x)", to_string(expr)),
        (f"{name}'(x) raw", to_string(d_raw)),
        (f"{name}'(x) simplified", to_string(d_simple)),
        (f"{name}(x) simplified", to_string(pre)),
        (f"{name}'(x) of simplified", to_string(d_pre)),
        (f"{name}'(x) of simplified, simplified", to_string(simplify(d_pre))),
        (f"{name}'({at:g})", f"{evaluate(d_simple, at):g}"),
    ]
    if check:
        rows.append(("SymPy check", "agrees" if agrees_with_sympy(expr) else "DISAGREES"))
    return rows

def render_report(name: str, rows: list[tuple[str, str]]) -> Panel:
    body = Text("\n").join(
        Text.assemble((label, "bold"), " = ", text) for label, text in rows
    )
    return Panel(body, title=f"{name}(x)", border_style="green")

@app.command()
def main(
    sample: str = typer.Argument(
        "all", help="Sample expression to show: f (x + 2x), g (x * x) or all"
    ),
    at: float = typer.Option(
        5.0, "--at",
        help="Point at which the simplified derivative is evaluated"
    ),
    check: bool = typer.Option(
        True, "--check/--no-check",
        help="Cross-check each derivative against SymPy"
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v",
        help="Log every simplification rule as it fires"
    ),
):
    """
    Differentiate and simplify the sample expressions, showing each step.
    """
    if sample != "all" and sample not in SAMPLES:
        raise typer.BadParameter(
            f"unknown sample {sample!r}, expected one of: all, {', '.join(SAMPLES)}",
            param_hint="SAMPLE",
        )
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
            force=True,
        )

    names = list(SAMPLES) if sample == "all" else [sample]
    for name in names:
        console.print(render_report(name, build_report(name, at, check)))

if __name__ == "__main__":
    app()
