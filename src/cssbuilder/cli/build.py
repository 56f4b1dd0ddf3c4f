"""CLI command: cssbuilder build -- assemble a selector from fragment tokens."""

from __future__ import annotations

import dataclasses
import sys

import click

from cssbuilder.config import BuilderConfig
from cssbuilder.errors import SelectorError
from cssbuilder.model.fragment import FragmentKind
from cssbuilder.selector import Combinator, SelectorBuilder, SimpleSelector
from cssbuilder.selector.combined import Renderable
from cssbuilder.validation import lint

_KIND_NAMES: dict[str, FragmentKind] = {
    "element": FragmentKind.ELEMENT,
    "id": FragmentKind.ID,
    "class": FragmentKind.CLASS,
    "attr": FragmentKind.ATTRIBUTE,
    "attribute": FragmentKind.ATTRIBUTE,
    "pseudo-class": FragmentKind.PSEUDO_CLASS,
    "pseudo-element": FragmentKind.PSEUDO_ELEMENT,
}


def assemble(tokens: list[str], builder: SelectorBuilder) -> Renderable:
    """Turn CLI tokens into a selector.

    ``kind=value`` tokens extend the current compound selector; any other
    token is a combinator that starts the next one. Compounds are combined
    right to left.
    """
    compounds: list[SimpleSelector] = []
    combinators: list[str] = []
    current = SimpleSelector()
    for token in tokens:
        name, sep, value = token.partition("=")
        if sep:
            kind = _KIND_NAMES.get(name.strip().lower())
            if kind is None:
                raise click.BadParameter(
                    f"Unknown fragment kind {name!r} in {token!r}", param_hint="TOKENS"
                )
            current = current.append(kind, value)
        else:
            compounds.append(current)
            combinators.append(Combinator.resolve(token))
            current = SimpleSelector()
    compounds.append(current)

    result: Renderable = compounds[-1]
    for left, combinator in zip(reversed(compounds[:-1]), reversed(combinators)):
        result = builder.combine(left, combinator, result)
    return result


@click.command()
@click.argument("tokens", nargs=-1, required=True)
@click.option("--strict", is_flag=True, help="Reject non-standard combinators")
@click.option("--lint", "run_lint", is_flag=True, help="Print lint warnings to stderr")
@click.pass_obj
def build(
    config: BuilderConfig | None, tokens: tuple[str, ...], strict: bool, run_lint: bool
) -> None:
    """Build a selector from TOKENS and print it.

    Tokens are kind=value fragments (element, id, class, attr,
    pseudo-class, pseudo-element) or combinators (+, ~, >, descendant,
    child, adjacent, sibling).
    """
    config = config or BuilderConfig()
    if strict:
        config = dataclasses.replace(config, strict_combinators=True)
    builder = SelectorBuilder(config=config)

    try:
        selector = assemble(list(tokens), builder)
    except SelectorError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    if run_lint:
        for diag in lint(selector):
            click.echo(str(diag), err=True)

    click.echo(selector.stringify())
