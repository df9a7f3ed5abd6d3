"""Placeholder substitution for license templates.

The registry serves templates written for different conventions
(choosealicense uses `[year]`/`[fullname]`, Apache `[yyyy]`, the GNU family
`<year>`/`<name of author>`). Every known spelling is replaced literally.
"""

from __future__ import annotations

YEAR_TOKENS: tuple[str, ...] = ("[year]", "[yyyy]", "<year>", "YEAR")
AUTHOR_TOKENS: tuple[str, ...] = (
    "[fullname]",
    "[name of copyright owner]",
    "<copyright holders>",
    "<name of author>",
)


def render_template(template: str, year: str, author: str) -> str:
    """Return `template` with every year and author token replaced.

    Matching is a plain, case-sensitive substring search; tokens the template
    does not contain are ignored and unknown tokens are left as they are.
    """

    text = template
    for token in YEAR_TOKENS:
        text = text.replace(token, year)
    for token in AUTHOR_TOKENS:
        text = text.replace(token, author)
    return text
