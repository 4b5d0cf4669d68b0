"""comat - terminal colors written inside format strings.

Write "{red}danger{reset}" instead of "\\x1b[0;34;31mdanger\\x1b[0m":

    from comat import cprintln

    cprintln("the traffic light is {bold_red}red.{reset}")
    cprintln("{count:green} tests passed", count=12)

Syntax:
- "{{" gives "{", "}}" gives "}" in the compiled template. The formatting
  helpers then run str.format(), so a literal brace in their output needs
  "{{{{".
- "{color}" switches to that color or style; it is not reset afterwards.
- "{value:color}" resets, renders value in that color, then resets again.
- Tokens that do not name a style are left for str.format().
"""

from comat.config.models import TransformOptions, UnterminatedPolicy
from comat.facade import (
    FormatArguments,
    cformat,
    cformat_args,
    comat,
    cpanic,
    cprint,
    cprintln,
    cwrite,
    cwriteln,
)
from comat.lib.errors import (
    ComatError,
    ComatPanic,
    TemplateError,
    UnexpectedClosingBraceError,
    UnexpectedEndOfInputError,
)
from comat.lib.styles import STYLES
from comat.lib.transform import TemplateTransformer, transform

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "STYLES",
    "ComatError",
    "ComatPanic",
    "FormatArguments",
    "TemplateError",
    "TemplateTransformer",
    "TransformOptions",
    "UnexpectedClosingBraceError",
    "UnexpectedEndOfInputError",
    "UnterminatedPolicy",
    "cformat",
    "cformat_args",
    "comat",
    "cpanic",
    "cprint",
    "cprintln",
    "cwrite",
    "cwriteln",
    "transform",
]
