"""Color template transformer.

Rewrites a template such as "{red}yes{reset} {count:bold}" into a plain
str.format() template with ANSI escape sequences spliced in:

- "{{" and "}}" become literal braces.
- "{name}" with a known style name becomes that style's escape sequence.
- "{body:name}" with a known style name becomes reset + style + "{body}" +
  reset, so the value renders in exactly that style.
- Every other token ("{}", "{0}", "{n:.2f}", "{unknown}") is kept verbatim
  for str.format() to fill in later.
"""

from functools import lru_cache

from comat.config.defaults import TEMPLATE_CACHE_SIZE
from comat.config.models import TransformOptions, UnterminatedPolicy
from comat.lib.errors import UnexpectedClosingBraceError, UnexpectedEndOfInputError
from comat.lib.logging_config import get_logger
from comat.lib.styles import RESET, name_to_ansi

logger = get_logger(__name__)


def _resolve_token(name: str, options: TransformOptions) -> str:
    """Translate the inside of one "{...}" token."""
    ansi = name_to_ansi(name, correct_underline=options.correct_underline)
    if ansi is not None:
        return ansi

    body, sep, tail = name.partition(":")
    if sep:
        ansi = name_to_ansi(tail, correct_underline=options.correct_underline)
        if ansi is not None:
            # A leading reset already covers "{body:reset}"
            style = "" if ansi == RESET else ansi
            return f"{RESET}{style}{{{body}}}{RESET}"

    logger.debug(f"Passing through token {{{name}}}")
    return f"{{{name}}}"


def _compile(template: str, options: TransformOptions) -> str:
    out: list[str] = []
    length = len(template)
    i = 0

    while i < length:
        ch = template[i]

        if ch == "{":
            if i + 1 == length:
                raise UnexpectedEndOfInputError(template, length)
            following = template[i + 1]
            if following == "{":
                out.append("{")
                i += 2
                continue
            if following == "}":
                out.append("{}")
                i += 2
                continue

            close = template.find("}", i + 1)
            if close == -1:
                if options.unterminated == UnterminatedPolicy.error:
                    raise UnexpectedEndOfInputError(template, length)
                out.append(template[i:])
                break
            out.append(_resolve_token(template[i + 1 : close], options))
            i = close + 1

        elif ch == "}":
            if i + 1 < length and template[i + 1] == "}":
                out.append("}")
                i += 2
                continue
            raise UnexpectedClosingBraceError(template, i)

        else:
            out.append(ch)
            i += 1

    result = "".join(out)
    logger.debug(f"Compiled template {template!r} -> {result!r}")
    return result


_compile_cached = lru_cache(maxsize=TEMPLATE_CACHE_SIZE)(_compile)


class TemplateTransformer:
    """Compiles color templates into str.format() templates.

    Each instance carries its own TransformOptions; compiled results are
    shared across instances with equal options.
    """

    def __init__(self, options: TransformOptions | None = None) -> None:
        """Initialize the transformer.

        Args:
            options: Transformer options. Defaults to TransformOptions.default().
        """
        self.options = options or TransformOptions.default()

    def transform(self, template: str) -> str:
        """Compile a template.

        Args:
            template: Template text with style tokens.

        Returns:
            The template with style tokens replaced by ANSI escape sequences
            and all other tokens left for str.format().

        Raises:
            TypeError: If template is not a str.
            UnexpectedEndOfInputError: If the template ends after "{" or
                inside an open token (unless the options allow pass-through).
            UnexpectedClosingBraceError: On a lone "}".
        """
        if not isinstance(template, str):
            raise TypeError(f"template must be str, not {type(template).__name__}")
        try:
            if self.options.cache:
                return _compile_cached(template, self.options)
            return _compile(template, self.options)
        except (UnexpectedEndOfInputError, UnexpectedClosingBraceError) as e:
            logger.debug(f"Rejected template: {e.message} at {e.position}")
            raise


_default_transformer = TemplateTransformer()


def transform(template: str, options: TransformOptions | None = None) -> str:
    """Compile a template with the given (or default) options.

    Example:
        >>> transform("{red}yes{reset}")
        '\\x1b[0;34;31myes\\x1b[0m'
    """
    if options is None:
        return _default_transformer.transform(template)
    return TemplateTransformer(options).transform(template)


def clear_cache() -> None:
    """Drop all memoized compiled templates."""
    _compile_cached.cache_clear()
