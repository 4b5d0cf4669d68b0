"""Colorful counterparts of print(), str.format() and file.write().

Each operation compiles its template with the color template transformer
and hands the result, with the caller's values untouched, to str.format().

    >>> cformat("the {red}bogeymen{reset} will get your {thing:underline}",
    ...         thing="teddy bears")
    '\\x1b[0;34;31mbogeymen\\x1b[0m will get your \\x1b[0m\\x1b[24mteddy bears\\x1b[0m'
"""

import io
import sys
from typing import Any, NoReturn

from comat.lib.errors import ComatPanic, TemplateError
from comat.lib.logging_config import get_logger
from comat.lib.transform import transform

logger = get_logger(__name__)


def _call_site(depth: int) -> str:
    frame = sys._getframe(depth + 1)
    return f"{frame.f_code.co_filename}:{frame.f_lineno}"


def _compile(template: str) -> str:
    """Compile a template, attributing errors to the user's call site.

    Only valid when called directly from a public façade function.
    """
    try:
        return transform(template)
    except TemplateError as e:
        # Skip this helper and the façade function itself
        e.with_call_site(_call_site(2))
        raise


class FormatArguments:
    """Lazily formatted arguments, produced by cformat_args().

    The compiled template and the values are stored as given; nothing is
    formatted until the object is converted to a string.
    """

    __slots__ = ("template", "args", "kwargs")

    def __init__(
        self, template: str, args: tuple[Any, ...], kwargs: dict[str, Any]
    ) -> None:
        self.template = template
        self.args = args
        self.kwargs = kwargs

    def __str__(self) -> str:
        return self.template.format(*self.args, **self.kwargs)

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)

    def __repr__(self) -> str:
        return f"FormatArguments({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FormatArguments):
            return str(self) == str(other)
        if isinstance(other, str):
            return str(self) == other
        return NotImplemented

    # Unhashable: rendering depends on values that may change
    __hash__ = None  # type: ignore[assignment]


def comat(template: str) -> str:
    """Return the compiled template without interpolating any values."""
    return _compile(template)


def cformat(template: str, /, *args: Any, **kwargs: Any) -> str:
    """Format text, colorfully.

    Args:
        template: Color template, e.g. "{green}{count}{reset} passed".
        *args: Positional values for "{}" / "{0}" placeholders.
        **kwargs: Keyword values for "{name}" placeholders.

    Returns:
        The rendered string with ANSI escape sequences.

    Raises:
        TemplateError: If the template is malformed.
    """
    return _compile(template).format(*args, **kwargs)


def cformat_args(template: str, /, *args: Any, **kwargs: Any) -> FormatArguments:
    """Compile a template now and format it when the result is used."""
    return FormatArguments(_compile(template), args, kwargs)


def cprint(template: str, /, *args: Any, **kwargs: Any) -> None:
    """Print text, colorfully, to stdout, without a trailing newline."""
    print(_compile(template).format(*args, **kwargs), end="")


def cprintln(template: str, /, *args: Any, **kwargs: Any) -> None:
    """Print text, colorfully, to stdout, followed by a newline.

    Args:
        template: Color template.
        *args: Positional values for the template.
        **kwargs: Keyword values for the template.
    """
    print(_compile(template).format(*args, **kwargs))


def cpanic(template: str, /, *args: Any, **kwargs: Any) -> NoReturn:
    """Abort with a colorful message.

    Raises:
        ComatPanic: Always, carrying the rendered message.
        TemplateError: If the template is malformed.
    """
    message = _compile(template).format(*args, **kwargs)
    logger.debug(f"Panicking with message {message!r}")
    raise ComatPanic(message)


def _write(sink: Any, text: str) -> int:
    if isinstance(sink, bytearray):
        data = text.encode("utf-8")
        sink.extend(data)
        return len(data)
    if isinstance(sink, (io.RawIOBase, io.BufferedIOBase)):
        return sink.write(text.encode("utf-8"))
    return sink.write(text)


def cwrite(sink: Any, template: str, /, *args: Any, **kwargs: Any) -> int:
    """Write to a stream or buffer colorfully, with no newline.

    Args:
        sink: Text stream, binary stream, or bytearray. Binary sinks
            receive UTF-8.
        template: Color template.
        *args: Positional values for the template.
        **kwargs: Keyword values for the template.

    Returns:
        Whatever the sink's write() returned (characters or bytes written);
        for a bytearray, the number of bytes appended.

    Raises:
        TemplateError: If the template is malformed.
        OSError: Propagated from the sink.
    """
    return _write(sink, _compile(template).format(*args, **kwargs))


def cwriteln(sink: Any, template: str, /, *args: Any, **kwargs: Any) -> int:
    """Write to a stream or buffer colorfully, with a trailing newline."""
    return _write(sink, _compile(template).format(*args, **kwargs) + "\n")
