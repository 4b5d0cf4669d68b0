"""Custom exception hierarchy for comat template compilation and output."""


class ComatError(Exception):
    """Base exception for all comat errors.

    All comat-specific exceptions inherit from this class, enabling
    centralized exception handling by callers.
    """

    pass


class TemplateError(ComatError):
    """Exception raised when a color template cannot be compiled.

    The transform never produces partial output: when this is raised the
    whole template is rejected.

    Attributes:
        template: The template that failed to compile
        position: Index of the offending character (len(template) at end of input)
        message: Short description of the problem
        call_site: "filename:lineno" of the formatting call, when known
    """

    default_message = "malformed template"

    def __init__(
        self,
        template: str,
        position: int,
        message: str | None = None,
    ) -> None:
        """Initialize TemplateError with the template and failure position.

        Args:
            template: Template text that was being compiled
            position: Index in the template where compilation failed
            message: Optional override for the default message
        """
        self.template = template
        self.position = position
        self.message = message or self.default_message
        self.call_site: str | None = None
        super().__init__(self._render())

    def _render(self) -> str:
        location = f" (called from {self.call_site})" if self.call_site else ""
        return (
            f"Template error at position {self.position}: {self.message}"
            f"{location}\n"
            f"  Template: {self.template!r}"
        )

    def with_call_site(self, call_site: str) -> "TemplateError":
        """Attach the call site of the formatting operation.

        Args:
            call_site: Location string such as "app.py:12"

        Returns:
            The same exception, with its message updated.
        """
        self.call_site = call_site
        self.args = (self._render(),)
        return self


class UnexpectedEndOfInputError(TemplateError):
    """Raised when a template ends right after "{" or inside an open token."""

    default_message = "unexpected end of input"


class UnexpectedClosingBraceError(TemplateError):
    """Raised when a "}" appears outside a token and is not part of "}}"."""

    default_message = "unexpected closing brace"


class ComatPanic(ComatError):
    """Exception raised by cpanic() with the rendered, colored message.

    Attributes:
        message: The formatted message, ANSI sequences included
    """

    def __init__(self, message: str) -> None:
        """Create a panic carrying the formatted message."""
        self.message = message
        super().__init__(message)
