"""Exceptions raised by jsl-lint."""


class LintConfigError(ValueError):
    """Invalid input detected before the linter is started."""


class UnknownOptionError(LintConfigError):
    """An option name is not part of the JavaScript Lint option table."""

    def __init__(self, names: list[str]) -> None:
        self.names = sorted(names)
        joined = ", ".join(self.names)
        if len(self.names) == 1:
            message = f"There is no JavaScript Lint option called {joined}"
        else:
            message = f"There are no JavaScript Lint options called {joined}"
        super().__init__(message)
