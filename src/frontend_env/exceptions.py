"""Custom exceptions for frontend environment validation."""

from pydantic import ValidationError


class ConfigurationError(Exception):
    """Raised when the environment does not satisfy the configuration schema.

    Carries every failing field, not just the first, so an operator can fix
    all of them in one pass.
    """

    def __init__(self, problems: list[tuple[str, str]]) -> None:
        self.problems = problems
        lines = [f"  {name}: {problem}" for name, problem in problems]
        super().__init__("Invalid environment configuration:\n" + "\n".join(lines))

    @classmethod
    def from_validation_error(
        cls,
        exc: ValidationError,
        env_names: dict[str, str] | None = None,
    ) -> "ConfigurationError":
        """Convert a pydantic ValidationError into a ConfigurationError.

        Args:
            exc: The error raised while validating the settings model.
            env_names: Maps field names to environment variable names, so
                problems are reported by the variable the operator sets.

        Returns:
            A ConfigurationError with one problem per error entry.
        """
        env_names = env_names or {}
        problems = []
        for error in exc.errors():
            loc = error["loc"]
            key = str(loc[0]) if loc else "<root>"
            name = env_names.get(key, key)
            if error["type"] == "missing":
                message = "is required but not set"
            else:
                message = error["msg"].removeprefix("Value error, ")
            problems.append((name, message))
        return cls(problems)
