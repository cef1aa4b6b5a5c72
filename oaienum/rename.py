"""Case conversion rules for variant names."""

import re
from enum import StrEnum

from .errors import ValidationError

# Words are runs of capitals not followed by lowercase (acronyms), a
# capitalised or lowercase word, or a bare number. Digits stay attached to
# the word they follow.
_WORD = re.compile(r"[A-Z]+(?![a-z])\d*|[A-Z]?[a-z]+\d*|\d+")


class RenameRule(StrEnum):
    """Rules that can be applied to every variant of an enum."""

    LOWERCASE = "lowercase"
    UPPERCASE = "UPPERCASE"
    PASCAL_CASE = "PascalCase"
    CAMEL_CASE = "camelCase"
    SNAKE_CASE = "snake_case"
    SCREAMING_SNAKE_CASE = "SCREAMING_SNAKE_CASE"
    KEBAB_CASE = "kebab-case"
    SCREAMING_KEBAB_CASE = "SCREAMING-KEBAB-CASE"

    @classmethod
    def parse(cls, name: "str | RenameRule | None") -> "RenameRule | None":
        """Look up a rule by its name, raising ValidationError if unknown."""
        if name is None or isinstance(name, RenameRule):
            return name
        try:
            return cls(name)
        except ValueError:
            raise ValidationError(
                f"Unknown rename rule '{name}'. "
                f"Expected one of: {', '.join(r.value for r in cls)}"
            ) from None

    def apply(self, identifier: str) -> str:
        if self is RenameRule.LOWERCASE:
            return identifier.lower()
        if self is RenameRule.UPPERCASE:
            return identifier.upper()

        words = split_words(identifier)
        if self is RenameRule.PASCAL_CASE:
            return "".join(_capitalize(w) for w in words)
        if self is RenameRule.CAMEL_CASE:
            if not words:
                return identifier
            return words[0].lower() + "".join(_capitalize(w) for w in words[1:])
        if self is RenameRule.SNAKE_CASE:
            return "_".join(w.lower() for w in words)
        if self is RenameRule.SCREAMING_SNAKE_CASE:
            return "_".join(w.upper() for w in words)
        if self is RenameRule.KEBAB_CASE:
            return "-".join(w.lower() for w in words)
        return "-".join(w.upper() for w in words)


def split_words(identifier: str) -> list[str]:
    """Split an identifier into words on case changes, underscores and dashes."""
    return _WORD.findall(identifier)


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


def apply_rename_rule(rule: RenameRule | None, identifier: str) -> str:
    """Apply an optional rule to a variant identifier."""
    if rule is None:
        return identifier
    return rule.apply(identifier)
