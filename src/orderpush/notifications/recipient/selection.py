"""Best-token selection for a push token registry entry.

Registry entries were written by several generations of the mobile apps, so a
device may be stored under any of a handful of fields. Exactly one token is
picked per entry by walking ``TOKEN_RULES`` in order; the first rule that
matches wins.
"""

from dataclasses import dataclass, field

# Native FCM registration tokens are far longer than this
NATIVE_TOKEN_MIN_LENGTH = 21


@dataclass(frozen=True)
class TokenRule:
    """Take ``entry[field_name]`` when it is a string of at least ``min_length``
    characters and every ``requires`` field holds the expected value."""

    field_name: str
    min_length: int = 0
    requires: dict = field(default_factory=dict)

    def extract(self, entry: dict) -> str | None:
        if any(entry.get(key) != expected for key, expected in self.requires.items()):
            return None
        value = entry.get(self.field_name)
        if not isinstance(value, str) or len(value) < self.min_length:
            return None
        return value


TOKEN_RULES: tuple[TokenRule, ...] = (
    TokenRule("deviceToken", min_length=NATIVE_TOKEN_MIN_LENGTH),
    TokenRule("fcmToken", min_length=NATIVE_TOKEN_MIN_LENGTH),
    TokenRule("token", min_length=NATIVE_TOKEN_MIN_LENGTH, requires={"tokenType": "fcm"}),
    TokenRule("expoToken"),
    TokenRule("token"),
)


def pick_best_token(entry: dict | None, rules: tuple[TokenRule, ...] = TOKEN_RULES) -> str | None:
    """Return the token selected by the first matching rule, or None.

    A string matched by a rule without a length bound is returned as-is, even
    when blank; callers drop blank selections.
    """
    entry = entry or {}
    for rule in rules:
        token = rule.extract(entry)
        if token is not None:
            return token
    return None
