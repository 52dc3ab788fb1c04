"""Domain enumerations for the form-handler application.

Enums represent fixed sets of domain values (e.g. global condition flags).
"""

from enum import IntEnum


class ConditionFlag(IntEnum):
    """Global tri-state condition stored in global/app ``condition``.

    GLOBAL_OFF disables the feature for every app, GLOBAL_ON enables it for
    every app, and DEFER_TO_APP uses the app's own boolean condition.
    """

    GLOBAL_OFF = 0
    GLOBAL_ON = 1
    DEFER_TO_APP = 2

    @classmethod
    def parse(cls, raw: object) -> "ConditionFlag":
        """Return the flag for a stored value; unknown or missing values disable the feature.

        Booleans are accepted as GLOBAL_ON/GLOBAL_OFF.
        """
        if isinstance(raw, bool):
            return cls.GLOBAL_ON if raw else cls.GLOBAL_OFF
        try:
            return cls(int(raw))  # type: ignore[call-overload]
        except (TypeError, ValueError):
            return cls.GLOBAL_OFF

    def resolve(self, app_condition: object) -> bool:
        """Return whether the feature is enabled given the app's own condition."""
        if self is ConditionFlag.GLOBAL_ON:
            return True
        if self is ConditionFlag.DEFER_TO_APP:
            return bool(app_condition)
        return False

    @classmethod
    def values(cls) -> list[int]:
        """Return all valid flag values."""
        return [flag.value for flag in cls]
