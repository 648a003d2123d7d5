"""Line label matching for the target route."""

import re
from dataclasses import dataclass, field


@dataclass(frozen=True)
class LineFilter:
    """Matches upstream line labels against the route's line code.

    Feeds format the code inconsistently, so a label matches when it contains
    the code ("R7"), contains the code with a space before the digit ("R 7"),
    or equals one of the aliases ("RE7"). All comparisons ignore case.
    """

    line_code: str
    aliases: list[str] = field(default_factory=list)

    @property
    def spaced_code(self) -> str:
        """Line code with a space inserted before its first digit."""
        return re.sub(r"(?<=[^\d\s])(?=\d)", " ", self.line_code.upper(), count=1)

    def matches(self, line_label: str | None) -> bool:
        """Whether a line label belongs to the target route."""
        label = (line_label or "").upper()
        if not label:
            return False
        code = self.line_code.upper()
        if code in label or self.spaced_code in label:
            return True
        return label in {alias.upper() for alias in self.aliases}
