from enum import Enum
from typing import Union

from ..exceptions import ConfigurationError


class WritePolicy(str, Enum):
    """Order in which a layered cache runs put and delete across its layers"""

    # Deepest layer first. Default, since the last layer is usually the most
    # persistent one (e.g. a database)
    DEEP_FIRST = "DEEP_FIRST"
    # Shallowest layer first, often the least persistent (e.g. process memory)
    SHALLOW_FIRST = "SHALLOW_FIRST"

    @classmethod
    def parse(cls, value: Union["WritePolicy", str]) -> "WritePolicy":
        """
        Resolve a policy from an enum member or its string value.

        Args:
            value: WritePolicy or a string such as "DEEP_FIRST" / "shallow_first"

        Returns:
            Matching WritePolicy

        Raises:
            ConfigurationError: If the value names no known policy
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            normalized = value.strip().upper().replace("-", "_")
            for policy in cls:
                if policy.value == normalized:
                    return policy
        raise ConfigurationError(
            f"unrecognized write policy: {value!r}",
            config_key="write_policy",
            config_value=value,
        )
