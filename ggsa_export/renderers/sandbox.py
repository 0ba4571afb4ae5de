"""Security policy for export templates.

Export templates can be supplied by plugins, so they render in a jinja2
sandbox. On top of the sandbox defaults (no underscore attributes, no
internal callables) the export policy forbids mutating domain objects and
reading user secrets.
"""

import logging
from typing import Any, FrozenSet

from jinja2.sandbox import SandboxedEnvironment

from ggsa_export.models.base import BaseDataModel
from ggsa_export.models.entities import User

logger = logging.getLogger(__name__)


class ExportPolicy:
    """Decides which attributes an export template may read or call.

    Attributes:
        mutator_verbs: Verbs whose methods (`set_x`, `add_x`, ...) are denied
            on domain objects
        internal_prefix: Prefix of the pydantic model API, denied on domain
            objects
        sensitive_user_attributes: User attributes denied outright
    """

    mutator_verbs = ("set", "add", "remove")
    internal_prefix = "model_"
    sensitive_user_attributes: FrozenSet[str] = frozenset(
        {
            "api_token",
            "password",
            "password_hash",
            "plain_password",
            "confirmation_token",
            "totp_secret",
        }
    )

    def is_attribute_allowed(self, obj: Any, attr: str) -> bool:
        """Check whether ``obj.attr`` may be used by a template.

        Args:
            obj: Object the template accesses
            attr: Attribute name

        Returns:
            False for mutators and pydantic internals on domain objects, and
            for secrets on users; True otherwise
        """
        if isinstance(obj, User) and attr.lower() in self.sensitive_user_attributes:
            return False
        if isinstance(obj, BaseDataModel) and self._is_mutator_or_internal(attr):
            return False
        return True

    def _is_mutator_or_internal(self, attr: str) -> bool:
        name = attr.lower()
        if name.startswith(self.internal_prefix):
            return True
        for verb in self.mutator_verbs:
            if name.startswith(verb):
                rest = attr[len(verb):]
                # set, set_alias and setAlias; not settings or address
                if not rest or rest[0] == "_" or rest[0].isupper():
                    return True
        return False


class ExportSandboxedEnvironment(SandboxedEnvironment):
    """Sandboxed jinja2 environment enforcing an ExportPolicy."""

    def __init__(self, *args, policy: ExportPolicy = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.policy = policy or ExportPolicy()

    def is_safe_attribute(self, obj: Any, attr: str, value: Any) -> bool:
        if not super().is_safe_attribute(obj, attr, value):
            return False
        if not self.policy.is_attribute_allowed(obj, attr):
            logger.warning(
                f"Template access to {type(obj).__name__}.{attr} denied by export policy"
            )
            return False
        return True
