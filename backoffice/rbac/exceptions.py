"""RBAC integrity errors.

These signal a data-consistency bug (a role or key that is not part of the
closed registry), never an ordinary "not allowed" answer.
"""


class RBACError(Exception):
    """Base class for every RBAC integrity error."""

    code = "rbac_error"


class UnknownRoleError(RBACError):
    code = "unknown_role"

    def __init__(self, role):
        self.role = role
        super().__init__(f"Unknown role: {role!r}")


class UnknownPermissionError(RBACError):
    code = "unknown_permission"

    def __init__(self, key):
        self.key = key
        super().__init__(f"Unknown permission key: {key!r}")


class IncompletePermissionSetError(RBACError):
    code = "incomplete_permission_set"

    def __init__(self, owner: str, missing=(), extra=()):
        self.missing = tuple(missing)
        self.extra = tuple(extra)
        parts = []
        if self.missing:
            parts.append(f"missing {', '.join(str(m) for m in self.missing)}")
        if self.extra:
            parts.append(f"unexpected {', '.join(str(e) for e in self.extra)}")
        super().__init__(f"Incomplete definition for {owner}: {'; '.join(parts)}")
