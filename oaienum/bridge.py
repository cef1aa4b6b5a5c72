"""Conversions between an enum and a structurally identical remote enum."""

from collections.abc import Iterable, Mapping
from typing import Any

from .errors import ValidationError


def check_variant_sets(
    local_name: str,
    local_identifiers: Iterable[str],
    remote_name: str,
    remote_identifiers: Iterable[str],
) -> None:
    """Require both enums to declare exactly the same variant identifiers."""
    local_ids = list(local_identifiers)
    remote_ids = list(remote_identifiers)
    missing = [i for i in local_ids if i not in remote_ids]
    extra = [i for i in remote_ids if i not in local_ids]

    problems: list[str] = []
    if missing:
        problems.append(f"missing from {remote_name}: {', '.join(missing)}")
    if extra:
        problems.append(f"missing from {local_name}: {', '.join(extra)}")
    if problems:
        raise ValidationError(
            f"{local_name} and remote {remote_name} declare different variants ("
            + "; ".join(problems)
            + ")"
        )


class RemoteBridge:
    """One-to-one mapping between local and remote members by identifier."""

    def __init__(
        self,
        local_name: str,
        local_members: Mapping[str, Any],
        remote_name: str,
        remote_members: Mapping[str, Any],
    ) -> None:
        check_variant_sets(local_name, local_members, remote_name, remote_members)
        self._to_remote = {
            member: remote_members[identifier] for identifier, member in local_members.items()
        }
        self._from_remote = {
            member: local_members[identifier] for identifier, member in remote_members.items()
        }

    def to_remote(self, value: Any) -> Any:
        return self._to_remote[value]

    def from_remote(self, value: Any) -> Any:
        return self._from_remote[value]
