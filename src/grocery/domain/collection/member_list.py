"""MemberList — the membership roster."""

from __future__ import annotations

from typing import Iterator

from grocery.domain.model.member import Member


class MemberList:

    def __init__(self, members: list[Member] | None = None, sequence: int = 0) -> None:
        self._members: dict[str, Member] = {}
        self._sequence = sequence
        for member in members or []:
            self.add_member(member)

    @property
    def sequence(self) -> int:
        """Number of member ids issued so far."""
        return self._sequence

    def next_id(self) -> str:
        self._sequence += 1
        return f"M{self._sequence}"

    def add_member(self, member: Member) -> bool:
        if member.id in self._members:
            return False
        self._members[member.id] = member
        return True

    def remove_member(self, member_id: str) -> bool:
        return self._members.pop(member_id, None) is not None

    def search(self, member_id: str) -> Member | None:
        return self._members.get(member_id)

    def search_by_name(self, name: str) -> Member | None:
        """Exact-match lookup; the first member enrolled under the name wins."""
        for member in self._members.values():
            if member.name == name:
                return member
        return None

    def __iter__(self) -> Iterator[Member]:
        return iter(list(self._members.values()))

    def __len__(self) -> int:
        return len(self._members)
