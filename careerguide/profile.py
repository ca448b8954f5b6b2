"""The user's profile: name, interests and skills."""

from __future__ import annotations

from dataclasses import dataclass, field


def split_items(text: str) -> list[str]:
    """Split comma-separated input; blank input gives an empty list.

    Only the input as a whole is trimmed, the individual items keep their
    surrounding whitespace.
    """
    text = text.strip()
    if not text:
        return []
    return text.split(",")


@dataclass
class Profile:
    """A single user profile."""

    name: str = ""
    interests: list[str] = field(default_factory=list)
    skills: list[str] = field(default_factory=list)
    id: int = 1

    def has_details(self) -> bool:
        """True when the profile holds any interests or skills."""
        return bool(self.interests or self.skills)

    def add_details(self, interests: str, skills: str) -> None:
        """Append comma-separated interests and skills; blank input is ignored."""
        self.interests.extend(split_items(interests))
        self.skills.extend(split_items(skills))

    def replace_details(self, interests: str, skills: str) -> None:
        """Replace interests and skills; blank input keeps the current values."""
        new_interests = split_items(interests)
        if new_interests:
            self.interests = new_interests
        new_skills = split_items(skills)
        if new_skills:
            self.skills = new_skills