"""Profile document schemas.

Wire names are camelCase (``avatarUrl``, ``imageUrl``); attributes stay
snake_case.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

LinkType = Literal["github", "twitter", "linkedin", "instagram", "youtube", "blog", "website", "email"]


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Skill(CamelModel):
    name: str
    icon: str = ""
    level: int = Field(default=0, ge=0, le=100)


class Project(CamelModel):
    title: str
    description: str = ""
    url: str = ""
    image_url: str = ""
    tags: list[str] = []

    @field_validator("tags")
    @classmethod
    def dedupe_tags(cls, v: list[str]) -> list[str]:
        """Tags are a set; keep the first occurrence of each."""
        return list(dict.fromkeys(v))


class Link(CamelModel):
    type: LinkType
    label: str = ""
    url: str


class Contact(CamelModel):
    email: str = ""
    location: str = ""


class ProfileDocument(CamelModel):
    """The public homepage content."""

    name: str
    title: str = ""
    bio: str = ""
    avatar_url: str = ""
    about: str = ""
    skills: list[Skill] = []
    projects: list[Project] = []
    links: list[Link] = []
    contact: Contact = Field(default_factory=Contact)

    def to_document(self) -> dict:
        """Serialize to the stored JSON form."""
        return self.model_dump(mode="json", by_alias=True)


class ProfileUpdate(CamelModel):
    """
    Partial profile update.

    Every field is optional here; only the fields the caller actually sent are
    merged. ``name`` is still required by the service, which reports a clearer
    error than schema validation would.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    name: str | None = None
    title: str | None = None
    bio: str | None = None
    avatar_url: str | None = None
    about: str | None = None
    skills: list[Skill] | None = None
    projects: list[Project] | None = None
    links: list[Link] | None = None
    contact: Contact | None = None

    def to_partial(self) -> dict:
        """Top-level keys the caller supplied, in stored JSON form. Nulls count as absent."""
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True, exclude_none=True)


class ProfileUpdateResponse(BaseModel):
    message: str
    profile: ProfileDocument


DEFAULT_PROFILE = ProfileDocument(
    name="Your Name",
    title="Creative Developer",
    bio="Welcome to my personal space. I create digital experiences.",
    avatar_url="https://api.dicebear.com/7.x/avataaars/svg?seed=homepage",
    about=(
        "Passionate about technology and focused on building great digital experiences. "
        "Good design and good code can make the world a better place."
    ),
    skills=[
        Skill(name="JavaScript", icon="🟨", level=90),
        Skill(name="React", icon="⚛️", level=85),
        Skill(name="Node.js", icon="💚", level=80),
        Skill(name="Python", icon="🐍", level=75),
        Skill(name="UI/UX", icon="🎨", level=70),
    ],
    projects=[
        Project(
            title="Personal Homepage",
            description="A modern personal showcase page with a liquid glass look.",
            url="#",
            image_url="https://images.unsplash.com/photo-1460925895917-afdab827c52f?w=400",
            tags=["React", "Node.js", "CSS"],
        )
    ],
    links=[
        Link(type="github", label="GitHub", url="https://github.com"),
        Link(type="twitter", label="Twitter", url="https://twitter.com"),
        Link(type="email", label="Email", url="mailto:hello@example.com"),
    ],
    contact=Contact(email="hello@example.com", location="Earth"),
)
