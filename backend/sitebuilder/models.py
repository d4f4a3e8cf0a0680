import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import Literal, Optional

from sqlalchemy import DateTime, Text
from sqlmodel import Field, Relationship, SQLModel


def get_datetime_utc() -> datetime:
    return datetime.now(timezone.utc)


class WebsiteStatus(str, Enum):
    DRAFT = "draft"
    PUBLISHED = "published"


# Sections

class SectionBase(SQLModel):
    name: str = Field(min_length=1, sa_type=Text)  # type: ignore
    content: str = Field(sa_type=Text)  # type: ignore


class Section(SectionBase, table=True):
    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    # Insertion index; display only, never recomputed after creation.
    order: int = Field(default=0)
    website_id: uuid.UUID | None = Field(
        default=None, foreign_key="website.id", nullable=False, ondelete="CASCADE"
    )
    website: Optional["Website"] = Relationship(back_populates="sections")
    created_at: datetime | None = Field(
        default_factory=get_datetime_utc,
        sa_type=DateTime(timezone=True),  # type: ignore
    )
    updated_at: datetime | None = Field(
        default_factory=get_datetime_utc,
        sa_type=DateTime(timezone=True),  # type: ignore
    )


class SectionPublic(SectionBase):
    order: int


# Websites

class WebsiteBase(SQLModel):
    name: str = Field(min_length=1, sa_type=Text)  # type: ignore
    description: str = Field(sa_type=Text)  # type: ignore
    other_details: str = Field(sa_type=Text)  # type: ignore


class WebsiteCreate(SQLModel):
    # Presence is checked by crud.create_website so blanks surface as 400, not 422.
    name: str | None = None
    description: str | None = None
    other_details: str | None = None


class Website(WebsiteBase, table=True):
    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    status: WebsiteStatus = Field(default=WebsiteStatus.DRAFT)
    created_at: datetime | None = Field(
        default_factory=get_datetime_utc,
        sa_type=DateTime(timezone=True),  # type: ignore
    )
    updated_at: datetime | None = Field(
        default_factory=get_datetime_utc,
        sa_type=DateTime(timezone=True),  # type: ignore
    )
    sections: list[Section] = Relationship(
        back_populates="website",
        cascade_delete=True,
        sa_relationship_kwargs={"order_by": "Section.order"},
    )

    def get_section(self, name: str) -> Section | None:
        for section in self.sections:
            if section.name == name:
                return section
        return None

    def upsert_section(self, name: str, content: str) -> list[Section]:
        """
        Insert or update a section keyed by name.

        An existing section keeps its `order` and only has its content replaced;
        a new one is appended with `order` equal to the current section count.
        """
        now = get_datetime_utc()
        section = self.get_section(name)
        if section is not None:
            section.content = content
            section.updated_at = now
        else:
            self.sections.append(
                Section(name=name, content=content, order=len(self.sections))
            )
        self.updated_at = now
        return self.sections

    def transition_to_published(self) -> None:
        if self.status != WebsiteStatus.PUBLISHED:
            self.status = WebsiteStatus.PUBLISHED
            self.updated_at = get_datetime_utc()

    @property
    def is_published(self) -> bool:
        return self.status == WebsiteStatus.PUBLISHED


class WebsitePublic(WebsiteBase):
    id: uuid.UUID
    status: WebsiteStatus
    created_at: datetime | None = None
    updated_at: datetime | None = None


class WebsiteWithSections(WebsitePublic):
    sections: list[SectionPublic] = []


# Request / response payloads

class SuggestDetailsRequest(SQLModel):
    name: str | None = None
    description: str | None = None


class SuggestDetailsResponse(SQLModel):
    suggestion: str


class GenerateSectionRequest(SQLModel):
    section_name: str | None = None


class GenerateSectionResponse(SQLModel):
    section: str
    content: str


class UpdateSectionRequest(SQLModel):
    section_name: str | None = None
    new_content: str | None = None


class SuccessResponse(SQLModel):
    success: bool = True


class PublishResponse(SuccessResponse):
    status: Literal["published"] = "published"


class ChatRequest(SQLModel):
    message: str | None = None


class ChatResponse(SQLModel):
    reply: str


# Anonymous viewer payloads

class ComingSoonView(SQLModel):
    status: Literal["coming_soon"] = "coming_soon"
    message: str = "Coming Soon"
    description: str = "This website is currently under development and will be available soon."


class PublishedView(SQLModel):
    status: Literal["published"] = "published"
    website: WebsiteWithSections


class NotFoundView(SQLModel):
    error: str = "Website Not Found"
    message: str = "The requested website could not be found."


ViewPayload = ComingSoonView | PublishedView | NotFoundView
