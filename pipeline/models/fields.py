"""
Field Model: structured intent for one generation cycle.

Every field is optional and defaults to empty so the request builder stays
total. The models are frozen; a new cycle gets a new instance.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


LEAVE_REQUEST = "Leave Request"
OTHER = "Other"

COMMON_REASONS = [
    "Meeting Request",
    "Project Update",
    "Thank You",
    "Inquiry",
    "Follow-up",
    LEAVE_REQUEST,
]

LEAVE_REASONS = [
    "Vacation",
    "Sick Leave",
    "Personal Emergency",
    "Family Event",
    "Medical Appointment",
    OTHER,
]


class Tone(str, Enum):
    """Tone requested for the email."""
    OFFICIAL = "Official"
    UNOFFICIAL = "Unofficial"
    FRIENDLY = "Friendly"
    FORMAL = "Formal"


class Honorific(str, Enum):
    """How the recipient should be addressed in the salutation."""
    SIR = "Sir"
    MADAM = "Madam"
    MR = "Mr."
    MS = "Ms."
    DR = "Dr."
    NAME = "Name"
    OTHER = OTHER

    @classmethod
    def _missing_(cls, value):
        # Accept the undotted spellings Mr, Ms and Dr
        if isinstance(value, str):
            for member in (cls.MR, cls.MS, cls.DR):
                if member.value.rstrip(".").lower() == value.strip().rstrip(".").lower():
                    return member
        return None


class Relationship(str, Enum):
    """Sender's relationship to the recipient."""
    KNOWN = "Known"
    SENIOR = "Senior"
    JUNIOR = "Junior"
    PEER = "Peer"
    UNKNOWN = "Unknown"


def _value(member: Optional[Enum]) -> str:
    return member.value if member is not None else ""


class _FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    @field_validator("*", mode="before")
    @classmethod
    def blank_to_none(cls, v, info):
        """Form selects post "" for 'nothing chosen'; enum fields treat that as None."""
        field = cls.model_fields[info.field_name]
        if v == "" and field.default is None:
            return None
        if v is None and isinstance(field.default, str):
            return ""
        return v


class Sender(_FrozenModel):
    name: str = ""


class Intent(_FrozenModel):
    reason: str = ""
    tone: Optional[Tone] = None

    @property
    def is_leave_request(self) -> bool:
        return self.reason == LEAVE_REQUEST

    @property
    def tone_value(self) -> str:
        return _value(self.tone)


class Recipient(_FrozenModel):
    label: str = Field(default="", description="Recipient name or title as typed by the user")
    honorific: Optional[Honorific] = None
    honorific_other: str = Field(default="", description="Used only when honorific is Other")
    relationship: Optional[Relationship] = None

    @property
    def resolved_honorific(self) -> str:
        """Honorific as it should appear in the request, with the free-text variant substituted."""
        if self.honorific is Honorific.OTHER:
            return self.honorific_other
        return _value(self.honorific)

    @property
    def relationship_value(self) -> str:
        return _value(self.relationship)


class LeaveDetails(_FrozenModel):
    start_date: str = ""
    end_date: str = ""
    reason: str = ""
    reason_other: str = Field(default="", description="Used only when reason is Other")

    @property
    def resolved_reason(self) -> str:
        if self.reason == OTHER:
            return self.reason_other
        return self.reason


class Footer(_FrozenModel):
    enabled: bool = False
    text: str = ""


class Modifiers(_FrozenModel):
    has_attachment: bool = False
    footer: Footer = Field(default_factory=Footer)


class Freeform(_FrozenModel):
    other_preferences: str = ""


class EmailFields(_FrozenModel):
    """
    Everything the user supplied for one generation cycle.

    Leave details are only consulted when ``intent.reason`` is
    "Leave Request"; missing values are interpolated as empty strings.
    """

    sender: Sender = Field(default_factory=Sender)
    intent: Intent = Field(default_factory=Intent)
    recipient: Recipient = Field(default_factory=Recipient)
    leave: LeaveDetails = Field(default_factory=LeaveDetails)
    modifiers: Modifiers = Field(default_factory=Modifiers)
    freeform: Freeform = Field(default_factory=Freeform)

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        json_schema_extra={
            "example": {
                "sender": {"name": "Alex"},
                "intent": {"reason": "Leave Request", "tone": "Formal"},
                "recipient": {"label": "Manager", "honorific": "Sir", "relationship": "Senior"},
                "leave": {"start_date": "2024-05-01", "end_date": "2024-05-03", "reason": "Vacation"},
                "modifiers": {"has_attachment": False, "footer": {"enabled": False, "text": ""}},
                "freeform": {"other_preferences": "Keep it short"},
            }
        },
    )
