"""State groups for the submission workflow."""

from dataclasses import asdict, dataclass, field, fields
from decimal import Decimal
from enum import StrEnum
from typing import Any

from osfinder.core.enums import SubmissionPlan


class SubmissionState(StrEnum):
    EDITING = "editing"
    DUPLICATE_CHECKING = "duplicate_checking"
    DUPLICATE_BLOCKED = "duplicate_blocked"
    DUPLICATE_CLEAR = "duplicate_clear"
    PAYMENT_PENDING = "payment_pending"
    SUBMITTING = "submitting"
    SUBMITTED = "submitted"
    FAILED = "failed"


# Local previews of images the user picked; never sent or persisted.
TRANSIENT_FIELDS = ("icon_preview", "screenshot_previews")


@dataclass
class FormFields:
    name: str = ""
    short_description: str = ""
    description: str = ""
    long_description: str | None = None
    icon_url: str | None = None
    website: str = ""
    github: str = ""
    license: str = ""
    is_self_hosted: bool = False
    screenshots: list[str] = field(default_factory=list)
    category_ids: list[str] = field(default_factory=list)
    tag_ids: list[str] = field(default_factory=list)
    tech_stack_ids: list[str] = field(default_factory=list)
    alternative_to_ids: list[str] = field(default_factory=list)
    submitter_name: str | None = None
    submitter_email: str | None = None

    icon_preview: str | None = None
    screenshot_previews: list[str] = field(default_factory=list)

    @classmethod
    def field_names(cls) -> set[str]:
        return {f.name for f in fields(cls)}

    def to_payload(self) -> dict[str, Any]:
        """Persistable/submittable fields only."""
        data = asdict(self)
        for name in TRANSIENT_FIELDS:
            data.pop(name, None)
        return data

    @classmethod
    def from_payload(cls, data: dict[str, Any]) -> "FormFields":
        """Build from an API payload, ignoring unknown and transient keys."""
        known = cls.field_names() - set(TRANSIENT_FIELDS)
        return cls(**{k: v for k, v in data.items() if k in known and v is not None})


@dataclass
class DraftMeta:
    draft_id: str | None = None
    last_saved_at: str | None = None


@dataclass
class PaymentMeta:
    """Plan selection plus whichever requirement the plan carries.

    Free needs a verified backlink, sponsor needs a capture id. Switching plan
    clears the other plan's state so both are never active together.
    """

    plan: SubmissionPlan = SubmissionPlan.FREE

    backlink_verified: bool = False
    backlink_url: str | None = None
    backlink_message: str | None = None

    coupon_code: str | None = None
    coupon_message: str | None = None
    amount: Decimal | None = None
    in_progress: bool = False
    capture_id: str | None = None

    def clear_backlink(self) -> None:
        self.backlink_verified = False
        self.backlink_url = None
        self.backlink_message = None

    def clear_payment(self) -> None:
        self.coupon_code = None
        self.coupon_message = None
        self.amount = None
        self.in_progress = False
        self.capture_id = None

    @property
    def paid(self) -> bool:
        return bool(self.capture_id)


@dataclass
class AuthMeta:
    signed_in: bool = False
    user_id: str | None = None
    email: str | None = None
    full_name: str | None = None


@dataclass
class DuplicateMeta:
    """Cached duplicate-check result, valid until name or GitHub URL change."""

    checked: bool = False
    duplicate: bool = False
    reasons: list[str] = field(default_factory=list)
    existing: dict[str, Any] | None = None
    claimable: bool = False

    def invalidate(self) -> None:
        self.checked = False
        self.duplicate = False
        self.reasons = []
        self.existing = None
        self.claimable = False

    def record(self, result: dict[str, Any]) -> None:
        self.checked = True
        self.duplicate = bool(result.get("duplicate"))
        self.reasons = list(result.get("reasons") or [])
        self.existing = result.get("existing")
        self.claimable = bool(result.get("claimable"))
