"""Client-side submission workflow.

Drives the multi-step submission form against the directory API:

    EDITING -> DUPLICATE_CHECKING -> DUPLICATE_BLOCKED | DUPLICATE_CLEAR
            -> PAYMENT_PENDING (sponsor only) -> SUBMITTING -> SUBMITTED | FAILED

Every public coroutine is a user action: a WorkflowError never escapes it.
The error is recorded on `error` / `last_error`, in-flight states fall back
to the state the action started from, and the action returns None.
Draft operations never change the state.
"""

import functools
import logging
from decimal import Decimal
from typing import Any

from osfinder.client.directory import DirectoryClient
from osfinder.client.errors import (
    AuthenticationRequiredError,
    DuplicateError,
    PaymentRequiredError,
    ValidationError,
    WorkflowError,
)
from osfinder.core.enums import SubmissionPlan
from osfinder.services.payments import Quote, apply_coupon
from osfinder.workflow.state import (
    AuthMeta,
    DraftMeta,
    DuplicateMeta,
    FormFields,
    PaymentMeta,
    SubmissionState,
)


logger = logging.getLogger(__name__)

SPONSOR_PRODUCT = "sponsor_submission"

# Same order the server checks them in.
REQUIRED_FIELDS = ("name", "short_description", "description", "website", "github", "license")

_IN_FLIGHT = (SubmissionState.DUPLICATE_CHECKING, SubmissionState.SUBMITTING)


def user_action(method):
    """Record WorkflowErrors instead of raising them."""

    @functools.wraps(method)
    async def wrapper(self: "SubmissionWorkflow", *args, **kwargs):
        before = self.state
        self.error = None
        try:
            return await method(self, *args, **kwargs)
        except WorkflowError as e:
            self._record_error(e)
            if self.state in _IN_FLIGHT:
                self.state = before
            return None

    return wrapper


class SubmissionWorkflow:
    def __init__(self, client: DirectoryClient):
        self.client = client
        self.state = SubmissionState.EDITING
        self.form = FormFields()
        self.draft = DraftMeta()
        self.payment = PaymentMeta()
        self.auth = AuthMeta()
        self.duplicate = DuplicateMeta()

        self.error: str | None = None
        self.last_error: WorkflowError | None = None
        self.result: dict[str, Any] | None = None

    # Local edits

    def update_field(self, name: str, value: Any) -> bool:
        """Set a form field. Editing name or GitHub URL voids the duplicate check."""
        self.error = None
        if name not in FormFields.field_names():
            self._record_error(ValidationError(f"Unknown field: {name}"))
            return False
        if self.state in (SubmissionState.SUBMITTING, SubmissionState.SUBMITTED):
            self._record_error(ValidationError("This submission can no longer be edited"))
            return False

        setattr(self.form, name, value)

        if name in ("name", "github"):
            self.duplicate.invalidate()
            # A pending payment was gated on the old duplicate result.
            self.payment.in_progress = False
            self.state = SubmissionState.EDITING
        elif self.state == SubmissionState.FAILED:
            self.state = SubmissionState.EDITING
        return True

    def select_plan(self, plan: SubmissionPlan | str) -> bool:
        self.error = None
        try:
            plan = SubmissionPlan(plan)
        except ValueError:
            self._record_error(ValidationError(f"Unknown plan: {plan}"))
            return False
        if plan == self.payment.plan:
            return True

        if plan == SubmissionPlan.SPONSOR:
            self.payment.clear_backlink()
        else:
            self.payment.clear_payment()
            if self.state == SubmissionState.PAYMENT_PENDING:
                self.state = SubmissionState.DUPLICATE_CLEAR
        self.payment.plan = plan
        logger.debug(f"Plan switched to {plan}")
        return True

    def apply_coupon(self, code: str) -> Quote:
        """Price the sponsor plan with a coupon. Local lookup only."""
        self.error = None
        quote = apply_coupon(SPONSOR_PRODUCT, code)
        self.payment.amount = quote.discounted_amount

        if quote.valid:
            self.payment.coupon_code = code.strip().upper()
            self.payment.coupon_message = quote.description
        else:
            self.payment.coupon_code = None
            self.payment.coupon_message = "Invalid coupon code"
            self._record_error(ValidationError("Invalid coupon code"))
        return quote

    def cancel_payment(self) -> None:
        """Abandon an unfinished payment. Saved drafts are left alone."""
        self.payment.in_progress = False
        if self.state == SubmissionState.PAYMENT_PENDING and not self.payment.paid:
            self.state = SubmissionState.DUPLICATE_CLEAR

    def missing_fields(self) -> list[str]:
        missing = [f for f in REQUIRED_FIELDS if not (getattr(self.form, f) or "").strip()]
        if not self.form.alternative_to_ids:
            missing.append("alternative_to")
        return missing

    # Remote actions

    @user_action
    async def sign_in(self, email: str, password: str) -> AuthMeta:
        await self.client.login(email, password)
        user = await self.client.me()
        self.auth = AuthMeta(
            signed_in=True,
            user_id=user["id"],
            email=user["email"],
            full_name=user.get("full_name"),
        )
        return self.auth

    def sign_out(self) -> None:
        self.client.sign_out()
        self.auth = AuthMeta()

    @user_action
    async def check_duplicate(self) -> DuplicateMeta:
        if not self.form.name.strip() and not self.form.github.strip():
            raise ValidationError("Enter a name or GitHub URL to check")
        await self._run_duplicate_check()
        return self.duplicate

    @user_action
    async def verify_backlink(self) -> bool:
        if not self.form.github.strip():
            raise ValidationError("Missing required fields: github")

        result = await self.client.verify_backlink(self.form.github)
        self.payment.backlink_verified = bool(result.get("verified"))
        self.payment.backlink_url = result.get("found_at")
        self.payment.backlink_message = result.get("message")
        return self.payment.backlink_verified

    @user_action
    async def begin_payment(self) -> Decimal:
        """Open the sponsor payment; needs complete fields and a clear duplicate check."""
        if self.payment.plan != SubmissionPlan.SPONSOR:
            raise ValidationError("Payment is only needed for the sponsor plan")
        self._require_fields()
        await self._duplicate_gate()

        if self.payment.amount is None:
            self.payment.amount = apply_coupon(SPONSOR_PRODUCT, self.payment.coupon_code).discounted_amount
        self.payment.in_progress = True
        self.state = SubmissionState.PAYMENT_PENDING
        return self.payment.amount

    @user_action
    async def complete_payment(self, capture_id: str) -> bool:
        """Store the processor's capture id and persist it in the draft."""
        if self.state != SubmissionState.PAYMENT_PENDING:
            raise ValidationError("No payment in progress")
        if not (capture_id or "").strip():
            raise PaymentRequiredError("Payment was not completed")

        self.payment.capture_id = capture_id.strip()
        self.payment.in_progress = False
        logger.info("Sponsor payment captured")

        if self.auth.signed_in:
            # The capture is kept even if this save fails.
            await self._save_draft()
        return True

    @user_action
    async def save_draft(self) -> DraftMeta:
        return await self._save_draft()

    @user_action
    async def load_draft(self) -> bool:
        self._require_auth()
        data = await self.client.load_draft()
        if data is None:
            return False

        self.form = FormFields.from_payload(data)
        self.duplicate.invalidate()

        plan = SubmissionPlan(data.get("submission_plan") or SubmissionPlan.FREE)
        self.payment = PaymentMeta(plan=plan)
        if plan == SubmissionPlan.SPONSOR and data.get("sponsor_paid"):
            self.payment.capture_id = data.get("sponsor_payment_id")

        self.draft = DraftMeta(draft_id=data.get("id"), last_saved_at=data.get("updated_at"))
        return True

    @user_action
    async def delete_draft(self) -> bool:
        self._require_auth()
        await self.client.delete_draft()
        self.draft = DraftMeta()
        return True

    @user_action
    async def submit(self) -> dict[str, Any]:
        """Check everything locally, pass the duplicate gate, then create the listing."""
        if self.state == SubmissionState.SUBMITTED:
            raise ValidationError("Already submitted")

        self._require_fields()
        if self.payment.plan == SubmissionPlan.FREE and not self.payment.backlink_verified:
            raise ValidationError("Please verify your backlink before submitting")
        if self.payment.plan == SubmissionPlan.SPONSOR and not self.payment.paid:
            raise PaymentRequiredError("Please complete payment before submitting")

        await self._duplicate_gate()

        self.state = SubmissionState.SUBMITTING
        try:
            result = await self.client.submit(self._submission_payload())
        except DuplicateError as e:
            self.duplicate.record({"duplicate": True, **e.details})
            self.state = SubmissionState.DUPLICATE_BLOCKED
            raise
        except WorkflowError:
            self.state = SubmissionState.FAILED
            raise

        self.result = result
        self.draft = DraftMeta()
        self.state = SubmissionState.SUBMITTED
        logger.info(f"Submitted {result.get('slug')} ({self.payment.plan})")
        return result

    @user_action
    async def start_claim(self) -> dict[str, Any]:
        """Claim the listing found by the duplicate check instead of resubmitting."""
        self._require_auth()
        if not (self.duplicate.claimable and self.duplicate.existing):
            raise ValidationError("There is no unclaimed listing to claim")
        # The match may be by name only; claim the listed repository.
        return await self.client.initiate_claim(self.duplicate.existing["github"])

    @user_action
    async def verify_claim(self) -> dict[str, Any]:
        self._require_auth()
        if not self.duplicate.existing:
            raise ValidationError("There is no listing to verify")
        return await self.client.verify_claim(self.duplicate.existing["id"])

    # Internals

    def _record_error(self, error: WorkflowError) -> None:
        self.last_error = error
        self.error = error.message
        logger.info(f"Workflow action failed in state {self.state}: {type(error).__name__}")

    def _require_auth(self) -> None:
        if not self.auth.signed_in:
            raise AuthenticationRequiredError("Please sign in to continue")

    def _require_fields(self) -> None:
        missing = self.missing_fields()
        if missing:
            raise ValidationError(f"Missing required fields: {', '.join(missing)}")

    async def _run_duplicate_check(self) -> None:
        self.state = SubmissionState.DUPLICATE_CHECKING
        result = await self.client.check_duplicate(self.form.name, self.form.github)
        self.duplicate.record(result)
        self.state = (
            SubmissionState.DUPLICATE_BLOCKED
            if self.duplicate.duplicate
            else SubmissionState.DUPLICATE_CLEAR
        )

    async def _duplicate_gate(self) -> None:
        if not self.duplicate.checked:
            await self._run_duplicate_check()
        if self.duplicate.duplicate:
            self.state = SubmissionState.DUPLICATE_BLOCKED
            raise DuplicateError(
                "; ".join(self.duplicate.reasons) or "This project is already listed",
                status_code=409,
                details={
                    "reasons": self.duplicate.reasons,
                    "existing": self.duplicate.existing,
                    "claimable": self.duplicate.claimable,
                },
            )

    async def _save_draft(self) -> DraftMeta:
        self._require_auth()
        payload = {
            **self.form.to_payload(),
            "submission_plan": self.payment.plan.value,
            "sponsor_payment_id": self.payment.capture_id,
            "sponsor_paid": self.payment.paid,
        }
        saved = await self.client.save_draft(payload)
        self.draft = DraftMeta(draft_id=saved.get("id"), last_saved_at=saved.get("updated_at"))
        return self.draft

    def _submission_payload(self) -> dict[str, Any]:
        payload = {**self.form.to_payload(), "submission_plan": self.payment.plan.value}
        if self.payment.plan == SubmissionPlan.SPONSOR:
            payload["sponsor_payment_id"] = self.payment.capture_id
        else:
            payload["backlink_verified"] = self.payment.backlink_verified
            payload["backlink_url"] = self.payment.backlink_url
        return payload
