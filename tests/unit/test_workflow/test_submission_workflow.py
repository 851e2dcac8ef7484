"""Unit tests for the client-side submission workflow, against a fake API client."""

from decimal import Decimal

import pytest

from osfinder.client import DuplicateError, NetworkError
from osfinder.client.errors import AuthenticationRequiredError, PaymentRequiredError, ValidationError
from osfinder.core.enums import SubmissionPlan
from osfinder.workflow import SubmissionState, SubmissionWorkflow

CLEAR = {"duplicate": False, "reasons": [], "existing": None, "claimable": False}
EXISTING = {
    "id": "8a4c3c2e-5a1e-4f5e-9a8e-2b7e4c1d9f00",
    "name": "Boards",
    "slug": "boards",
    "github": "https://github.com/acme/boards",
    "has_owner": False,
}


class FakeClient:
    """Records calls; responses and errors are set per test."""

    def __init__(self):
        self.calls: list[tuple[str, object]] = []
        self.duplicate_result = dict(CLEAR)
        self.backlink_result = {"verified": True, "message": "Backlink found in README!", "found_at": "raw"}
        self.draft: dict | None = None
        self.errors: dict[str, Exception] = {}

    def _call(self, name, payload=None):
        self.calls.append((name, payload))
        if name in self.errors:
            raise self.errors[name]

    def called(self, name) -> list:
        return [payload for call, payload in self.calls if call == name]

    async def login(self, email, password):
        self._call("login", email)
        return {"access_token": "a", "refresh_token": "r"}

    async def me(self):
        self._call("me")
        return {"id": "user-1", "email": "jane@example.com", "full_name": "Jane"}

    def sign_out(self):
        self.calls.append(("sign_out", None))

    async def check_duplicate(self, name, github):
        self._call("check_duplicate", (name, github))
        return self.duplicate_result

    async def verify_backlink(self, github_url):
        self._call("verify_backlink", github_url)
        return self.backlink_result

    async def save_draft(self, payload):
        self._call("save_draft", payload)
        self.draft = dict(payload)
        return {"id": "draft-1", "updated_at": "2026-01-01T00:00:00Z"}

    async def load_draft(self):
        self._call("load_draft")
        return self.draft

    async def delete_draft(self):
        self._call("delete_draft")
        self.draft = None
        return {"success": True, "deleted": True}

    async def submit(self, payload):
        self._call("submit", payload)
        return {"id": "alt-1", "slug": "boards", "status": "pending", "message": "ok"}

    async def initiate_claim(self, github):
        self._call("initiate_claim", github)
        return {"file_name": ".opensourcefinder-verify", "file_content": "code"}

    async def verify_claim(self, alternative_id):
        self._call("verify_claim", alternative_id)
        return {"success": True}


@pytest.fixture
def fake():
    return FakeClient()


@pytest.fixture
def workflow(fake):
    return SubmissionWorkflow(fake)


def fill(workflow: SubmissionWorkflow, **overrides):
    values = {
        "name": "Boards",
        "short_description": "Kanban boards",
        "description": "Self-hosted kanban boards for teams.",
        "website": "https://boards.example.org",
        "github": "https://github.com/acme/boards",
        "license": "MIT",
        "alternative_to_ids": ["trello-id"],
    }
    values.update(overrides)
    for name, value in values.items():
        assert workflow.update_field(name, value) is True


class TestEditing:
    def test_initial_state(self, workflow):
        assert workflow.state == SubmissionState.EDITING
        assert workflow.payment.plan == SubmissionPlan.FREE
        assert workflow.error is None

    def test_unknown_field_rejected(self, workflow):
        assert workflow.update_field("stars", 5) is False
        assert isinstance(workflow.last_error, ValidationError)

    def test_missing_fields_in_form_order(self, workflow):
        fill(workflow, website="", license="  ", alternative_to_ids=[])
        assert workflow.missing_fields() == ["website", "license", "alternative_to"]

    @pytest.mark.asyncio
    async def test_editing_name_invalidates_duplicate_check(self, workflow, fake):
        fill(workflow)
        await workflow.check_duplicate()
        assert workflow.state == SubmissionState.DUPLICATE_CLEAR

        workflow.update_field("name", "Boards 2")

        assert workflow.state == SubmissionState.EDITING
        assert workflow.duplicate.checked is False

    @pytest.mark.asyncio
    async def test_editing_other_fields_keeps_duplicate_check(self, workflow):
        fill(workflow)
        await workflow.check_duplicate()

        workflow.update_field("short_description", "Boards for teams")

        assert workflow.state == SubmissionState.DUPLICATE_CLEAR
        assert workflow.duplicate.checked is True

    def test_transient_previews_not_in_payload(self, workflow):
        fill(workflow)
        workflow.update_field("icon_preview", "data:image/png;base64,AAAA")

        payload = workflow.form.to_payload()

        assert "icon_preview" not in payload
        assert "screenshot_previews" not in payload
        assert payload["name"] == "Boards"


class TestDuplicateCheck:
    @pytest.mark.asyncio
    async def test_requires_name_or_github(self, workflow, fake):
        result = await workflow.check_duplicate()

        assert result is None
        assert workflow.error == "Enter a name or GitHub URL to check"
        assert fake.called("check_duplicate") == []

    @pytest.mark.asyncio
    async def test_blocked(self, workflow, fake):
        fake.duplicate_result = {
            "duplicate": True,
            "reasons": ['An alternative named "Boards" already exists'],
            "existing": EXISTING,
            "claimable": True,
        }
        fill(workflow)

        await workflow.check_duplicate()

        assert workflow.state == SubmissionState.DUPLICATE_BLOCKED
        assert workflow.duplicate.claimable is True
        assert workflow.duplicate.existing["slug"] == "boards"

    @pytest.mark.asyncio
    async def test_network_failure_restores_state(self, workflow, fake):
        fake.errors["check_duplicate"] = NetworkError("offline")
        fill(workflow)

        await workflow.check_duplicate()

        assert workflow.state == SubmissionState.EDITING
        assert workflow.error == "offline"
        assert isinstance(workflow.last_error, NetworkError)


class TestPlans:
    @pytest.mark.asyncio
    async def test_switching_to_sponsor_clears_backlink(self, workflow):
        fill(workflow)
        await workflow.verify_backlink()
        assert workflow.payment.backlink_verified is True

        workflow.select_plan("sponsor")

        assert workflow.payment.plan == SubmissionPlan.SPONSOR
        assert workflow.payment.backlink_verified is False
        assert workflow.payment.backlink_url is None

    @pytest.mark.asyncio
    async def test_switching_to_free_clears_payment(self, workflow):
        fill(workflow)
        workflow.select_plan(SubmissionPlan.SPONSOR)
        await workflow.begin_payment()
        await workflow.complete_payment("CAPTURE-1")

        workflow.select_plan(SubmissionPlan.FREE)

        assert workflow.payment.capture_id is None
        assert workflow.payment.paid is False

    def test_unknown_plan_recorded_not_raised(self, workflow):
        assert workflow.select_plan("lifetime") is False

        assert workflow.payment.plan == SubmissionPlan.FREE
        assert isinstance(workflow.last_error, ValidationError)
        assert workflow.error == "Unknown plan: lifetime"

    def test_valid_coupon(self, workflow, fake):
        quote = workflow.apply_coupon("launch60")

        assert quote.valid is True
        assert workflow.payment.amount == Decimal("19.60")
        assert workflow.payment.coupon_code == "LAUNCH60"
        assert workflow.error is None
        assert fake.calls == []

    def test_invalid_coupon_is_local(self, workflow, fake):
        quote = workflow.apply_coupon("FREEBIE")

        assert quote.valid is False
        assert workflow.payment.amount == Decimal("49.00")
        assert workflow.payment.coupon_message == "Invalid coupon code"
        assert workflow.error == "Invalid coupon code"
        assert fake.calls == []


class TestSponsorPayment:
    @pytest.mark.asyncio
    async def test_begin_requires_sponsor_plan(self, workflow):
        fill(workflow)

        assert await workflow.begin_payment() is None
        assert workflow.state == SubmissionState.EDITING

    @pytest.mark.asyncio
    async def test_begin_requires_complete_form(self, workflow, fake):
        fill(workflow, license="")
        workflow.select_plan("sponsor")

        await workflow.begin_payment()

        assert workflow.error == "Missing required fields: license"
        assert fake.called("check_duplicate") == []

    @pytest.mark.asyncio
    async def test_begin_blocked_by_duplicate(self, workflow, fake):
        fake.duplicate_result = {"duplicate": True, "reasons": ["This GitHub repository is already listed"]}
        fill(workflow)
        workflow.select_plan("sponsor")

        await workflow.begin_payment()

        assert workflow.state == SubmissionState.DUPLICATE_BLOCKED
        assert isinstance(workflow.last_error, DuplicateError)
        assert workflow.payment.in_progress is False

    @pytest.mark.asyncio
    async def test_begin_uses_coupon_price(self, workflow):
        fill(workflow)
        workflow.select_plan("sponsor")
        workflow.apply_coupon("LAUNCH60")

        amount = await workflow.begin_payment()

        assert amount == Decimal("19.60")
        assert workflow.state == SubmissionState.PAYMENT_PENDING
        assert workflow.payment.in_progress is True

    @pytest.mark.asyncio
    async def test_cancel_returns_to_clear_and_keeps_draft(self, workflow, fake):
        fill(workflow)
        workflow.select_plan("sponsor")
        await workflow.begin_payment()

        workflow.cancel_payment()

        assert workflow.state == SubmissionState.DUPLICATE_CLEAR
        assert workflow.payment.in_progress is False
        assert fake.called("delete_draft") == []

    @pytest.mark.asyncio
    async def test_complete_saves_draft_when_signed_in(self, workflow, fake):
        await workflow.sign_in("jane@example.com", "password123")
        fill(workflow)
        workflow.select_plan("sponsor")
        await workflow.begin_payment()

        assert await workflow.complete_payment("CAPTURE-1") is True

        saved = fake.called("save_draft")[-1]
        assert saved["sponsor_payment_id"] == "CAPTURE-1"
        assert saved["sponsor_paid"] is True
        assert workflow.draft.draft_id == "draft-1"

    @pytest.mark.asyncio
    async def test_capture_kept_when_draft_save_fails(self, workflow, fake):
        await workflow.sign_in("jane@example.com", "password123")
        fill(workflow)
        workflow.select_plan("sponsor")
        await workflow.begin_payment()
        fake.errors["save_draft"] = NetworkError("offline")

        await workflow.complete_payment("CAPTURE-1")

        assert workflow.payment.paid is True
        assert workflow.error == "offline"

    @pytest.mark.asyncio
    async def test_complete_without_capture(self, workflow):
        fill(workflow)
        workflow.select_plan("sponsor")
        await workflow.begin_payment()

        await workflow.complete_payment("")

        assert isinstance(workflow.last_error, PaymentRequiredError)
        assert workflow.payment.paid is False


class TestSubmit:
    @pytest.mark.asyncio
    async def test_missing_fields_block_locally(self, workflow, fake):
        fill(workflow, name="", description="")

        assert await workflow.submit() is None

        assert workflow.error == "Missing required fields: name, description"
        assert fake.called("submit") == []
        assert workflow.state == SubmissionState.EDITING

    @pytest.mark.asyncio
    async def test_free_plan_needs_backlink(self, workflow, fake):
        fill(workflow)

        await workflow.submit()

        assert isinstance(workflow.last_error, ValidationError)
        assert "backlink" in workflow.error
        assert fake.called("submit") == []

    @pytest.mark.asyncio
    async def test_sponsor_plan_needs_payment(self, workflow, fake):
        fill(workflow)
        workflow.select_plan("sponsor")

        await workflow.submit()

        assert isinstance(workflow.last_error, PaymentRequiredError)
        assert fake.called("submit") == []

    @pytest.mark.asyncio
    async def test_free_submission(self, workflow, fake):
        fill(workflow)
        await workflow.verify_backlink()

        result = await workflow.submit()

        assert result["slug"] == "boards"
        assert workflow.state == SubmissionState.SUBMITTED
        payload = fake.called("submit")[0]
        assert payload["submission_plan"] == "free"
        assert payload["backlink_verified"] is True
        assert "sponsor_payment_id" not in payload
        # Duplicate check ran first
        assert [c for c, _ in fake.calls][-2:] == ["check_duplicate", "submit"]

    @pytest.mark.asyncio
    async def test_sponsor_submission(self, workflow, fake):
        fill(workflow)
        workflow.select_plan("sponsor")
        await workflow.begin_payment()
        await workflow.complete_payment("CAPTURE-1")

        await workflow.submit()

        payload = fake.called("submit")[0]
        assert payload["submission_plan"] == "sponsor"
        assert payload["sponsor_payment_id"] == "CAPTURE-1"
        assert "backlink_verified" not in payload
        # Cached result from begin_payment is reused
        assert len(fake.called("check_duplicate")) == 1
        assert workflow.state == SubmissionState.SUBMITTED

    @pytest.mark.asyncio
    async def test_cached_duplicate_blocks_without_request(self, workflow, fake):
        fake.duplicate_result = {"duplicate": True, "reasons": ["This GitHub repository is already listed"]}
        fill(workflow)
        await workflow.verify_backlink()
        await workflow.check_duplicate()

        await workflow.submit()

        assert workflow.state == SubmissionState.DUPLICATE_BLOCKED
        assert workflow.error == "This GitHub repository is already listed"
        assert fake.called("submit") == []

    @pytest.mark.asyncio
    async def test_server_side_duplicate(self, workflow, fake):
        fill(workflow)
        await workflow.verify_backlink()
        fake.errors["submit"] = DuplicateError(
            "This GitHub repository is already listed",
            status_code=409,
            details={"reasons": ["This GitHub repository is already listed"], "claimable": False},
        )

        await workflow.submit()

        assert workflow.state == SubmissionState.DUPLICATE_BLOCKED
        assert workflow.duplicate.duplicate is True

    @pytest.mark.asyncio
    async def test_server_failure_moves_to_failed(self, workflow, fake):
        fill(workflow)
        await workflow.verify_backlink()
        fake.errors["submit"] = NetworkError("Internal server error", status_code=500)

        await workflow.submit()

        assert workflow.state == SubmissionState.FAILED
        assert workflow.error == "Internal server error"

        # Editing recovers from a failure.
        workflow.update_field("short_description", "Boards")
        assert workflow.state == SubmissionState.EDITING

    @pytest.mark.asyncio
    async def test_submitted_is_final(self, workflow, fake):
        fill(workflow)
        await workflow.verify_backlink()
        await workflow.submit()

        assert workflow.update_field("name", "Other") is False
        assert await workflow.submit() is None
        assert len(fake.called("submit")) == 1


class TestDrafts:
    @pytest.mark.asyncio
    async def test_requires_sign_in(self, workflow, fake):
        fill(workflow)

        await workflow.save_draft()

        assert isinstance(workflow.last_error, AuthenticationRequiredError)
        assert fake.called("save_draft") == []

    @pytest.mark.asyncio
    async def test_save_and_restore(self, workflow, fake):
        await workflow.sign_in("jane@example.com", "password123")
        fill(workflow)
        workflow.update_field("icon_preview", "data:image/png;base64,AAAA")
        await workflow.save_draft()
        state_before = workflow.state

        restored = SubmissionWorkflow(fake)
        await restored.sign_in("jane@example.com", "password123")
        assert await restored.load_draft() is True

        assert restored.form.name == "Boards"
        assert restored.form.alternative_to_ids == ["trello-id"]
        assert restored.form.icon_preview is None
        assert restored.duplicate.checked is False
        assert workflow.state == state_before

    @pytest.mark.asyncio
    async def test_restore_paid_sponsor_draft(self, workflow, fake):
        fake.draft = {
            "id": "draft-1",
            "name": "Boards",
            "submission_plan": "sponsor",
            "sponsor_payment_id": "CAPTURE-1",
            "sponsor_paid": True,
            "updated_at": "2026-01-01T00:00:00Z",
        }
        await workflow.sign_in("jane@example.com", "password123")

        await workflow.load_draft()

        assert workflow.payment.plan == SubmissionPlan.SPONSOR
        assert workflow.payment.paid is True
        assert workflow.draft.draft_id == "draft-1"

    @pytest.mark.asyncio
    async def test_no_draft(self, workflow):
        await workflow.sign_in("jane@example.com", "password123")
        assert await workflow.load_draft() is False

    @pytest.mark.asyncio
    async def test_delete(self, workflow, fake):
        await workflow.sign_in("jane@example.com", "password123")
        fill(workflow)
        await workflow.save_draft()

        assert await workflow.delete_draft() is True
        assert workflow.draft.draft_id is None
        assert fake.draft is None


class TestAuthAndClaims:
    @pytest.mark.asyncio
    async def test_sign_in_and_out(self, workflow, fake):
        auth = await workflow.sign_in("jane@example.com", "password123")

        assert auth.signed_in is True
        assert auth.email == "jane@example.com"

        workflow.sign_out()
        assert workflow.auth.signed_in is False
        assert fake.called("sign_out") == [None]

    @pytest.mark.asyncio
    async def test_claim_after_claimable_duplicate(self, workflow, fake):
        fake.duplicate_result = {
            "duplicate": True,
            "reasons": ["This GitHub repository is already listed"],
            "existing": EXISTING,
            "claimable": True,
        }
        await workflow.sign_in("jane@example.com", "password123")
        fill(workflow)
        await workflow.check_duplicate()

        instructions = await workflow.start_claim()
        result = await workflow.verify_claim()

        assert instructions["file_name"] == ".opensourcefinder-verify"
        assert fake.called("initiate_claim") == ["https://github.com/acme/boards"]
        assert fake.called("verify_claim") == [EXISTING["id"]]
        assert result["success"] is True

    @pytest.mark.asyncio
    async def test_claim_targets_listed_repository_on_name_match(self, workflow, fake):
        fake.duplicate_result = {
            "duplicate": True,
            "reasons": ['An alternative named "Boards" already exists'],
            "existing": EXISTING,
            "claimable": True,
        }
        await workflow.sign_in("jane@example.com", "password123")
        fill(workflow, github="https://github.com/someone-else/boards-fork")
        await workflow.check_duplicate()

        await workflow.start_claim()

        assert workflow.error is None
        assert fake.called("initiate_claim") == [EXISTING["github"]]

    @pytest.mark.asyncio
    async def test_claim_needs_claimable_match(self, workflow, fake):
        await workflow.sign_in("jane@example.com", "password123")
        fill(workflow)
        await workflow.check_duplicate()

        assert await workflow.start_claim() is None
        assert fake.called("initiate_claim") == []
