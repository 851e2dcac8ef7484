"""Integration tests for duplicate checks, submissions, backlinks and quotes."""

import pytest
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from osfinder.models.alternative import Alternative
from osfinder.repositories.alternative import AlternativeRepository
from osfinder.services.github import RAW_BASE_URL


def _form(seeded_labels, **overrides) -> dict:
    form = {
        "name": "Boards",
        "short_description": "Kanban boards",
        "description": "Self-hosted kanban boards for teams.",
        "website": "https://boards.example.org",
        "github": "https://github.com/Acme/Boards",
        "license": "MIT",
        "category_ids": [str(c.id) for c in seeded_labels["categories"]],
        "alternative_to_ids": [str(seeded_labels["trello"].id)],
        "submission_plan": "free",
        "backlink_verified": True,
        "backlink_url": f"{RAW_BASE_URL}/acme/boards/main/README.md",
    }
    form.update(overrides)
    return form


async def _listed(db: AsyncSession, **fields) -> Alternative:
    alternative = Alternative(
        name="Boards",
        slug="boards",
        description="Existing listing",
        website="https://boards.example.org",
        github="https://github.com/acme/boards",
        status="approved",
        approved=True,
        **fields,
    )
    db.add(alternative)
    await db.commit()
    return alternative


class TestDuplicateCheck:
    @pytest.mark.asyncio
    async def test_no_duplicate(self, client: AsyncClient, db_session):
        response = await client.post(
            "/api/v1/submit/check-duplicate",
            json={"name": "Boards", "github": "https://github.com/acme/boards"},
        )

        assert response.status_code == 200
        assert response.json() == {"duplicate": False, "reasons": [], "existing": None, "claimable": False}

    @pytest.mark.asyncio
    async def test_name_and_github_match(self, client: AsyncClient, db_session):
        existing = await _listed(db_session)

        response = await client.post(
            "/api/v1/submit/check-duplicate",
            json={"name": "  boards ", "github": "https://GITHUB.com/acme/boards"},
        )

        data = response.json()
        assert data["duplicate"] is True
        assert data["reasons"] == [
            'An alternative named "Boards" already exists',
            "This GitHub repository is already listed",
        ]
        assert data["existing"]["id"] == str(existing.id)
        assert data["existing"]["has_owner"] is False
        # Anonymous callers are never offered the claim
        assert data["claimable"] is False

    @pytest.mark.asyncio
    async def test_claimable_for_signed_in_caller(self, client: AsyncClient, db_session, auth_headers):
        await _listed(db_session)

        response = await client.post(
            "/api/v1/submit/check-duplicate",
            json={"name": "Something Else", "github": "https://github.com/acme/boards"},
            headers=auth_headers,
        )

        data = response.json()
        assert data["reasons"] == ["This GitHub repository is already listed"]
        assert data["claimable"] is True

    @pytest.mark.asyncio
    async def test_owned_listing_not_claimable(self, client: AsyncClient, db_session, auth_headers, other_user):
        await _listed(db_session, user_id=other_user.id)

        response = await client.post(
            "/api/v1/submit/check-duplicate",
            json={"name": "Boards", "github": ""},
            headers=auth_headers,
        )

        data = response.json()
        assert data["duplicate"] is True
        assert data["existing"]["has_owner"] is True
        assert data["claimable"] is False

    @pytest.mark.asyncio
    async def test_rejected_listing_does_not_block(self, client: AsyncClient, db_session):
        await _listed(db_session)
        rejected = await AlternativeRepository(db_session).get_by_slug("boards")
        rejected.status = "rejected"
        await db_session.commit()

        response = await client.post("/api/v1/submit/check-duplicate", json={"name": "Boards"})

        assert response.json()["duplicate"] is False

    @pytest.mark.asyncio
    async def test_invalid_token_rejected(self, client: AsyncClient, db_session):
        response = await client.post(
            "/api/v1/submit/check-duplicate",
            json={"name": "Boards"},
            headers={"Authorization": "Bearer not.a.token"},
        )

        assert response.status_code == 401


class TestSubmit:
    @pytest.mark.asyncio
    async def test_free_submission_is_pending(self, client: AsyncClient, db_session, seeded_labels):
        response = await client.post("/api/v1/submit", json=_form(seeded_labels))

        assert response.status_code == 201
        data = response.json()
        assert data["slug"] == "boards"
        assert data["status"] == "pending"
        assert data["featured"] is False
        assert data["submission_plan"] == "free"
        assert data["message"] == "Your alternative has been submitted for review."

        stored = await AlternativeRepository(db_session).get_by_slug("boards")
        assert stored.github == "https://github.com/acme/boards"
        assert stored.backlink_verified is True
        assert stored.approved is False
        assert [p.slug for p in stored.alternative_to] == ["trello"]
        assert len(stored.categories) == 3

    @pytest.mark.asyncio
    async def test_sponsor_submission_is_live(self, client: AsyncClient, db_session, seeded_labels):
        form = _form(
            seeded_labels,
            submission_plan="sponsor",
            backlink_verified=False,
            sponsor_payment_id="CAPTURE-123",
        )

        response = await client.post("/api/v1/submit", json=form)

        assert response.status_code == 201
        data = response.json()
        assert data["status"] == "approved"
        assert data["featured"] is True
        assert data["sponsor_featured_until"] is not None
        assert "sponsoring" in data["message"]

        stored = await AlternativeRepository(db_session).get_by_slug("boards")
        assert stored.approved is True
        assert stored.newsletter_included is True
        assert stored.sponsor_payment_id == "CAPTURE-123"

    @pytest.mark.asyncio
    async def test_submitter_defaults_to_signed_in_user(
        self, client: AsyncClient, db_session, seeded_labels, auth_headers, test_user
    ):
        response = await client.post("/api/v1/submit", json=_form(seeded_labels), headers=auth_headers)

        assert response.status_code == 201
        stored = await AlternativeRepository(db_session).get_by_slug("boards")
        assert stored.user_id == test_user.id
        assert stored.submitter_email == test_user.email

    @pytest.mark.asyncio
    async def test_missing_fields_all_named(self, client: AsyncClient, db_session, seeded_labels):
        form = _form(seeded_labels, website="", license="  ", alternative_to_ids=[])

        response = await client.post("/api/v1/submit", json=form)

        assert response.status_code == 400
        data = response.json()
        assert data["error_code"] == "SUB_001"
        assert data["message"] == "Missing required fields: website, license, alternative_to"
        assert data["details"]["missing_fields"] == ["website", "license", "alternative_to"]

    @pytest.mark.asyncio
    async def test_free_without_backlink(self, client: AsyncClient, db_session, seeded_labels):
        response = await client.post("/api/v1/submit", json=_form(seeded_labels, backlink_verified=False))

        assert response.status_code == 400
        assert response.json()["error_code"] == "SUB_002"

    @pytest.mark.asyncio
    async def test_sponsor_without_payment(self, client: AsyncClient, db_session, seeded_labels):
        form = _form(seeded_labels, submission_plan="sponsor", sponsor_payment_id="  ")

        response = await client.post("/api/v1/submit", json=form)

        assert response.status_code == 402
        assert response.json()["error_code"] == "SUB_003"

    @pytest.mark.asyncio
    async def test_duplicate_rejected_with_claim_hint(
        self, client: AsyncClient, db_session, seeded_labels, auth_headers
    ):
        await _listed(db_session)

        response = await client.post("/api/v1/submit", json=_form(seeded_labels), headers=auth_headers)

        assert response.status_code == 409
        data = response.json()
        assert data["error_code"] == "SUB_004"
        assert data["details"]["claimable"] is True
        assert data["details"]["existing"]["slug"] == "boards"

    @pytest.mark.asyncio
    async def test_second_submission_of_pending_blocked(self, client: AsyncClient, db_session, seeded_labels):
        first = await client.post("/api/v1/submit", json=_form(seeded_labels))
        second = await client.post(
            "/api/v1/submit", json=_form(seeded_labels, github="https://github.com/other/boards")
        )

        assert first.status_code == 201
        assert second.status_code == 409
        assert second.json()["message"] == 'An alternative named "Boards" already exists'

    @pytest.mark.asyncio
    async def test_resubmission_after_rejection(self, client: AsyncClient, db_session, seeded_labels):
        rejected = await _listed(db_session)
        rejected.status = "rejected"
        await db_session.commit()

        check = await client.post(
            "/api/v1/submit/check-duplicate",
            json={"name": "Boards", "github": "https://github.com/acme/boards"},
        )
        response = await client.post("/api/v1/submit", json=_form(seeded_labels))

        assert check.json()["duplicate"] is False
        assert response.status_code == 201
        assert response.json()["slug"] == "boards"

        repo = AlternativeRepository(db_session)
        live = await repo.find_live_by_slug("boards")
        assert live is not None
        assert live.id != rejected.id
        assert live.status == "pending"

    @pytest.mark.asyncio
    async def test_resubmission_blocked_again_once_live(self, client: AsyncClient, db_session, seeded_labels):
        rejected = await _listed(db_session)
        rejected.status = "rejected"
        await db_session.commit()

        first = await client.post("/api/v1/submit", json=_form(seeded_labels))
        second = await client.post("/api/v1/submit", json=_form(seeded_labels))

        assert first.status_code == 201
        assert second.status_code == 409
        assert second.json()["error_code"] == "SUB_004"

    @pytest.mark.asyncio
    async def test_missing_fields_checked_before_duplicates(self, client: AsyncClient, db_session, seeded_labels):
        await _listed(db_session)

        response = await client.post("/api/v1/submit", json=_form(seeded_labels, license=""))

        assert response.status_code == 400
        assert response.json()["error_code"] == "SUB_001"


class TestBacklinkEndpoint:
    @pytest.mark.asyncio
    async def test_found_in_readme(self, client: AsyncClient, github_files):
        github_files[f"{RAW_BASE_URL}/acme/boards/main/README.md"] = "Listed on opensourcefinder.com"

        response = await client.post(
            "/api/v1/verify-backlink", json={"github_url": "https://github.com/acme/boards"}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["verified"] is True
        assert data["found_at"].endswith("/main/README.md")

    @pytest.mark.asyncio
    async def test_not_found(self, client: AsyncClient):
        response = await client.post(
            "/api/v1/verify-backlink", json={"github_url": "https://github.com/acme/boards"}
        )

        assert response.status_code == 200
        assert response.json()["verified"] is False

    @pytest.mark.asyncio
    async def test_invalid_url(self, client: AsyncClient):
        response = await client.post("/api/v1/verify-backlink", json={"github_url": "https://example.com"})

        assert response.status_code == 400
        assert response.json()["error_code"] == "GH_001"


class TestQuote:
    @pytest.mark.asyncio
    async def test_full_price(self, client: AsyncClient):
        response = await client.post("/api/v1/payments/quote", json={})

        assert response.status_code == 200
        data = response.json()
        assert data["product"] == "sponsor_submission"
        assert data["currency"] == "USD"
        assert data["coupon_valid"] is False
        assert data["message"] is None
        assert float(data["discounted_amount"]) == 49.0

    @pytest.mark.asyncio
    async def test_coupon(self, client: AsyncClient):
        response = await client.post("/api/v1/payments/quote", json={"coupon_code": "launch60"})

        data = response.json()
        assert data["coupon_valid"] is True
        assert float(data["discounted_amount"]) == 19.6

    @pytest.mark.asyncio
    async def test_invalid_coupon(self, client: AsyncClient):
        response = await client.post("/api/v1/payments/quote", json={"coupon_code": "NOPE"})

        data = response.json()
        assert data["coupon_valid"] is False
        assert data["message"] == "Invalid coupon code"

    @pytest.mark.asyncio
    async def test_unknown_product(self, client: AsyncClient):
        response = await client.post("/api/v1/payments/quote", json={"product": "lifetime"})

        assert response.status_code == 404
