"""API version 1 routes."""

from fastapi import APIRouter

from osfinder.api.v1 import auth, backlink, payments, submit, taxonomy

router = APIRouter(prefix="/api/v1")

router.include_router(auth.router)
router.include_router(taxonomy.router)
router.include_router(submit.router)
router.include_router(backlink.router)
router.include_router(payments.router)
