"""Account management API routes (administrators only)."""

from fastapi import APIRouter

from sharehub.core.auth.dependencies import CurrentAdmin
from sharehub.modules.accounts.schemas import AccountResponse, RoleChangeResponse
from sharehub.modules.accounts.services import AccountSvc


router = APIRouter(prefix="/accounts", tags=["accounts"])


@router.get("", response_model=list[AccountResponse], summary="List accounts")
async def list_accounts(
    _admin: CurrentAdmin,
    service: AccountSvc,
) -> list[AccountResponse]:
    accounts = await service.list_accounts()
    return [AccountResponse.model_validate(account) for account in accounts]


@router.patch(
    "/{account_id}/promote",
    response_model=RoleChangeResponse,
    summary="Promote an account to ADMIN",
)
async def promote(
    account_id: str,
    admin: CurrentAdmin,
    service: AccountSvc,
) -> RoleChangeResponse:
    account = await service.promote(admin, account_id)
    return RoleChangeResponse(
        message="User promoted to admin",
        user=AccountResponse.model_validate(account),
    )


@router.patch(
    "/{account_id}/demote",
    response_model=RoleChangeResponse,
    summary="Demote an account to USER",
    description="An administrator cannot demote itself.",
)
async def demote(
    account_id: str,
    admin: CurrentAdmin,
    service: AccountSvc,
) -> RoleChangeResponse:
    account = await service.demote(admin, account_id)
    return RoleChangeResponse(
        message="User demoted to user",
        user=AccountResponse.model_validate(account),
    )
